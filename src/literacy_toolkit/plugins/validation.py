"""Game manifest validation.

This module provides runtime validation for the ``manifest.json`` file
that sits next to every bundled game catalog.
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

# =============================================================================
# Schema Versioning
# =============================================================================
# BACKWARD COMPATIBILITY POLICY:
# - Newer code can read older manifest formats without error
# - If loaded manifest_schema_version < expected, a soft warning is logged
# - If loaded manifest_schema_version > expected, no warning
#
# MANIFEST_SCHEMA_VERSION: Version of the game manifest format
# Changelog:
#   v1: code, name, kind, catalog_path, default, generated_at
# =============================================================================
MANIFEST_SCHEMA_VERSION = 1

GAME_KINDS = ("word_builder", "rhyme", "phonics")


class ManifestValidationError(RuntimeError):
    """Raised when manifest validation fails."""


@dataclass(frozen=True)
class ValidatedManifest:
    """Validated and type-safe manifest data."""
    code: str
    name: str
    kind: str  # One of GAME_KINDS; selects feedback phrasing
    catalog_path: str  # Relative path to the catalog JSON
    default: bool
    manifest_schema_version: int
    generated_at: Optional[str]  # ISO timestamp when generated


def validate_manifest(manifest_path: Path) -> ValidatedManifest:
    """Validate manifest.json and return typed data.

    Args:
        manifest_path: Path to manifest.json file.

    Returns:
        ValidatedManifest with validated fields.

    Raises:
        ManifestValidationError: If validation fails.
    """
    try:
        text = manifest_path.read_text(encoding="utf-8")
        data = json.loads(text)
    except (OSError, json.JSONDecodeError) as e:
        raise ManifestValidationError(f"Cannot read manifest {manifest_path}: {e}") from e

    if not isinstance(data, dict):
        raise ManifestValidationError(f"Manifest must be a JSON object: {manifest_path}")

    code = str(data.get("code", "")).strip()
    name = str(data.get("name", "")).strip()

    # Code validation: lower-case identifier, 1-32 chars
    if not re.match(r"^[a-z][a-z0-9_]{0,31}$", code):
        raise ManifestValidationError(
            f"Invalid code '{code}': must be a lower-case identifier of 1-32 characters"
        )

    if not name:
        raise ManifestValidationError("Missing 'name' field in manifest")
    if len(name) > 100:
        raise ManifestValidationError(f"Name exceeds 100 characters: {name[:50]}...")

    kind = data.get("kind", code)
    if kind not in GAME_KINDS:
        raise ManifestValidationError(f"Unknown game kind {kind!r}; expected one of {GAME_KINDS}")

    catalog_path = data.get("catalog_path", "catalog.json")
    if not isinstance(catalog_path, str):
        raise ManifestValidationError("catalog_path must be a string")
    # Catalog must live inside the game directory
    relative = Path(catalog_path)
    if not catalog_path or relative.is_absolute() or relative.anchor or ".." in relative.parts:
        raise ManifestValidationError(
            f"catalog_path '{catalog_path}' must be a relative path inside the game directory"
        )

    default = data.get("default", False)
    if not isinstance(default, bool):
        raise ManifestValidationError("default must be a boolean")

    raw_version = data.get("manifest_schema_version", 1)
    if not isinstance(raw_version, int):
        raise ManifestValidationError("manifest_schema_version must be an integer")

    generated_at = data.get("generated_at")

    if raw_version < MANIFEST_SCHEMA_VERSION:
        logger.warning(
            "Game '%s' has manifest_schema_version %s, expected %s. Consider regenerating it.",
            code, raw_version, MANIFEST_SCHEMA_VERSION,
        )

    return ValidatedManifest(
        code=code,
        name=name,
        kind=kind,
        catalog_path=catalog_path,
        default=default,
        manifest_schema_version=raw_version,
        generated_at=generated_at,
    )
