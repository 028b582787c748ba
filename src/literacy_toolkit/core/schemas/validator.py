"""
Schema Validation Utilities

Validates catalog JSON payloads before they are turned into models.

Two levels:
- Basic checks (always): required fields, schema version, tier range.
- Strict checks (``strict=True``): full JSON Schema validation of the
  payload against ``catalog.schema.json`` via jsonschema.

Structural rules that span several records (answer keys inside the
valid set, unique family keys) are checked by the catalog loader, which
raises CatalogError.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


# Schema version constants
CATALOG_SCHEMA_VERSION = 1

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_catalog(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a game catalog payload.

    Args:
        data: Catalog dictionary loaded from JSON
        strict: If True, also validate against the JSON Schema

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError("Catalog must be a JSON object")

    required = ["schema_version", "tiers", "families"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing],
        )

    version = data.get("schema_version")
    if version != CATALOG_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported catalog schema version: {version} (expected {CATALOG_SCHEMA_VERSION})",
            path="schema_version",
        )

    families = data.get("families")
    if not isinstance(families, list) or not families:
        raise ValidationError("families must be a non-empty list", path="families")

    for i, family in enumerate(families):
        _validate_family(family, f"families[{i}]")

    if strict:
        schema = _load_schema("catalog")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            ) from e


def _validate_family(data: Any, path: str) -> None:
    """Validate one family record."""
    if not isinstance(data, dict):
        raise ValidationError("Family must be an object", path=path)

    required = ["key", "tier", "valid_keys", "items"]
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Family missing required fields: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    tier = data.get("tier")
    if not isinstance(tier, int) or not 1 <= tier <= 3:
        raise ValidationError(f"Invalid tier: {tier!r} (must be 1-3)", path=f"{path}.tier")

    valid_keys = data.get("valid_keys")
    if not isinstance(valid_keys, list) or not valid_keys:
        raise ValidationError("valid_keys must be a non-empty list", path=f"{path}.valid_keys")

    items = data.get("items")
    if not isinstance(items, list):
        raise ValidationError("items must be a list", path=f"{path}.items")
    for i, item in enumerate(items):
        if not isinstance(item, dict) or "word" not in item or "answer_key" not in item:
            raise ValidationError(
                "Item must have word and answer_key",
                path=f"{path}.items[{i}]",
            )
