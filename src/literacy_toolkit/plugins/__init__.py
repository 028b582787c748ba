"""Registry of bundled games.

Each game lives in its own directory under this package with a
``manifest.json`` and a catalog JSON file. Games are discovered lazily on
first use; a directory with a broken manifest is skipped with a warning
instead of taking the whole registry down.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from literacy_toolkit.core.schemas import ValidationError, validate_catalog
from literacy_toolkit.plugins.validation import (
    ManifestValidationError,
    validate_manifest,
)

logger = logging.getLogger(__name__)


class MissingResourcesError(RuntimeError):
    """Raised when a game's catalog cannot be resolved."""


class UnsupportedGameError(MissingResourcesError):
    """Raised when a game code is not registered."""


@dataclass(frozen=True)
class GamePlugin:
    code: str
    name: str
    kind: str
    catalog_path: Path

    def load_catalog_data(self) -> Dict[str, Any]:
        """Read and validate the raw catalog payload."""
        if not self.catalog_path.exists():
            raise MissingResourcesError(
                f"Missing catalog for game {self.code}: {self.catalog_path}"
            )
        try:
            data = json.loads(self.catalog_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise MissingResourcesError(
                f"Cannot read catalog for game {self.code}: {exc}"
            ) from exc
        validate_catalog(data, strict=True)
        return data


def _get_bundled_games_dir() -> Path:
    """Get the bundled games directory (this package)."""
    return Path(__file__).resolve().parent


def discover_games(root: Path) -> tuple[Dict[str, GamePlugin], Optional[str], Optional[str]]:
    """Discover and validate all games under ``root``.

    Returns:
        Tuple of (registry, default_code, error_message).
        If error_message is not None, it indicates a non-fatal error that
        should be reported but doesn't prevent operation.
    """
    registry: Dict[str, GamePlugin] = {}
    default_code: Optional[str] = None
    error_message: Optional[str] = None
    skipped: List[str] = []

    if not root.exists():
        return {}, None, f"Games directory missing: {root}"

    for entry in sorted(root.iterdir()):
        if not entry.is_dir():
            continue
        manifest_path = entry / "manifest.json"
        if not manifest_path.exists():
            continue

        try:
            validated = validate_manifest(manifest_path)
        except ManifestValidationError as exc:
            logger.warning("Skipping invalid game %s: %s", entry.name, exc)
            skipped.append(entry.name)
            continue

        if validated.code in registry:
            logger.warning("Duplicate game code '%s' - skipping %s", validated.code, entry.name)
            skipped.append(entry.name)
            continue

        registry[validated.code] = GamePlugin(
            code=validated.code,
            name=validated.name,
            kind=validated.kind,
            catalog_path=(entry / validated.catalog_path).resolve(),
        )
        if validated.default:
            default_code = validated.code

    if not registry:
        error_message = f"No valid games found in {root}"
        if skipped:
            error_message += f"\nSkipped games with errors: {', '.join(skipped)}"
        return {}, None, error_message

    if skipped:
        error_message = f"Some games could not be loaded: {', '.join(skipped)}"

    if not default_code:
        default_code = sorted(registry)[0]

    logger.info("Discovered %d game(s) in %s", len(registry), root)
    return registry, default_code, error_message


# Lazy initialization - games are NOT discovered at import time
_GAMES: Dict[str, GamePlugin] = {}
_DEFAULT_CODE: Optional[str] = None
_INIT_ERROR: Optional[str] = None
_INITIALIZED = False


def _ensure_initialized() -> None:
    """Ensure the game registry is initialized."""
    global _GAMES, _DEFAULT_CODE, _INIT_ERROR, _INITIALIZED
    if not _INITIALIZED:
        _GAMES, _DEFAULT_CODE, _INIT_ERROR = discover_games(_get_bundled_games_dir())
        _INITIALIZED = True


def get_initialization_error() -> Optional[str]:
    """Return any error that occurred during discovery, or None."""
    _ensure_initialized()
    return _INIT_ERROR


def list_game_plugins() -> Iterable[GamePlugin]:
    _ensure_initialized()
    return _GAMES.values()


def supported_game_codes() -> list[str]:
    _ensure_initialized()
    return sorted(_GAMES.keys())


def default_game_code() -> Optional[str]:
    _ensure_initialized()
    return _DEFAULT_CODE


def get_game_plugin(code: Optional[str]) -> GamePlugin:
    _ensure_initialized()
    if not code:
        code = _DEFAULT_CODE
    plugin = _GAMES.get(code)
    if not plugin:
        raise UnsupportedGameError(f"Unsupported game code: {code}")
    return plugin


@lru_cache(maxsize=None)
def load_catalog_data(code: Optional[str]) -> Dict[str, Any]:
    """Load the validated catalog payload for a game (cached, load-once)."""
    return get_game_plugin(code).load_catalog_data()


__all__ = [
    "GamePlugin",
    "MissingResourcesError",
    "UnsupportedGameError",
    "ManifestValidationError",
    "ValidationError",
    "discover_games",
    "get_initialization_error",
    "list_game_plugins",
    "supported_game_codes",
    "default_game_code",
    "get_game_plugin",
    "load_catalog_data",
]
