import copy
import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest

# Add src to sys.path so we can import literacy_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from literacy_toolkit.engine import ContentCatalog, EngineConfig, ProgressionEngine

FIXED_NOW = datetime(2026, 1, 5, 9, 30, tzinfo=timezone.utc)

# Small three-tier catalog: tier 1 has 5 words, tiers 2 and 3 have 2 each.
_SMALL_CATALOG = {
    "schema_version": 1,
    "key_universe": list("abcdefghijklmnopqrstuvwxyz"),
    "tiers": [
        {"tier": 1, "name": "Easy", "description": "Short A", "choice_count": 4},
        {"tier": 2, "name": "Medium", "choice_count": 3},
        {"tier": 3, "name": "Hard", "choice_count": 3},
    ],
    "families": [
        {
            "key": "-at", "tier": 1, "display_symbol": "🐱",
            "valid_keys": ["b", "c", "h"],
            "items": [
                {"word": "bat", "answer_key": "b", "display_symbol": "🦇"},
                {"word": "cat", "answer_key": "c", "display_symbol": "🐱"},
                {"word": "hat", "answer_key": "h", "display_symbol": "🎩"},
            ],
        },
        {
            "key": "-an", "tier": 1,
            "valid_keys": ["c", "f"],
            "items": [
                {"word": "can", "answer_key": "c"},
                {"word": "fan", "answer_key": "f"},
            ],
        },
        {
            "key": "-ig", "tier": 2,
            "valid_keys": ["p", "w"],
            "items": [
                {"word": "pig", "answer_key": "p"},
                {"word": "wig", "answer_key": "w"},
            ],
        },
        {
            "key": "-ot", "tier": 3,
            "valid_keys": ["h", "p"],
            "items": [
                {"word": "hot", "answer_key": "h"},
                {"word": "pot", "answer_key": "p"},
            ],
        },
    ],
}


# Common test fixtures
@pytest.fixture
def fixed_clock():
    """Clock that always returns FIXED_NOW."""
    return lambda: FIXED_NOW


@pytest.fixture
def catalog_data():
    """Fresh copy of the small catalog payload (safe to modify)."""
    return copy.deepcopy(_SMALL_CATALOG)


@pytest.fixture
def small_catalog(catalog_data):
    return ContentCatalog.from_dict("test", catalog_data)


@pytest.fixture
def engine(small_catalog, fixed_clock):
    """Seeded engine over the small catalog."""
    return ProgressionEngine(
        catalog=small_catalog,
        config=EngineConfig(seed=7),
        clock=fixed_clock,
    )
