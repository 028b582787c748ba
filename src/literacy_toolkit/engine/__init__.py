"""
Module: engine

Purpose:
    The content-family progression engine. One generic implementation
    serves the word builder, rhyme and phonics games; each game only
    supplies its own catalog.

Key Functions:
    - create_engine(): Engine for a bundled game code
    - load_catalog(): Cached ContentCatalog for a bundled game
    - generate_choices(): Candidate keys for a turn
    - is_valid() / resolve_item(): Attempt validation
    - evaluate(): Newly qualifying achievements

Key Classes:
    - ProgressionEngine: Session state machine
    - ContentCatalog: Immutable family registry
    - EngineConfig: Engine configuration

Dependencies:
    - literacy_toolkit.core.models: SessionState, Family, Item, ...
    - literacy_toolkit.plugins: Bundled game catalogs

Used By:
    - literacy_toolkit.feedback: Voice and celebration layer
    - scripts/: Catalog validation and session simulation
"""

from .achievements import ACHIEVEMENT_DEFINITIONS, evaluate, unlock_achievements
from .catalog import CatalogError, ContentCatalog, load_catalog
from .choices import generate_choices
from .config import EngineConfig
from .progression import ProgressionEngine, create_engine, stars_for_streak
from .tiers import initialize_tier_progress, is_tier_complete
from .validator import is_valid, resolve_item

__all__ = [
    "ACHIEVEMENT_DEFINITIONS",
    "evaluate",
    "unlock_achievements",
    "CatalogError",
    "ContentCatalog",
    "load_catalog",
    "generate_choices",
    "EngineConfig",
    "ProgressionEngine",
    "create_engine",
    "stars_for_streak",
    "initialize_tier_progress",
    "is_tier_complete",
    "is_valid",
    "resolve_item",
]
