"""
Core Models Package

Immutable, validated data models that serve as the single source of truth
for catalogs and sessions.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. A catalog loaded once can be shared read-only by every session
2. Engine operations return new states instead of mutating old ones
3. Derived values (family completion, success flags) are calculated,
   never stored
"""

from .catalog import Family, Item, Tier, TierInfo, normalise_key
from .progress import Achievement, BuiltRecord, FamilyProgress
from .session import (
    AttemptOutcome,
    AttemptResult,
    ProgressSummary,
    SessionState,
)

__all__ = [
    "Family",
    "Item",
    "Tier",
    "TierInfo",
    "normalise_key",
    "Achievement",
    "BuiltRecord",
    "FamilyProgress",
    "AttemptOutcome",
    "AttemptResult",
    "ProgressSummary",
    "SessionState",
]
