"""
Literacy Toolkit Core Package

Shared data models and schema validation used by the engine, the game
registry and the feedback layer.
"""

from .models import (
    Achievement,
    AttemptOutcome,
    AttemptResult,
    Family,
    FamilyProgress,
    Item,
    SessionState,
    Tier,
)

__all__ = [
    "Achievement",
    "AttemptOutcome",
    "AttemptResult",
    "Family",
    "FamilyProgress",
    "Item",
    "SessionState",
    "Tier",
]
