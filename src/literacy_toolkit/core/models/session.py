"""
Module: session

Purpose:
    Provides SessionState (the value the progression engine transforms),
    AttemptResult (what one attempt reports back to the caller) and
    ProgressSummary (read-only projection for display).

Key Classes:
    - SessionState: Whole per-session progress, frozen
    - AttemptOutcome: SUCCESS / WRONG_KEY / DUPLICATE / NO_FAMILY
    - AttemptResult: Outcome, reward and completion flags of an attempt
    - ProgressSummary: Counts for the current tier

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .catalog, .progress

Used By:
    - engine.progression: ProgressionEngine
    - engine.achievements: evaluate
    - feedback.messages: celebration_message / phrases

Design Notes:
    SessionState is never mutated. Engine operations build a new value
    with ``dataclasses.replace``; ``family_progress`` is a plain dict that
    is copied on write and must not be modified in place by callers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional, Tuple

from .catalog import Family, Item, Tier
from .progress import Achievement, BuiltRecord, FamilyProgress


@dataclass(frozen=True)
class SessionState:
    """
    Per-session progression state, exclusively owned by one game session.

    Attributes:
        current_tier: Active difficulty tier
        current_family: Family accepting attempts, None while idle
        family_progress: Progress per family key
        streak: Consecutive successful attempts (>= 0)
        total_score: Stars earned this session (>= 0)
        achievements: Every achievement, locked or unlocked
        history: Successful attempts in order

    Invariants:
        - streak >= 0 and total_score >= 0
    """

    current_tier: Tier = Tier.EASY
    current_family: Optional[Family] = None
    family_progress: Dict[str, FamilyProgress] = field(default_factory=dict)
    streak: int = 0
    total_score: int = 0
    achievements: Tuple[Achievement, ...] = ()
    history: Tuple[BuiltRecord, ...] = ()

    def __post_init__(self) -> None:
        if self.streak < 0:
            raise ValueError(f"streak cannot be negative: {self.streak}")
        if self.total_score < 0:
            raise ValueError(f"total_score cannot be negative: {self.total_score}")

    @property
    def is_idle(self) -> bool:
        return self.current_family is None

    @property
    def words_built(self) -> int:
        return len(self.history)

    @property
    def unlocked_ids(self) -> frozenset[str]:
        return frozenset(a.id for a in self.achievements if a.unlocked)

    def progress_for(self, family_key: str) -> Optional[FamilyProgress]:
        return self.family_progress.get(family_key)

    def is_family_completed(self, family_key: str) -> bool:
        progress = self.family_progress.get(family_key)
        return progress is not None and progress.completed


class AttemptOutcome(Enum):
    """How an attempt ended. Only SUCCESS changes progress."""

    SUCCESS = "success"
    WRONG_KEY = "wrong_key"
    DUPLICATE = "duplicate"
    NO_FAMILY = "no_family"


@dataclass(frozen=True)
class AttemptResult:
    """
    Result of one attempt, handed to the UI / voice layer.

    Learner mistakes are reported here as data; the engine never raises
    for them.

    Attributes:
        outcome: How the attempt ended
        key: The key submitted (normalised)
        item: Resolved item on success or duplicate, else None
        stars: Stars awarded (0 unless successful)
        streak: Streak after the attempt
        family_completed: This attempt completed the family
        tier_completed: The current tier is complete after this attempt
        new_achievements: Achievements unlocked by this attempt
    """

    outcome: AttemptOutcome
    key: str = ""
    item: Optional[Item] = None
    stars: int = 0
    streak: int = 0
    family_completed: bool = False
    tier_completed: bool = False
    new_achievements: Tuple[Achievement, ...] = ()

    @property
    def success(self) -> bool:
        return self.outcome is AttemptOutcome.SUCCESS

    @property
    def is_duplicate(self) -> bool:
        return self.outcome is AttemptOutcome.DUPLICATE

    @property
    def word(self) -> Optional[str]:
        return self.item.word if self.item else None


@dataclass(frozen=True, slots=True)
class ProgressSummary:
    """Read-only projection of a session for progress displays."""

    tier: Tier
    tier_name: str
    families_completed: int
    total_families: int
    words_built: int
    total_words: int
    total_stars: int
    achievements_unlocked: int
    total_achievements: int

    @property
    def percent_complete(self) -> int:
        """Share of the tier's words built, rounded to a whole percent."""
        if self.total_words == 0:
            return 0
        return round(100 * self.words_built / self.total_words)
