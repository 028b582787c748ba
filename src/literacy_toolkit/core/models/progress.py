"""
Module: progress

Purpose:
    Per-session progress records: FamilyProgress (which items of a family
    have been built), BuiltRecord (append-only audit trail entry) and
    Achievement (one-way unlockable flag).

Key Functions:
    - FamilyProgress.fresh(family): Empty progress for a family
    - FamilyProgress.with_item(word): New progress with one more built item
    - Achievement.unlock(at): Unlocked copy, stamped with a time

Dependencies:
    - dataclasses (std)
    - datetime (std)

Used By:
    - core.models.session: SessionState
    - engine.progression: ProgressionEngine
    - engine.achievements: evaluate

Design Notes:
    All records are frozen. Progress changes produce new instances, and
    ``completed`` is calculated from the built items, never stored, so
    it cannot drift out of sync with them.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Tuple

from .catalog import Family


@dataclass(frozen=True, slots=True)
class FamilyProgress:
    """
    Completion tracking for one family within a session.

    Attributes:
        family_key: Key of the family being tracked
        total_items: Number of items in the family
        built_items: Words built so far, in build order, no duplicates

    Invariants:
        - completed == (len(built_items) >= total_items)
        - built_items has no duplicates

    Example:
        >>> p = FamilyProgress("-at", 2).with_item("cat")
        >>> p.completed
        False
        >>> p.with_item("bat").completed
        True
    """

    family_key: str
    total_items: int
    built_items: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.total_items < 0:
            raise ValueError(f"total_items cannot be negative: {self.total_items}")
        if len(set(self.built_items)) != len(self.built_items):
            raise ValueError(f"Duplicate built items for {self.family_key!r}")

    @classmethod
    def fresh(cls, family: Family) -> FamilyProgress:
        return cls(family_key=family.key, total_items=family.total_items)

    @property
    def completed(self) -> bool:
        return len(self.built_items) >= self.total_items

    @property
    def remaining(self) -> int:
        return max(self.total_items - len(self.built_items), 0)

    def has_built(self, word: str) -> bool:
        return word in self.built_items

    def with_item(self, word: str) -> FamilyProgress:
        """Return progress with ``word`` appended (caller checks duplicates)."""
        return replace(self, built_items=self.built_items + (word,))


@dataclass(frozen=True, slots=True)
class BuiltRecord:
    """
    One successful attempt, kept in session history for review.

    Attributes:
        item_word: The word that was built
        family_key: Family it was built in
        answer_key: Key the learner chose
        display_symbol: Picture for the word
        timestamp: When the attempt was accepted (UTC)
        stars_awarded: 1, 2 or 3
    """

    item_word: str
    family_key: str
    answer_key: str
    display_symbol: str
    timestamp: datetime
    stars_awarded: int

    def __post_init__(self) -> None:
        if self.stars_awarded not in (1, 2, 3):
            raise ValueError(f"stars_awarded must be 1-3: {self.stars_awarded}")


@dataclass(frozen=True, slots=True)
class Achievement:
    """
    A one-way unlockable flag with display metadata.

    Attributes:
        id: Stable identifier, e.g. "first-word"
        name: Display name, e.g. "First Word!"
        description: What the learner did
        emoji: Badge symbol
        unlocked: Whether it has been earned this session
        unlocked_at: When it was earned, None while locked

    Invariants:
        - unlocked_at is set iff unlocked
        - unlocking is monotonic (see unlock())
    """

    id: str
    name: str
    description: str = ""
    emoji: str = ""
    unlocked: bool = False
    unlocked_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if self.unlocked != (self.unlocked_at is not None):
            raise ValueError(f"Achievement {self.id!r}: unlocked_at must be set iff unlocked")

    def unlock(self, at: datetime) -> Achievement:
        """Return an unlocked copy; an already unlocked achievement is returned as is."""
        if self.unlocked:
            return self
        return replace(self, unlocked=True, unlocked_at=at)
