"""
Module: catalog

Purpose:
    Provides the immutable content models shared by every game: Tier,
    TierInfo, Item and Family. A catalog is loaded once and these values
    are then shared read-only by all sessions.

Key Classes:
    - Tier: Difficulty tier (1, 2, 3)
    - TierInfo: Display metadata for a tier (name, description, choice count)
    - Item: One decodable word with its answer key and picture symbol
    - Family: Themed group of items plus the keys that produce them

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - engine.catalog: ContentCatalog
    - engine.validator: is_valid / resolve_item
    - engine.choices: generate_choices
    - core.models.session: SessionState.current_family
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import FrozenSet, Optional, Tuple


def normalise_key(key: str) -> str:
    """Lower-case a key so comparisons are case-insensitive. Whitespace is kept."""
    return key.lower()


class Tier(IntEnum):
    """
    Difficulty tier of a family.

    Tiers are completed as a unit before advancement. Ordering follows
    the integer value, so ``Tier.EASY < Tier.HARD``.

    Example:
        >>> Tier(2).next()
        <Tier.HARD: 3>
        >>> Tier.HARD.next() is None
        True
    """

    EASY = 1
    MEDIUM = 2
    HARD = 3

    @classmethod
    def first(cls) -> Tier:
        return cls.EASY

    @classmethod
    def last(cls) -> Tier:
        return cls.HARD

    @property
    def is_last(self) -> bool:
        return self is Tier.last()

    def next(self) -> Optional[Tier]:
        """Return the following tier, or None past the last one."""
        if self.is_last:
            return None
        return Tier(self.value + 1)


@dataclass(frozen=True, slots=True)
class TierInfo:
    """
    Display metadata for a tier within one game.

    Attributes:
        tier: Which tier this describes
        name: Short label shown to the learner ("Easy")
        description: One-line description ("Short A word families")
        choice_count: How many candidate keys to show per turn

    Invariants:
        - choice_count >= 1
    """

    tier: Tier
    name: str
    description: str = ""
    choice_count: int = 6

    def __post_init__(self) -> None:
        if self.choice_count < 1:
            raise ValueError(f"choice_count must be positive: {self.choice_count}")


@dataclass(frozen=True, slots=True)
class Item:
    """
    A single content item (word + auxiliary display data).

    Attributes:
        word: The word produced, e.g. "cat"
        answer_key: Key that produces this word within its family, e.g. "c"
        display_symbol: Picture shown next to the word (an emoji)

    Example:
        >>> Item("cat", "c", "🐱").answer_key
        'c'
    """

    word: str
    answer_key: str
    display_symbol: str = ""

    def __post_init__(self) -> None:
        if not self.word.strip():
            raise ValueError("Item word cannot be empty")
        if not self.answer_key.strip():
            raise ValueError(f"Item {self.word!r} has an empty answer key")


@dataclass(frozen=True)
class Family:
    """
    A themed group of items sharing a structural pattern.

    A word ending ("-at"), a rhyme group ("at") or a beginning-sound set
    are all families. ``valid_answer_keys`` is the set of keys that
    produce a member item.

    Attributes:
        key: Unique family identifier
        tier: Difficulty tier the family belongs to
        valid_answer_keys: Keys (lower-case) that produce a member item
        items: Ordered member items
        display_symbol: Picture representing the family as a whole

    Invariants:
        - valid_answer_keys is non-empty
        - every item.answer_key is in valid_answer_keys

    Violations raise ValueError; the catalog loader turns these into
    CatalogError so a malformed catalog fails at load time.
    """

    key: str
    tier: Tier
    valid_answer_keys: FrozenSet[str]
    items: Tuple[Item, ...]
    display_symbol: str = ""

    def __post_init__(self) -> None:
        if not self.valid_answer_keys:
            raise ValueError(f"Family {self.key!r} has no valid answer keys")
        stray = sorted(
            item.answer_key for item in self.items
            if item.answer_key not in self.valid_answer_keys
        )
        if stray:
            raise ValueError(
                f"Family {self.key!r} has items with answer keys outside "
                f"its valid set: {stray}"
            )

    # ─────────────────────────────────────────────────────────────────────────
    # Calculated Properties
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def sorted_keys(self) -> list[str]:
        """Valid keys in a stable order (sets iterate unpredictably)."""
        return sorted(self.valid_answer_keys)

    def item_for_key(self, key: str) -> Optional[Item]:
        """First item produced by ``key`` (case-insensitive), or None."""
        wanted = normalise_key(key)
        for item in self.items:
            if item.answer_key == wanted:
                return item
        return None
