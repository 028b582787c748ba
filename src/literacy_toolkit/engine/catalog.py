"""
Module: engine.catalog

Purpose:
    Content Catalog: the static, immutable registry of families for one
    game. Built once from a validated catalog payload and shared read-only
    by every session.

Key Functions:
    - load_catalog(): Cached catalog for a bundled game code
    - ContentCatalog.from_dict(): Build and check a catalog from a payload

Key Classes:
    - ContentCatalog: Lookups by tier and family key
    - CatalogError: Fatal configuration error in catalog content

Dependencies:
    - literacy_toolkit.core.models: Family, Item, Tier, TierInfo
    - literacy_toolkit.plugins: bundled catalog payloads

Used By:
    - engine.progression: ProgressionEngine
    - engine.achievements: tier completion predicates
    - scripts/validate_catalogs.py
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Dict, FrozenSet, List, Mapping, Optional, Tuple

from literacy_toolkit.common.thresholds import CHOICE_DEFAULTS
from literacy_toolkit.core.models import Family, Item, Tier, TierInfo, normalise_key
from literacy_toolkit.plugins import get_game_plugin, load_catalog_data

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Catalog content breaks a structural rule (fatal, raised at load time)."""


def _clean(text: str) -> str:
    return normalise_key(text.strip())


@dataclass(frozen=True)
class ContentCatalog:
    """
    Immutable registry of families for one game.

    Lookups by unknown key return None and never raise; callers handle
    absence.

    Attributes:
        code: Game code the catalog belongs to
        families: Every family, in catalog order
        tiers: Display metadata per tier
        key_universe: Every key a learner could be shown (valid + distractors)

    Invariants:
        - family keys are unique across the catalog
        - every tier has at least one family
        - answer keys are unique within a family
        - every valid key is in key_universe

    Example:
        >>> catalog = load_catalog("word_builder")
        >>> catalog.family_by_key("-at").total_items
        8
    """

    code: str
    families: Tuple[Family, ...]
    tiers: Mapping[Tier, TierInfo]
    key_universe: FrozenSet[str]
    _by_key: Dict[str, Family] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_key: Dict[str, Family] = {}
        for family in self.families:
            if family.key in by_key:
                raise CatalogError(f"Duplicate family key {family.key!r} in catalog {self.code!r}")
            by_key[family.key] = family

            answer_keys = [item.answer_key for item in family.items]
            if len(set(answer_keys)) != len(answer_keys):
                raise CatalogError(f"Family {family.key!r} has items sharing an answer key")

            outside = family.valid_answer_keys - self.key_universe
            if outside:
                raise CatalogError(
                    f"Family {family.key!r} has valid keys outside the key universe: {sorted(outside)}"
                )

        for tier in Tier:
            if not any(f.tier is tier for f in self.families):
                raise CatalogError(f"Catalog {self.code!r} has no families in tier {tier.value}")

        object.__setattr__(self, "_by_key", by_key)

    # ─────────────────────────────────────────────────────────────────────────
    # Factory Methods
    # ─────────────────────────────────────────────────────────────────────────

    @classmethod
    def from_dict(cls, code: str, data: Mapping[str, Any]) -> ContentCatalog:
        """
        Build a catalog from a (schema-validated) payload.

        Keys and words are lower-cased. When the payload has no
        ``key_universe``, the union of every family's valid keys is used.

        Raises:
            CatalogError: If the content breaks a structural rule
        """
        families: List[Family] = []
        for raw in data.get("families", []):
            try:
                items = tuple(
                    Item(
                        word=_clean(i["word"]),
                        answer_key=_clean(i["answer_key"]),
                        display_symbol=i.get("display_symbol", ""),
                    )
                    for i in raw["items"]
                )
                families.append(
                    Family(
                        key=raw["key"],
                        tier=Tier(raw["tier"]),
                        valid_answer_keys=frozenset(_clean(k) for k in raw["valid_keys"]),
                        items=items,
                        display_symbol=raw.get("display_symbol", ""),
                    )
                )
            except (KeyError, ValueError) as exc:
                raise CatalogError(f"Malformed family {raw.get('key')!r} in {code!r}: {exc}") from exc

        tiers: Dict[Tier, TierInfo] = {}
        for raw in data.get("tiers", []):
            try:
                info = TierInfo(
                    tier=Tier(raw["tier"]),
                    name=raw["name"],
                    description=raw.get("description", ""),
                    choice_count=raw.get("choice_count", CHOICE_DEFAULTS.default_choice_count),
                )
            except (KeyError, ValueError) as exc:
                raise CatalogError(f"Malformed tier entry in {code!r}: {exc}") from exc
            tiers[info.tier] = info
        for tier in Tier:
            tiers.setdefault(tier, TierInfo(tier=tier, name=tier.name.title()))

        if "key_universe" in data:
            universe = frozenset(_clean(k) for k in data["key_universe"])
        else:
            universe = frozenset(k for f in families for k in f.valid_answer_keys)

        catalog = cls(code=code, families=tuple(families), tiers=tiers, key_universe=universe)
        logger.debug("Loaded catalog %s: %d families", code, len(families))
        return catalog

    # ─────────────────────────────────────────────────────────────────────────
    # Lookups
    # ─────────────────────────────────────────────────────────────────────────

    def all_families(self) -> list[Family]:
        return list(self.families)

    def families_by_tier(self, tier: Tier | int) -> list[Family]:
        """Families in ``tier`` in catalog order; empty for an unknown tier."""
        return [f for f in self.families if f.tier == tier]

    def family_by_key(self, key: str) -> Optional[Family]:
        """Family with exactly this key, or None."""
        return self._by_key.get(key)

    def items_for(self, family: Family | str) -> list[Item]:
        """Items of a family (object or key); empty when the key is unknown."""
        if isinstance(family, str):
            found = self.family_by_key(family)
            return list(found.items) if found else []
        return list(family.items)

    def tier_info(self, tier: Tier | int) -> TierInfo:
        return self.tiers[Tier(tier)]

    def family_item_count(self, key: str) -> int:
        family = self.family_by_key(key)
        return family.total_items if family else 0

    def tier_item_count(self, tier: Tier | int) -> int:
        return sum(f.total_items for f in self.families_by_tier(tier))


@lru_cache(maxsize=None)
def load_catalog(code: Optional[str] = None) -> ContentCatalog:
    """
    Load the catalog of a bundled game (cached; loaded once per process).

    Args:
        code: Game code; None selects the default game

    Raises:
        UnsupportedGameError: If the code is not registered
        ValidationError: If the payload fails schema validation
        CatalogError: If the content breaks a structural rule
    """
    plugin = get_game_plugin(code)
    return ContentCatalog.from_dict(plugin.code, load_catalog_data(plugin.code))
