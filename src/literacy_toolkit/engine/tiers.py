"""
Module: engine.tiers

Purpose:
    Tier bookkeeping: completion checks and idempotent progress
    initialization for the families of a tier. Advancement itself is
    ProgressionEngine.advance_tier, which builds on these helpers.

Key Functions:
    - is_tier_complete(): Every family in the tier is completed
    - initialize_tier_progress(): Fresh progress for families without any
"""

from __future__ import annotations

from dataclasses import replace

from literacy_toolkit.core.models import FamilyProgress, SessionState, Tier

from .catalog import ContentCatalog


def is_tier_complete(state: SessionState, catalog: ContentCatalog, tier: Tier | int) -> bool:
    families = catalog.families_by_tier(tier)
    return bool(families) and all(state.is_family_completed(f.key) for f in families)


def initialize_tier_progress(
    state: SessionState,
    catalog: ContentCatalog,
    tier: Tier | int,
) -> SessionState:
    """
    Create progress entries for every family in ``tier`` that has none.

    Existing entries are kept as they are, so calling this again (or on
    a tier that was already visited) never resets progress.
    """
    progress = dict(state.family_progress)
    added = 0
    for family in catalog.families_by_tier(tier):
        if family.key not in progress:
            progress[family.key] = FamilyProgress.fresh(family)
            added += 1
    if not added:
        return state
    return replace(state, family_progress=progress)
