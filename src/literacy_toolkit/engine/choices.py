"""
Module: engine.choices

Purpose:
    Choice Generator. Produces the shuffled set of candidate keys shown to
    the learner for a family: unused valid keys mixed with distractors
    (keys from the game's key universe that do not produce a member).

Key Functions:
    - generate_choices(): Candidate keys for one turn

Algorithm:
    1. Remaining valid keys = valid keys minus the answer keys of items
       already built in this family
    2. If none remain (family mastered), fall back to every valid key
    3. Shuffle and keep up to total_count - 1 of them (a single slot is
       always a valid key)
    4. Fill the other slots with distractors drawn without replacement
    5. If distractors run out, top up with further valid keys
    6. Shuffle the combined list

Used By:
    - engine.progression: ProgressionEngine.generate_choices
"""

from __future__ import annotations

import random
from typing import AbstractSet, List, Optional

from literacy_toolkit.core.models import Family, SessionState


def remaining_valid_keys(state: SessionState, family: Family) -> List[str]:
    """Valid keys whose items are not yet built, in sorted order."""
    progress = state.progress_for(family.key)
    built = set(progress.built_items) if progress else set()
    used = {item.answer_key for item in family.items if item.word in built}
    return [k for k in family.sorted_keys if k not in used]


def generate_choices(
    state: SessionState,
    family: Optional[Family],
    total_count: int,
    *,
    key_universe: AbstractSet[str],
    rng: random.Random,
) -> List[str]:
    """
    Produce ``total_count`` shuffled candidate keys for ``family``.

    Args:
        state: Current session state (for built items)
        family: Family the learner is working on; None gives []
        total_count: Number of keys wanted
        key_universe: Every key the game can show
        rng: Random source (seed it for reproducible choices)

    Returns:
        Distinct keys; fewer than total_count only when the key universe
        is too small

    Invariants:
        - at least one returned key validates against family whenever
          total_count >= 1
        - no duplicates
    """
    if family is None or total_count <= 0:
        return []

    candidates = remaining_valid_keys(state, family) or family.sorted_keys
    rng.shuffle(candidates)

    valid_slots = total_count - 1 if total_count >= 2 else total_count
    selected = candidates[:valid_slots]

    pool = sorted(key_universe - family.valid_answer_keys)
    wanted = total_count - len(selected)
    distractors = rng.sample(pool, min(wanted, len(pool)))

    shortfall = total_count - len(selected) - len(distractors)
    if shortfall > 0:
        selected += candidates[valid_slots:valid_slots + shortfall]

    choices = selected + distractors
    rng.shuffle(choices)
    return choices
