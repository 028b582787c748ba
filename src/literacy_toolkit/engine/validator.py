"""
Module: engine.validator

Purpose:
    Attempt Validator. Decides whether a candidate key belongs to a
    family and resolves the item it produces. Pure functions with no
    side effects; comparisons are case-insensitive.

Key Functions:
    - is_valid(): Key is in the family's valid answer keys
    - resolve_item(): Item produced by the key, or None

Used By:
    - engine.progression: ProgressionEngine.attempt
    - feedback.speech: spoken_key
"""

from __future__ import annotations

from typing import Optional

from literacy_toolkit.core.models import Family, Item, normalise_key


def is_valid(key: str, family: Optional[Family]) -> bool:
    """
    Check whether ``key`` produces a member of ``family``.

    Args:
        key: Candidate key as chosen by the learner (any case)
        family: Family to check against; None is never valid

    Returns:
        True iff the normalised key is in family.valid_answer_keys

    Example:
        >>> is_valid("C", catalog.family_by_key("-at"))
        True
    """
    if family is None or not isinstance(key, str):
        return False
    return normalise_key(key) in family.valid_answer_keys


def resolve_item(key: str, family: Optional[Family]) -> Optional[Item]:
    """Item produced by ``key`` in ``family``, or None when there is none."""
    if not is_valid(key, family):
        return None
    return family.item_for_key(key)
