"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .thresholds import (
    ACHIEVEMENT_THRESHOLDS,
    CELEBRATION_THRESHOLDS,
    CHOICE_DEFAULTS,
    REWARD_THRESHOLDS,
)

__all__ = [
    "ACHIEVEMENT_THRESHOLDS",
    "CELEBRATION_THRESHOLDS",
    "CHOICE_DEFAULTS",
    "REWARD_THRESHOLDS",
]
