"""Centralized threshold and magic number configuration.

This module contains the streak, star and milestone thresholds used by
the progression engine. Having these in one place makes tuning easier
and keeps the achievement predicates and reward rules consistent.
All thresholds are inclusive (>=).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RewardThresholds:
    """Stars awarded per successful attempt, keyed on the post-attempt streak."""

    base_stars: int = 1
    two_star_streak: int = 3  # streak 3-4 earns 2 stars
    three_star_streak: int = 5  # streak 5+ earns 3 stars


@dataclass(frozen=True)
class AchievementThresholds:
    """Milestones for the built-in achievements."""

    first_word: int = 1
    five_words: int = 5
    ten_words: int = 10
    twenty_words: int = 20
    short_streak: int = 3
    long_streak: int = 5
    few_stars: int = 10
    many_stars: int = 50


@dataclass(frozen=True)
class ChoiceDefaults:
    """Defaults for the choice generator."""

    default_choice_count: int = 6  # used when neither config nor tier sets one


@dataclass(frozen=True)
class CelebrationThresholds:
    """Streak lengths that earn a streak banner instead of a plain cheer."""

    on_fire: int = 3
    unstoppable: int = 5
    legendary: int = 7
    champion: int = 10


# Global instances for easy import
REWARD_THRESHOLDS = RewardThresholds()
ACHIEVEMENT_THRESHOLDS = AchievementThresholds()
CHOICE_DEFAULTS = ChoiceDefaults()
CELEBRATION_THRESHOLDS = CelebrationThresholds()
