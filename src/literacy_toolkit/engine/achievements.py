"""
Module: engine.achievements

Purpose:
    Achievement Evaluator. Maps a session state to the achievements whose
    unlock predicate now holds and that are not unlocked yet. Predicates
    read only the state (words built, streak, stars, family and tier
    completion); there are no hidden counters.

Key Functions:
    - default_achievements(): Locked copies of every built-in achievement
    - evaluate(): Newly qualifying achievements (pure)
    - unlock_achievements(): Merge newly qualifying achievements into state

Used By:
    - engine.progression: ProgressionEngine.create_initial_state / attempt
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Callable, Dict, List, Tuple

from literacy_toolkit.common.thresholds import ACHIEVEMENT_THRESHOLDS
from literacy_toolkit.core.models import Achievement, SessionState, Tier

from .catalog import ContentCatalog
from .tiers import is_tier_complete

Predicate = Callable[[SessionState, ContentCatalog], bool]

_T = ACHIEVEMENT_THRESHOLDS

ACHIEVEMENT_DEFINITIONS: Tuple[Achievement, ...] = (
    Achievement("first-word", "First Word!", "Build your first word", "🌟"),
    Achievement("word-family-complete", "Family Reunion", "Complete all words in a word family", "👨‍👩‍👧‍👦"),
    Achievement("five-words", "Word Builder", "Build 5 words in one session", "🏗️"),
    Achievement("ten-words", "Word Factory", "Build 10 words in one session", "🏭"),
    Achievement("twenty-words", "Word Master", "Build 20 words in one session", "👑"),
    Achievement("three-streak", "On a Roll", "Build 3 words in a row", "🔥"),
    Achievement("five-streak", "Hot Streak", "Build 5 words in a row", "⚡"),
    Achievement("level-1-complete", "Easy Expert", "Complete all Level 1 word families", "🥉"),
    Achievement("level-2-complete", "Medium Master", "Complete all Level 2 word families", "🥈"),
    Achievement("level-3-complete", "Hard Hero", "Complete all Level 3 word families", "🥇"),
    Achievement("ten-stars", "Star Collector", "Earn 10 stars", "✨"),
    Achievement("fifty-stars", "Superstar", "Earn 50 stars", "🌠"),
)

PREDICATES: Dict[str, Predicate] = {
    "first-word": lambda s, c: s.words_built >= _T.first_word,
    "five-words": lambda s, c: s.words_built >= _T.five_words,
    "ten-words": lambda s, c: s.words_built >= _T.ten_words,
    "twenty-words": lambda s, c: s.words_built >= _T.twenty_words,
    "three-streak": lambda s, c: s.streak >= _T.short_streak,
    "five-streak": lambda s, c: s.streak >= _T.long_streak,
    "ten-stars": lambda s, c: s.total_score >= _T.few_stars,
    "fifty-stars": lambda s, c: s.total_score >= _T.many_stars,
    "word-family-complete": lambda s, c: any(p.completed for p in s.family_progress.values()),
    "level-1-complete": lambda s, c: is_tier_complete(s, c, Tier.EASY),
    "level-2-complete": lambda s, c: is_tier_complete(s, c, Tier.MEDIUM),
    "level-3-complete": lambda s, c: is_tier_complete(s, c, Tier.HARD),
}


def default_achievements() -> Tuple[Achievement, ...]:
    return ACHIEVEMENT_DEFINITIONS


def evaluate(state: SessionState, catalog: ContentCatalog) -> List[Achievement]:
    """
    Return the locked achievements of ``state`` whose predicate holds.

    Pure: the result depends only on ``state`` and the (static) catalog.
    Achievements without a known predicate never qualify.
    """
    qualifying = []
    for achievement in state.achievements:
        if achievement.unlocked:
            continue
        predicate = PREDICATES.get(achievement.id)
        if predicate is not None and predicate(state, catalog):
            qualifying.append(achievement)
    return qualifying


def unlock_achievements(
    state: SessionState,
    catalog: ContentCatalog,
    at: datetime,
) -> tuple[SessionState, Tuple[Achievement, ...]]:
    """
    Unlock every newly qualifying achievement in ``state``.

    Idempotent: running it again on the returned state unlocks nothing.

    Returns:
        Tuple of (new state, newly unlocked achievements in definition order)
    """
    qualifying = {a.id for a in evaluate(state, catalog)}
    if not qualifying:
        return state, ()

    merged = tuple(
        a.unlock(at) if a.id in qualifying else a
        for a in state.achievements
    )
    newly = tuple(a for a in merged if a.id in qualifying)
    return replace(state, achievements=merged), newly
