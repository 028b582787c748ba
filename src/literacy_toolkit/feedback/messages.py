"""
Module: feedback.messages

Purpose:
    Turns an AttemptResult into what the learner sees and hears:
    celebration banners and spoken phrases. Runs on the caller's side,
    after the engine has committed the state change.

Key Functions:
    - celebration_message(): Banner text + emoji for a result
    - success_phrase() / retry_phrase() / duplicate_phrase() /
      tier_complete_phrase(): Spoken text for each situation
    - announce(): Speak the phrases for a result through a Speaker

Used By:
    - Host UI layer
    - scripts/simulate_session.py
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from literacy_toolkit.common.thresholds import CELEBRATION_THRESHOLDS
from literacy_toolkit.core.models import AttemptResult

from .speech import Speaker

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CelebrationMessage:
    text: str
    emoji: str
    is_streak: bool = False


TRY_AGAIN = CelebrationMessage("Try again!", "💪")
TIER_COMPLETE = CelebrationMessage("Level Complete!", "🏆")
FAMILY_COMPLETE = CelebrationMessage("Family Complete!", "👨‍👩‍👧‍👦")
THREE_STARS = CelebrationMessage("Amazing!", "🌟")
TWO_STARS = CelebrationMessage("Great Job!", "⭐")

CHEERS: Sequence[CelebrationMessage] = (
    CelebrationMessage("Nice!", "🎉"),
    CelebrationMessage("Good!", "✨"),
    CelebrationMessage("Yay!", "🎊"),
    CelebrationMessage("Super!", "💫"),
)

_C = CELEBRATION_THRESHOLDS


def _streak_banners(kind: str) -> List[tuple[int, CelebrationMessage]]:
    top = "Rhyme Master!" if kind == "rhyme" else "Champion!"
    return [
        (_C.champion, CelebrationMessage(top, "🏆", True)),
        (_C.legendary, CelebrationMessage("Legendary!", "👑", True)),
        (_C.unstoppable, CelebrationMessage("Unstoppable!", "⚡", True)),
        (_C.on_fire, CelebrationMessage("On Fire!", "🔥", True)),
    ]


def celebration_message(
    result: AttemptResult,
    kind: str = "word_builder",
    rng: Optional[random.Random] = None,
) -> CelebrationMessage:
    """
    Pick the banner for a result.

    Failures (wrong key or duplicate) always get "Try again!". Tier and
    family completion win over everything else. The word builder then
    celebrates by stars; rhyme and phonics celebrate by streak.
    """
    rng = rng or random.Random()
    if not result.success:
        return TRY_AGAIN
    if result.tier_completed:
        return TIER_COMPLETE
    if result.family_completed:
        return FAMILY_COMPLETE

    if kind == "word_builder":
        if result.stars == 3:
            return THREE_STARS
        if result.stars == 2:
            return TWO_STARS
    else:
        for threshold, banner in _streak_banners(kind):
            if result.streak >= threshold:
                return banner

    return rng.choice(CHEERS)


# ─────────────────────────────────────────────────────────────────────────────
# Spoken phrases
# ─────────────────────────────────────────────────────────────────────────────

SUCCESS_PHRASES: Dict[str, Sequence[str]] = {
    "word_builder": (
        "You built {word}!",
        "{word}! Great job!",
        "That's {word}!",
        "{word}! Excellent!",
    ),
    "rhyme": (
        "Great job! {word} rhymes with {family}!",
        "You got it! {word} ends with {family}!",
        "That's right!",
        "Perfect rhyme!",
        "Excellent!",
    ),
    "phonics": (
        "Great job! {word} starts with {key}!",
        "You got it! {key} for {word}!",
        "That's right!",
        "Perfect!",
        "Excellent!",
    ),
}

RETRY_PHRASES: Dict[str, Sequence[str]] = {
    "word_builder": (
        "Try again! Which letter makes a word with {family}?",
        "Almost! Give it another try!",
        "Keep trying! You can do it!",
    ),
    "rhyme": (
        "Try again! Find a word that ends with {family}!",
        "Almost! Give it another try!",
        "Keep trying! You can do it!",
    ),
    "phonics": (
        "Try again! Listen to the first sound!",
        "Almost! Give it another try!",
        "Keep trying! You can do it!",
    ),
}

DUPLICATE_PHRASES: Sequence[str] = (
    "You already found {word}! Try a different one!",
    "{word} is done! Can you find another?",
)

TIER_COMPLETE_PHRASES: Dict[str, Sequence[str]] = {
    "word_builder": (
        "Amazing! You finished the {tier} level!",
        "Level complete! You're a word building star!",
        "Wonderful! On to the next level!",
    ),
    "rhyme": (
        "Amazing! You finished the {tier} level!",
        "Level complete! You're a rhyming star!",
        "Wonderful! On to the next level!",
    ),
    "phonics": (
        "Amazing! You finished the {tier} level!",
        "Level complete! You're a phonics star!",
        "Wonderful! On to the next level!",
    ),
}


def _pick(phrases: Dict[str, Sequence[str]], kind: str, rng: random.Random) -> str:
    return rng.choice(phrases.get(kind) or phrases["word_builder"])


def success_phrase(result: AttemptResult, kind: str, family_key: str, rng: random.Random) -> str:
    template = _pick(SUCCESS_PHRASES, kind, rng)
    return template.format(word=result.word or "", key=result.key, family=family_key.lstrip("-"))


def retry_phrase(kind: str, family_key: str, rng: random.Random) -> str:
    return _pick(RETRY_PHRASES, kind, rng).format(family=family_key.lstrip("-"))


def duplicate_phrase(result: AttemptResult, rng: random.Random) -> str:
    return rng.choice(DUPLICATE_PHRASES).format(word=result.word or "")


def tier_complete_phrase(kind: str, tier_name: str, rng: random.Random) -> str:
    return _pick(TIER_COMPLETE_PHRASES, kind, rng).format(tier=tier_name)


def phrases_for(
    result: AttemptResult,
    *,
    kind: str,
    family_key: str = "",
    tier_name: str = "",
    rng: Optional[random.Random] = None,
) -> List[str]:
    """Everything that should be said for a result, in speaking order."""
    rng = rng or random.Random()
    if result.is_duplicate:
        return [duplicate_phrase(result, rng)]
    if not result.success:
        return [retry_phrase(kind, family_key, rng)]

    spoken = [success_phrase(result, kind, family_key, rng)]
    if result.tier_completed:
        spoken.append(tier_complete_phrase(kind, tier_name, rng))
    return spoken


def announce(
    result: AttemptResult,
    speaker: Speaker,
    *,
    kind: str,
    family_key: str = "",
    tier_name: str = "",
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Speak the phrases for ``result``.

    Speaker errors are logged and stop the remaining phrases; they
    never propagate to the caller.

    Returns:
        The phrases that were spoken successfully
    """
    spoken: List[str] = []
    for text in phrases_for(result, kind=kind, family_key=family_key, tier_name=tier_name, rng=rng):
        try:
            speaker.speak(text)
        except Exception as exc:
            logger.warning("Speaker failed on %r: %s", text, exc)
            break
        spoken.append(text)
    return spoken
