"""
Module: feedback.speech

Purpose:
    Capabilities the host provides for voice I/O, and the glue that lets
    a spoken answer drive an attempt. Text-to-speech and speech-to-text
    providers live outside this package; they are only used through the
    Speaker and Transcriber protocols.

Key Functions:
    - spoken_key(): Map a transcript to a key of the current family
    - attempt_spoken(): Transcribe audio and submit it as an attempt
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Optional, Protocol

from literacy_toolkit.core.models import AttemptResult, Family, SessionState, normalise_key

if TYPE_CHECKING:
    from literacy_toolkit.engine import ProgressionEngine


class Speaker(Protocol):
    def speak(self, text: str) -> None:
        ...


class Transcriber(Protocol):
    def transcribe(self, audio: bytes) -> str:
        ...


_NOISE = re.compile(r"[^\w\s'-]")


def _normalise_transcript(transcript: str) -> str:
    return " ".join(_NOISE.sub(" ", transcript.lower()).split())


def spoken_key(transcript: str, family: Optional[Family]) -> str:
    """
    Map what the learner said to a key of ``family``.

    A whole transcript matching an item word or a valid key wins;
    otherwise the first word that matches is used. When nothing matches
    the normalised transcript is returned, so the attempt counts as a
    wrong key.

    Example:
        >>> spoken_key("Cat!", catalog.family_by_key("-at"))
        'c'
    """
    text = _normalise_transcript(transcript)
    if family is None or not text:
        return text

    by_word = {item.word: item.answer_key for item in family.items}
    for candidate in [text, *text.split()]:
        if candidate in by_word:
            return by_word[candidate]
        if normalise_key(candidate) in family.valid_answer_keys:
            return normalise_key(candidate)
    return text


def attempt_spoken(
    engine: ProgressionEngine,
    state: SessionState,
    audio: bytes,
    transcriber: Transcriber,
) -> tuple[SessionState, AttemptResult]:
    """Transcribe ``audio`` and submit the matching key as an attempt."""
    transcript = transcriber.transcribe(audio)
    return engine.attempt(state, spoken_key(transcript, state.current_family))
