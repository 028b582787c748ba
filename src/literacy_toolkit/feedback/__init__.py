"""Learner-facing feedback: celebration banners, spoken phrases and voice input."""
from literacy_toolkit.feedback.messages import (
    CelebrationMessage,
    announce,
    celebration_message,
    duplicate_phrase,
    phrases_for,
    retry_phrase,
    success_phrase,
    tier_complete_phrase,
)
from literacy_toolkit.feedback.speech import (
    Speaker,
    Transcriber,
    attempt_spoken,
    spoken_key,
)

__all__ = [
    "CelebrationMessage",
    "Speaker",
    "Transcriber",
    "announce",
    "attempt_spoken",
    "celebration_message",
    "duplicate_phrase",
    "phrases_for",
    "retry_phrase",
    "spoken_key",
    "success_phrase",
    "tier_complete_phrase",
]
