"""Tests for celebration banners and spoken phrases."""

import logging
import random

import pytest

from literacy_toolkit.core.models import AttemptOutcome, AttemptResult, Item
from literacy_toolkit.feedback import (
    announce,
    celebration_message,
    duplicate_phrase,
    phrases_for,
    retry_phrase,
    success_phrase,
    tier_complete_phrase,
)
from literacy_toolkit.feedback.messages import (
    CHEERS,
    RETRY_PHRASES,
    SUCCESS_PHRASES,
    TIER_COMPLETE_PHRASES,
)

CAT = Item("cat", "c", "🐱")


def success(stars=1, streak=1, **flags):
    return AttemptResult(AttemptOutcome.SUCCESS, "c", CAT, stars=stars, streak=streak, **flags)


class RecordingSpeaker:
    def __init__(self):
        self.spoken = []

    def speak(self, text):
        self.spoken.append(text)


class BrokenSpeaker:
    def speak(self, text):
        raise RuntimeError("audio device unavailable")


class TestCelebrationMessage:
    """Tests for celebration_message priority rules."""

    @pytest.mark.parametrize("outcome", [
        AttemptOutcome.WRONG_KEY, AttemptOutcome.DUPLICATE, AttemptOutcome.NO_FAMILY,
    ])
    def test_failure_is_try_again(self, outcome):
        message = celebration_message(AttemptResult(outcome, "z"))
        assert message.text == "Try again!"
        assert message.emoji == "💪"

    def test_tier_complete_wins(self):
        result = success(stars=3, streak=10, family_completed=True, tier_completed=True)
        assert celebration_message(result, "rhyme").text == "Level Complete!"

    def test_family_complete_beats_stars(self):
        result = success(stars=3, streak=5, family_completed=True)
        assert celebration_message(result).text == "Family Complete!"

    def test_word_builder_stars(self):
        assert celebration_message(success(stars=3, streak=5)).text == "Amazing!"
        assert celebration_message(success(stars=2, streak=3)).text == "Great Job!"

    def test_one_star_is_cheer(self):
        message = celebration_message(success(), rng=random.Random(0))
        assert message in CHEERS

    @pytest.mark.parametrize("streak,text", [
        (3, "On Fire!"),
        (5, "Unstoppable!"),
        (7, "Legendary!"),
        (10, "Champion!"),
        (14, "Champion!"),
    ])
    def test_phonics_streak_banners(self, streak, text):
        message = celebration_message(success(stars=2, streak=streak), "phonics")
        assert message.text == text
        assert message.is_streak

    def test_rhyme_top_banner(self):
        assert celebration_message(success(stars=3, streak=10), "rhyme").text == "Rhyme Master!"

    def test_short_streak_is_cheer(self):
        message = celebration_message(success(streak=2), "rhyme", random.Random(1))
        assert message in CHEERS
        assert not message.is_streak


class TestPhrases:
    """Tests for spoken phrase templates."""

    def test_success_phrase_word_builder_names_word(self):
        for seed in range(10):
            assert "cat" in success_phrase(success(), "word_builder", "-at", random.Random(seed))

    def test_success_phrase_from_kind_templates(self):
        rng = random.Random(2)
        expected = {
            t.format(word="cat", key="c", family="at") for t in SUCCESS_PHRASES["phonics"]
        }
        assert success_phrase(success(), "phonics", "-at", rng) in expected

    def test_retry_phrase_strips_family_dash(self):
        expected = {t.format(family="at") for t in RETRY_PHRASES["word_builder"]}
        for seed in range(10):
            phrase = retry_phrase("word_builder", "-at", random.Random(seed))
            assert phrase in expected
            assert "-at" not in phrase

    def test_duplicate_phrase_names_word(self):
        result = AttemptResult(AttemptOutcome.DUPLICATE, "c", CAT, streak=2)
        for seed in range(5):
            assert "cat" in duplicate_phrase(result, random.Random(seed))

    def test_tier_complete_phrase(self):
        expected = {t.format(tier="Easy") for t in TIER_COMPLETE_PHRASES["rhyme"]}
        assert tier_complete_phrase("rhyme", "Easy", random.Random(0)) in expected

    def test_unknown_kind_uses_word_builder_phrases(self):
        expected = {t.format(family="at") for t in RETRY_PHRASES["word_builder"]}
        assert retry_phrase("chess", "-at", random.Random(0)) in expected


class TestPhrasesFor:
    def test_success(self):
        assert len(phrases_for(success(), kind="word_builder", family_key="-at")) == 1

    def test_tier_complete_adds_phrase(self):
        result = success(family_completed=True, tier_completed=True)
        spoken = phrases_for(result, kind="phonics", tier_name="Easy", rng=random.Random(0))

        assert len(spoken) == 2
        assert spoken[1] in {t.format(tier="Easy") for t in TIER_COMPLETE_PHRASES["phonics"]}

    def test_duplicate(self):
        result = AttemptResult(AttemptOutcome.DUPLICATE, "c", CAT, streak=2)
        spoken = phrases_for(result, kind="word_builder", family_key="-at")
        assert len(spoken) == 1
        assert "cat" in spoken[0]

    def test_wrong_key(self):
        spoken = phrases_for(AttemptResult(AttemptOutcome.WRONG_KEY, "z"), kind="rhyme", family_key="at")
        assert len(spoken) == 1


class TestAnnounce:
    """Tests for announce speaking through a Speaker."""

    def test_speaks_phrases(self):
        speaker = RecordingSpeaker()
        result = success(family_completed=True, tier_completed=True)

        spoken = announce(result, speaker, kind="word_builder", family_key="-at",
                          tier_name="Easy", rng=random.Random(5))

        assert spoken == speaker.spoken
        assert len(spoken) == 2

    def test_speaker_failure_is_logged_not_raised(self, caplog):
        with caplog.at_level(logging.WARNING):
            spoken = announce(success(), BrokenSpeaker(), kind="word_builder", family_key="-at")

        assert spoken == []
        assert "Speaker failed" in caplog.text
