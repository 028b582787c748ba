"""
Unit tests for ContentCatalog construction, lookups and the bundled games.
"""

import pytest

from literacy_toolkit.core.models import Tier
from literacy_toolkit.engine import CatalogError, ContentCatalog, load_catalog
from literacy_toolkit.plugins import UnsupportedGameError


class TestFromDict:
    """Tests for ContentCatalog.from_dict."""

    def test_builds_families_in_order(self, small_catalog):
        assert [f.key for f in small_catalog.all_families()] == ["-at", "-an", "-ig", "-ot"]
        assert small_catalog.code == "test"

    def test_lowercases_keys_and_words(self, catalog_data):
        family = catalog_data["families"][0]
        family["valid_keys"] = ["B", "C", "H"]
        family["items"][0] = {"word": "BAT", "answer_key": "B"}

        catalog = ContentCatalog.from_dict("test", catalog_data)
        at = catalog.family_by_key("-at")

        assert at.valid_answer_keys == frozenset({"b", "c", "h"})
        assert at.items[0].word == "bat"
        assert at.items[0].answer_key == "b"

    def test_strips_whitespace_from_loaded_keys(self, catalog_data):
        family = catalog_data["families"][0]
        family["valid_keys"] = [" b", "c ", "h"]
        family["items"][0] = {"word": " bat ", "answer_key": " b"}

        at = ContentCatalog.from_dict("test", catalog_data).family_by_key("-at")

        assert at.valid_answer_keys == frozenset({"b", "c", "h"})
        assert (at.items[0].word, at.items[0].answer_key) == ("bat", "b")

    def test_missing_tier_entry_gets_default_info(self, catalog_data):
        catalog_data["tiers"] = [t for t in catalog_data["tiers"] if t["tier"] != 2]

        catalog = ContentCatalog.from_dict("test", catalog_data)
        info = catalog.tier_info(Tier.MEDIUM)

        assert info.name == "Medium"
        assert info.choice_count == 6

    def test_key_universe_defaults_to_valid_keys(self, catalog_data):
        del catalog_data["key_universe"]

        catalog = ContentCatalog.from_dict("test", catalog_data)

        assert catalog.key_universe == frozenset({"b", "c", "h", "f", "p", "w"})


class TestCatalogErrors:
    """Structural rules are fatal at load time."""

    def test_rejects_duplicate_family_key(self, catalog_data):
        catalog_data["families"][2]["key"] = "-at"
        with pytest.raises(CatalogError, match="Duplicate family key"):
            ContentCatalog.from_dict("test", catalog_data)

    def test_rejects_shared_answer_key_within_family(self, catalog_data):
        catalog_data["families"][0]["items"].append({"word": "bag", "answer_key": "b"})
        with pytest.raises(CatalogError, match="sharing an answer key"):
            ContentCatalog.from_dict("test", catalog_data)

    def test_rejects_empty_tier(self, catalog_data):
        catalog_data["families"][2]["tier"] = 1
        with pytest.raises(CatalogError, match="no families in tier 2"):
            ContentCatalog.from_dict("test", catalog_data)

    def test_rejects_valid_key_outside_universe(self, catalog_data):
        catalog_data["key_universe"] = ["b", "c", "h", "f", "p"]
        with pytest.raises(CatalogError, match="outside the key universe"):
            ContentCatalog.from_dict("test", catalog_data)

    def test_rejects_item_key_outside_valid_set(self, catalog_data):
        catalog_data["families"][1]["items"].append({"word": "man", "answer_key": "m"})
        with pytest.raises(CatalogError, match="Malformed family '-an'"):
            ContentCatalog.from_dict("test", catalog_data)

    def test_rejects_missing_items(self, catalog_data):
        del catalog_data["families"][3]["items"]
        with pytest.raises(CatalogError, match="Malformed family"):
            ContentCatalog.from_dict("test", catalog_data)

    def test_rejects_unknown_tier_number(self, catalog_data):
        catalog_data["families"][3]["tier"] = 5
        with pytest.raises(CatalogError):
            ContentCatalog.from_dict("test", catalog_data)

    def test_rejects_malformed_tier_entry(self, catalog_data):
        catalog_data["tiers"][0]["choice_count"] = 0
        with pytest.raises(CatalogError, match="Malformed tier"):
            ContentCatalog.from_dict("test", catalog_data)


class TestLookups:
    """Tests for read-only lookups (unknown keys return empty/None)."""

    def test_families_by_tier(self, small_catalog):
        assert [f.key for f in small_catalog.families_by_tier(Tier.EASY)] == ["-at", "-an"]
        assert [f.key for f in small_catalog.families_by_tier(3)] == ["-ot"]

    def test_families_by_tier_when_unknown_then_empty(self, small_catalog):
        assert small_catalog.families_by_tier(4) == []

    def test_family_by_key(self, small_catalog):
        assert small_catalog.family_by_key("-ig").tier is Tier.MEDIUM
        assert small_catalog.family_by_key("-zz") is None

    def test_items_for_family_or_key(self, small_catalog):
        family = small_catalog.family_by_key("-an")
        assert [i.word for i in small_catalog.items_for(family)] == ["can", "fan"]
        assert [i.word for i in small_catalog.items_for("-an")] == ["can", "fan"]
        assert small_catalog.items_for("-zz") == []

    def test_item_counts(self, small_catalog):
        assert small_catalog.family_item_count("-at") == 3
        assert small_catalog.family_item_count("-zz") == 0
        assert small_catalog.tier_item_count(Tier.EASY) == 5
        assert small_catalog.tier_item_count(Tier.HARD) == 2

    def test_tier_info(self, small_catalog):
        info = small_catalog.tier_info(1)
        assert info.name == "Easy"
        assert info.description == "Short A"
        assert info.choice_count == 4


class TestBundledGames:
    """Tests for the catalogs shipped with the package."""

    def test_word_builder_tiers(self):
        catalog = load_catalog("word_builder")

        assert [f.key for f in catalog.families_by_tier(Tier.EASY)] == ["-at", "-an", "-ap", "-ad"]
        assert [f.key for f in catalog.families_by_tier(Tier.MEDIUM)] == ["-et", "-en", "-ig", "-in"]
        assert [f.key for f in catalog.families_by_tier(Tier.HARD)] == ["-ot", "-op", "-ug", "-un"]
        assert catalog.family_by_key("-at").total_items == 8
        assert len(catalog.key_universe) == 26

    def test_word_builder_words_are_key_plus_ending(self):
        catalog = load_catalog("word_builder")
        for family in catalog.all_families():
            for item in family.items:
                assert item.word == item.answer_key + family.key.lstrip("-")

    def test_rhyme_words_end_with_family(self):
        catalog = load_catalog("rhyme")
        for family in catalog.all_families():
            for item in family.items:
                assert item.word.endswith(family.key)
                assert item.answer_key == item.word

    def test_phonics_families_have_distinct_beginning_sounds(self):
        catalog = load_catalog("phonics")
        for family in catalog.all_families():
            keys = [item.answer_key for item in family.items]
            assert len(keys) == len(set(keys))
            for item in family.items:
                assert item.word.startswith(item.answer_key)

    @pytest.mark.parametrize("game,counts", [
        ("word_builder", (6, 6, 6)),
        ("rhyme", (3, 3, 4)),
        ("phonics", (3, 3, 4)),
    ])
    def test_choice_counts(self, game, counts):
        catalog = load_catalog(game)
        assert tuple(catalog.tier_info(t).choice_count for t in Tier) == counts

    def test_load_catalog_is_cached(self):
        assert load_catalog("rhyme") is load_catalog("rhyme")

    def test_default_game_is_word_builder(self):
        assert load_catalog().code == "word_builder"

    def test_unknown_game_raises(self):
        with pytest.raises(UnsupportedGameError):
            load_catalog("chess")
