"""
Unit tests for is_valid / resolve_item.
"""

from literacy_toolkit.core.models import Family, Item, Tier
from literacy_toolkit.engine import is_valid, resolve_item


class TestIsValid:
    def test_valid_key(self, small_catalog):
        assert is_valid("c", small_catalog.family_by_key("-at"))

    def test_is_case_insensitive(self, small_catalog):
        assert is_valid("C", small_catalog.family_by_key("-at"))
        assert is_valid("H", small_catalog.family_by_key("-at"))

    def test_padded_key_is_invalid(self, small_catalog):
        family = small_catalog.family_by_key("-at")
        assert not is_valid(" c", family)
        assert not is_valid("c ", family)
        assert resolve_item(" c", family) is None

    def test_invalid_key(self, small_catalog):
        assert not is_valid("z", small_catalog.family_by_key("-at"))
        assert not is_valid("", small_catalog.family_by_key("-at"))

    def test_no_family_is_never_valid(self):
        assert not is_valid("c", None)

    def test_non_string_key_is_invalid(self, small_catalog):
        assert not is_valid(None, small_catalog.family_by_key("-at"))


class TestResolveItem:
    def test_resolves_item(self, small_catalog):
        item = resolve_item("c", small_catalog.family_by_key("-at"))
        assert item.word == "cat"
        assert item.display_symbol == "🐱"

    def test_same_key_resolves_per_family(self, small_catalog):
        assert resolve_item("c", small_catalog.family_by_key("-an")).word == "can"

    def test_invalid_key_resolves_to_none(self, small_catalog):
        assert resolve_item("f", small_catalog.family_by_key("-at")) is None

    def test_valid_key_without_item_resolves_to_none(self):
        family = Family(
            key="-at",
            tier=Tier.EASY,
            valid_answer_keys=frozenset({"b", "c", "s"}),
            items=(Item("bat", "b"), Item("cat", "c")),
        )
        assert is_valid("s", family)
        assert resolve_item("s", family) is None
