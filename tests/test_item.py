"""Tests for Item."""

import pytest

from item_ops.core.item import IDENTITY, Item


class TestItemCreation:
    def test_identity_only(self):
        item = Item("a.txt")
        assert item.identity == "a.txt"
        assert item.metadata_count == 0
        assert item.enumerate_metadata() == []

    def test_metadata_from_dict(self):
        item = Item("x", {"b": "2", "a": "1"})
        assert item.metadata_names == ["b", "a"]

    def test_metadata_from_pairs(self):
        item = Item("x", [("k", "v"), ("j", "w")])
        assert item.enumerate_metadata() == [("k", "v"), ("j", "w")]

    def test_empty_identity_allowed(self):
        assert Item("").identity == ""

    def test_rejects_non_string_identity(self):
        with pytest.raises(TypeError, match="identity"):
            Item(3)

    def test_rejects_non_string_value(self):
        with pytest.raises(TypeError, match="string value"):
            Item("x", {"n": 1})

    def test_rejects_empty_name(self):
        with pytest.raises(ValueError, match="non-empty"):
            Item("x", {"": "v"})

    def test_rejects_reserved_name(self):
        with pytest.raises(ValueError, match="reserved"):
            Item("x", {"identity": "y"})


class TestItemMetadataLookup:
    def test_case_insensitive_get(self):
        item = Item("x", {"OrderName": "Order1"})
        assert item.get_metadata("ordername") == "Order1"
        assert item.has_metadata("ORDERNAME")

    def test_missing_returns_empty(self):
        item = Item("x")
        assert item.get_metadata("nope") == ""
        assert not item.has_metadata("nope")

    def test_identity_resolves(self):
        item = Item("x", {"k": "v"})
        assert item.get_metadata(IDENTITY) == "x"
        assert item.get_metadata("IDENTITY") == "x"
        assert item.has_metadata("identity")

    def test_identity_not_enumerated(self):
        item = Item("x", {"k": "v"})
        assert item.metadata_names == ["k"]

    def test_empty_value_is_present(self):
        item = Item("x", {"k": ""})
        assert item.has_metadata("k")

    def test_reset_keeps_first_spelling_and_position(self):
        item = Item("x", [("Name", "1"), ("other", "2"), ("NAME", "3")])
        assert item.enumerate_metadata() == [("Name", "3"), ("other", "2")]


class TestItemImmutability:
    def test_with_metadata_returns_new_item(self):
        item = Item("x", {"a": "1"})
        updated = item.with_metadata({"b": "2", "A": "9"})
        assert item.enumerate_metadata() == [("a", "1")]
        assert updated.enumerate_metadata() == [("a", "9"), ("b", "2")]

    def test_equality(self):
        assert Item("x", {"a": "1"}) == Item("x", {"A": "1"})
        assert Item("x", {"a": "1"}) != Item("x", {"a": "2"})
        assert Item("x") != Item("y")

    def test_hashable(self):
        assert len({Item("x", {"a": "1"}), Item("x", {"a": "1"})}) == 1

    def test_to_dict(self):
        item = Item("x", {"a": "1"})
        assert item.to_dict() == {"identity": "x", "metadata": {"a": "1"}}

    def test_repr(self):
        assert repr(Item("x", {"a": "1"})) == "Item('x', a='1')"
