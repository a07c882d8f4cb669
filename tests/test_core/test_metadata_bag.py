"""Tests for MetadataBag."""

import pytest

from docmeta.model.metadata_bag import MetadataBag


class TestMetadataBag:
    """Test cases for MetadataBag."""

    def test_single_and_multi_values(self):
        bag = MetadataBag({"a": "1", "b": ["2", "3"]})

        assert bag["a"] == ("1",)
        assert bag.get_values("b") == ("2", "3")
        assert bag.get_first("b") == "2"
        assert len(bag) == 2

    def test_missing_fields_never_raise(self):
        bag = MetadataBag()

        assert bag.get_first("missing") is None
        assert bag.get_values("missing") == ()
        assert bag.get_date("missing") is None
        assert "missing" not in bag

    def test_empty_value_lists_are_dropped(self):
        bag = MetadataBag({"empty": [], "none": None, "kept": [None, "x"]})

        assert bag.names() == ["kept"]
        assert bag["kept"] == ("x",)

    def test_json_scalars_become_strings(self):
        bag = MetadataBag({"Content-Length": 12345, "pdf:encrypted": False, "ratio": 1.5, "mixed": [1, True, "x"]})

        assert bag["Content-Length"] == ("12345",)
        assert bag["pdf:encrypted"] == ("false",)
        assert bag["ratio"] == ("1.5",)
        assert bag["mixed"] == ("1", "true", "x")

    def test_insertion_order_preserved(self):
        bag = MetadataBag({"z": "1", "a": "2", "m": "3"})

        assert bag.names() == ["z", "a", "m"]
        assert list(bag) == ["z", "a", "m"]

    def test_from_pairs_appends_repeated_names(self):
        bag = MetadataBag.from_pairs([("k", "1"), ("other", "x"), ("k", "2")])

        assert bag["k"] == ("1", "2")
        assert bag.names() == ["k", "other"]

    def test_bag_is_read_only(self):
        bag = MetadataBag({"a": "1"})

        with pytest.raises(TypeError):
            bag["a"] = ("2",)
        with pytest.raises(TypeError):
            bag._fields["a"] = ("2",)

    def test_source_mapping_is_copied(self):
        source = {"a": ["1"]}
        bag = MetadataBag(source)
        source["a"].append("2")
        source["b"] = "3"

        assert bag["a"] == ("1",)
        assert "b" not in bag

    def test_with_values_replaces_and_appends(self):
        bag = MetadataBag({"single": "old", "multi": ["a"]})

        updated = bag.with_values({"single": "new", "multi": ["b", "c"], "added": "x", "skipped": None}, append=("multi",))

        assert updated["single"] == ("new",)
        assert updated["multi"] == ("a", "b", "c")
        assert updated["added"] == ("x",)
        assert "skipped" not in updated
        assert bag["single"] == ("old",)
        assert bag["multi"] == ("a",)

    def test_get_date(self):
        bag = MetadataBag({"good": "2021-01-02T03:04:05Z", "bad": "yesterday"})

        assert bag.get_date("good").year == 2021
        assert bag.get_date("bad") is None

    def test_to_dict(self):
        bag = MetadataBag({"a": "1", "b": ["2", "3"]})

        assert bag.to_dict() == {"a": "1", "b": ["2", "3"]}

    def test_equality_with_same_fields(self):
        assert MetadataBag({"a": "1"}) == MetadataBag({"a": ["1"]})
