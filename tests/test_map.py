"""Tests for the open Map control."""
import pytest

from hyprctl.controls import FailureKind, Map


class TestMapExtract:
    def test_named_map_takes_bracketed_keys(self) -> None:
        field = Map(name="foo")
        form = {"foo[bar]": ["x"], "other": ["y"]}

        consumed = field.extract(form)

        assert field.entries == {"bar": ["x"]}
        assert consumed == ["foo[bar]"]
        assert form == {"other": ["y"]}

    def test_named_map_keeps_every_value(self) -> None:
        field = Map(name="data")
        form = {
            "tree": ["oak"],
            "data[food]": ["icecream"],
            "data[drinks]": ["water", "tea"],
        }

        field.extract(form)

        assert field.entries == {"food": ["icecream"], "drinks": ["water", "tea"]}
        assert form == {"tree": ["oak"]}

    def test_unnamed_map_is_catch_all(self) -> None:
        field = Map()
        form = {
            "tree": ["oak"],
            "data[food]": ["icecream"],
            "data[drinks]": ["water", "tea"],
        }

        field.extract(form)

        assert field.entries == {
            "tree": ["oak"],
            "data[food]": ["icecream"],
            "data[drinks]": ["water", "tea"],
        }
        assert form == {}

    def test_empty_source_is_noop(self) -> None:
        field = Map(name="foo", entries={"kept": ["1"]})

        assert field.extract({}) == []
        assert field.entries == {"kept": ["1"]}

    def test_merges_into_existing_entries(self) -> None:
        field = Map(name="foo", entries={"kept": ["1"]})

        field.extract({"foo[new]": ["2"]})

        assert field.entries == {"kept": ["1"], "new": ["2"]}

    @pytest.mark.parametrize("name,key,expected", [
        ("foo", "bar", "foo[bar]"),
        ("", "bar", "bar"),
    ])
    def test_named_key(self, name: str, key: str, expected: str) -> None:
        assert Map(name=name).named_key(key) == expected


class TestMapValidate:
    def test_max_entries(self) -> None:
        field = Map(name="foo", max_entries=1)
        field.extract({"foo[bar]": ["two"], "foo[baz]": ["three"]})

        failure = field.validate()

        assert failure is not None
        assert failure.kind == FailureKind.MAP_MAX_ENTRIES
        assert field.error == "contains more than 1 entry(s)"

    def test_max_values(self) -> None:
        field = Map(name="foo", max_values=1)
        field.extract({"foo[bar]": ["two", "three"]})

        failure = field.validate()

        assert failure is not None
        assert failure.kind == FailureKind.MAP_MAX_VALUES
        assert field.error == "contains an entry with more than 1 value(s)"

    def test_max_key_length(self) -> None:
        field = Map(name="foo", max_key_length=256)
        field.extract({f"foo[{'barbaz' * 50}]": ["two"]})

        failure = field.validate()

        assert failure is not None
        assert failure.kind == FailureKind.MAP_MAX_KEY_LENGTH
        assert field.error == "contains a key longer than 256 char(s)"

    def test_max_value_length_names_key(self) -> None:
        field = Map(max_value_length=3, entries={"note": ["ok", "too long"]})

        failure = field.validate()

        assert failure is not None
        assert failure.kind == FailureKind.MAP_MAX_VALUE_LENGTH
        assert field.error == "key 'note' contains a value longer than 3 char(s)"

    def test_entry_count_checked_last(self) -> None:
        field = Map(max_key_length=2, max_entries=1, entries={"abc": ["x"], "def": ["y"]})

        failure = field.validate()

        assert failure is not None
        assert failure.kind == FailureKind.MAP_MAX_ENTRIES

    def test_last_violation_wins_within_entry(self) -> None:
        field = Map(max_key_length=2, max_values=1, entries={"abc": ["x", "y"]})

        failure = field.validate()

        assert failure is not None
        assert failure.kind == FailureKind.MAP_MAX_VALUES

    def test_last_violation_wins_across_entries(self) -> None:
        field = Map(
            max_key_length=3,
            max_value_length=2,
            entries={"long_key": ["v"], "a": ["xyz"]},
        )

        failure = field.validate()

        assert failure is not None
        assert failure.kind == FailureKind.MAP_MAX_KEY_LENGTH

    def test_within_bounds(self) -> None:
        field = Map(max_entries=2, max_values=2, entries={"a": ["1", "2"]})

        assert field.validate() is None
        assert field.error == ""

    def test_unbounded_by_default(self) -> None:
        field = Map(entries={"x" * 1000: ["y" * 1000] * 100})
        assert field.validate() is None

    def test_revalidation_after_fix_clears_error(self) -> None:
        field = Map(max_entries=1, entries={"a": ["1"], "b": ["2"]})
        field.validate()

        del field.entries["b"]

        assert field.validate() is None
        assert field.error == ""
