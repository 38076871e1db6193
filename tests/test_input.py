"""Tests for the scalar Input control."""
from datetime import date, datetime, time, timedelta, timezone

import pytest

from hyprctl.controls import FailureKind, Input


class TestInputExtract:
    def test_takes_first_value_and_leaves_rest(self) -> None:
        field = Input(name="name")
        form = {"name": ["a", "b"]}

        consumed = field.extract(form)

        assert field.value == "a"
        assert consumed == ["name"]
        assert form == {"name": ["b"]}

    def test_same_named_inputs_consume_in_turn(self) -> None:
        first = Input(name="tag")
        second = Input(name="tag")
        form = {"tag": ["x", "y"]}

        first.extract(form)
        second.extract(form)

        assert (first.value, second.value) == ("x", "y")
        assert form == {}

    def test_missing_key_keeps_existing_value(self) -> None:
        field = Input(name="name", value="preset")
        form = {"other": ["z"]}

        assert field.extract(form) == []
        assert field.value == "preset"
        assert form == {"other": ["z"]}

    def test_extracting_twice_is_idempotent(self) -> None:
        field = Input(name="name")
        form = {"name": ["a"]}

        field.extract(form)
        field.extract(form)

        assert field.value == "a"


class TestInputValidate:
    @pytest.mark.parametrize("field,expected", [
        (Input(required=True), FailureKind.REQUIRED),
        (Input(min="123"), None),
        (Input(type="number", value="123", min="1000"), FailureKind.MIN),
        (Input(type="number", value="1000", max="123"), FailureKind.MAX),
        (Input(type="number", value="1234", max_length=3), FailureKind.MAX_LENGTH),
        (Input(type="number", value="123", max_length=3), None),
        (Input(type="number", value="1234", min_length=5), FailureKind.MIN_LENGTH),
        (Input(type="number", value="12345", min_length=5), None),
        (Input(value="def", min="abc"), None),
        (Input(value="def", max="abc"), FailureKind.MAX),
        (Input(value="abc", min="def"), FailureKind.MIN),
        (Input(value="abc", max="def"), None),
        (Input(value="abc", min="abc"), None),
        (Input(value="abc", max="abc"), None),
    ])
    def test_minimal_rule_set(self, field: Input, expected: FailureKind | None) -> None:
        failure = field.validate()

        if expected is None:
            assert failure is None
            assert field.error == ""
        else:
            assert failure is not None
            assert failure.kind == expected
            assert field.error == str(failure)

    def test_numeric_type_compares_numbers(self) -> None:
        field = Input(type="number", value="123", min="1000")

        failure = field.validate()

        assert failure is not None
        assert failure.kind == FailureKind.MIN
        assert field.error == "must not be less than 1000"

    def test_text_type_compares_ordinally(self) -> None:
        assert Input(type="text", value="123", min="1000").validate() is None

    def test_range_type_is_numeric(self) -> None:
        failure = Input(type="range", value="9", max="10").validate()
        assert failure is None

    def test_unparseable_number_falls_back_to_text(self) -> None:
        failure = Input(type="number", value="abc", max="100").validate()
        assert failure is not None
        assert failure.kind == FailureKind.MAX

    def test_first_failure_wins(self) -> None:
        field = Input(type="number", value="12345", max="100", max_length=3)

        failure = field.validate()

        assert failure is not None
        assert failure.kind == FailureKind.MAX

    def test_required_checked_before_length(self) -> None:
        failure = Input(required=True, min_length=3).validate()
        assert failure is not None
        assert failure.kind == FailureKind.REQUIRED

    def test_length_counts_characters(self) -> None:
        assert Input(value="ünï", max_length=3).validate() is None

    def test_bounds_skip_empty_value(self) -> None:
        assert Input(type="number", min="5", max="10").validate() is None

    def test_revalidating_invalid_input_repeats_error(self) -> None:
        field = Input(required=True)

        first = field.validate()
        first_error = field.error
        second = field.validate()

        assert first == second
        assert field.error == first_error != ""

    def test_revalidating_valid_input_stays_clean(self) -> None:
        field = Input(value="ok")

        assert field.validate() is None
        assert field.validate() is None
        assert field.error == ""

    def test_success_clears_previous_error(self) -> None:
        field = Input(name="username", required=True)
        field.validate()
        field.extract({"username": ["john"]})

        assert field.validate() is None
        assert field.error == ""

    def test_temporal_types_are_not_format_checked(self) -> None:
        assert Input(type="date", value="not a date").validate() is None


class TestInputParse:
    def test_empty_value_parses_to_none(self) -> None:
        field = Input(type="date")

        result = field.parse_date()

        assert result.ok
        assert result.value is None
        assert field.error == ""

    @pytest.mark.parametrize("method,kind", [
        ("parse_time", FailureKind.PARSE_TIME),
        ("parse_date", FailureKind.PARSE_DATE),
        ("parse_datetime", FailureKind.PARSE_DATETIME),
        ("parse_datetime_local", FailureKind.PARSE_DATETIME_LOCAL),
    ])
    def test_invalid_value_sets_error(self, method: str, kind: FailureKind) -> None:
        field = Input(value="abc")

        result = getattr(field, method)()

        assert result.value is None
        assert result.failure is not None
        assert result.failure.kind == kind
        assert field.error == str(result.failure)
        assert "'abc'" in field.error

    @pytest.mark.parametrize("value,expected", [
        ("13:45", time(13, 45)),
        ("13:45:30", time(13, 45, 30)),
        ("13:45:30.5", time(13, 45, 30, 500000)),
        ("13:45:30.123456789", time(13, 45, 30, 123456)),
    ])
    def test_parse_time(self, value: str, expected: time) -> None:
        assert Input(type="time", value=value).parse_time().value == expected

    def test_parse_time_rejects_out_of_range(self) -> None:
        result = Input(value="25:00").parse_time()
        assert result.failure is not None

    @pytest.mark.parametrize("method,value,kind", [
        ("parse_date", "٢٠٢٤-٠١-٠٢", FailureKind.PARSE_DATE),
        ("parse_time", "١٣:٤٥", FailureKind.PARSE_TIME),
        ("parse_datetime", "2024-01-02T03:04:0٥Z", FailureKind.PARSE_DATETIME),
        ("parse_datetime_local", "२०२४-01-02T03:04", FailureKind.PARSE_DATETIME_LOCAL),
    ])
    def test_non_ascii_digits_are_rejected(self, method: str, value: str, kind: FailureKind) -> None:
        field = Input(value=value)

        result = getattr(field, method)()

        assert result.value is None
        assert result.failure is not None
        assert result.failure.kind == kind
        assert field.error == str(result.failure)

    def test_parse_date(self) -> None:
        assert Input(value="2024-02-29").parse_date().value == date(2024, 2, 29)

    def test_parse_date_rejects_impossible_day(self) -> None:
        field = Input(value="2023-02-29")
        assert field.parse_date().failure is not None
        assert field.error != ""

    def test_parse_datetime_utc(self) -> None:
        value = Input(value="2024-01-02T03:04:05Z").parse_datetime().value
        assert value == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_parse_datetime_offset(self) -> None:
        value = Input(value="2024-01-02T03:04:05.25+05:30").parse_datetime().value
        assert value is not None
        assert value.microsecond == 250000
        assert value.utcoffset() == timedelta(hours=5, minutes=30)

    def test_parse_datetime_requires_timezone(self) -> None:
        result = Input(value="2024-01-02T03:04:05").parse_datetime()
        assert result.failure is not None
        assert result.failure.kind == FailureKind.PARSE_DATETIME

    def test_parse_datetime_local(self) -> None:
        value = Input(value="2024-01-02T03:04").parse_datetime_local().value
        assert value == datetime(2024, 1, 2, 3, 4)
        assert value.tzinfo is None

    def test_parse_datetime_local_rejects_timezone(self) -> None:
        result = Input(value="2024-01-02T03:04:05Z").parse_datetime_local()
        assert result.failure is not None
