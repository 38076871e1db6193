"""Validation failure kinds and the result type returned by validate()."""
from dataclasses import dataclass
from enum import Enum


class FailureKind(Enum):
    """Why a control's current state was rejected."""

    REQUIRED = "required"
    MAX = "max"
    MIN = "min"
    MAX_LENGTH = "max_length"
    MIN_LENGTH = "min_length"
    UNKNOWN_OPTION = "unknown_option"
    MAP_MAX_ENTRIES = "map_max_entries"
    MAP_MAX_KEY_LENGTH = "map_max_key_length"
    MAP_MAX_VALUES = "map_max_values"
    MAP_MAX_VALUE_LENGTH = "map_max_value_length"
    PARSE_TIME = "parse_time"
    PARSE_DATE = "parse_date"
    PARSE_DATETIME = "parse_datetime"
    PARSE_DATETIME_LOCAL = "parse_datetime_local"


_MESSAGES: dict[FailureKind, str] = {
    FailureKind.REQUIRED: "a value is required",
    FailureKind.MAX: "must not be greater than {limit}",
    FailureKind.MIN: "must not be less than {limit}",
    FailureKind.MAX_LENGTH: "must not be longer than {limit} char(s)",
    FailureKind.MIN_LENGTH: "must not be shorter than {limit} char(s)",
    FailureKind.UNKNOWN_OPTION: "{subject!r} is not one of the available options",
    FailureKind.MAP_MAX_ENTRIES: "contains more than {limit} entry(s)",
    FailureKind.MAP_MAX_KEY_LENGTH: "contains a key longer than {limit} char(s)",
    FailureKind.MAP_MAX_VALUES: "contains an entry with more than {limit} value(s)",
    FailureKind.MAP_MAX_VALUE_LENGTH: "key {subject!r} contains a value longer than {limit} char(s)",
    FailureKind.PARSE_TIME: "{subject!r} is not a valid time (HH:MM[:SS[.fraction]])",
    FailureKind.PARSE_DATE: "{subject!r} is not a valid date (YYYY-MM-DD)",
    FailureKind.PARSE_DATETIME: "{subject!r} is not a valid RFC 3339 datetime with a timezone",
    FailureKind.PARSE_DATETIME_LOCAL: "{subject!r} is not a valid local datetime (YYYY-MM-DDTHH:MM[:SS[.fraction]])",
}


@dataclass(frozen=True)
class ValidationFailure:
    """A tagged validation outcome.

    ``limit`` holds the violated bound, where there is one. ``subject`` names
    the offending value or key, where there is one.
    """

    kind: FailureKind
    limit: str = ""
    subject: str = ""

    @property
    def message(self) -> str:
        return _MESSAGES[self.kind].format(limit=self.limit, subject=self.subject)

    def __str__(self) -> str:
        return self.message
