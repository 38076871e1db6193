"""Scalar input control, analogous to HTML's <input> and <textarea>."""
import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Generic, Literal, Optional, TypeVar

from pydantic import model_serializer

from .base import Control, mask_secret
from .decoding import FormValues, take_first
from .failures import FailureKind, ValidationFailure

logger = logging.getLogger(__name__)

NUMERIC_TYPES: frozenset[str] = frozenset({"number", "range"})

_CLOCK = r"(\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{1,9}))?)?"
_CLOCK_WITH_SECONDS = r"(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?"
_DATE = r"(\d{4})-(\d{2})-(\d{2})"

TIME_PATTERN = re.compile(_CLOCK, re.ASCII)
DATE_PATTERN = re.compile(_DATE, re.ASCII)
DATETIME_PATTERN = re.compile(
    _DATE + "T" + _CLOCK_WITH_SECONDS + r"(Z|[+-]\d{2}:\d{2})", re.ASCII
)
DATETIME_LOCAL_PATTERN = re.compile(_DATE + "T" + _CLOCK, re.ASCII)

T = TypeVar("T")


@dataclass
class Parsed(Generic[T]):
    """Outcome of parsing an input's value into a structured type.

    ``value`` is None when the input is empty or did not parse.
    """

    value: Optional[T] = None
    failure: Optional[ValidationFailure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None


def _microseconds(fraction: Optional[str]) -> int:
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, "0"))


def _clock(groups: tuple[Optional[str], ...]) -> time:
    hour, minute, second, fraction = groups
    return time(int(hour), int(minute), int(second or 0), _microseconds(fraction))


def _offset(designator: str) -> timezone:
    if designator == "Z":
        return timezone.utc
    sign = -1 if designator[0] == "-" else 1
    hours, minutes = designator[1:].split(":")
    return timezone(sign * timedelta(hours=int(hours), minutes=int(minutes)))


class Input(Control):
    """A single named value with optional constraints.

    ``type`` is a free-form tag such as ``"text"``, ``"password"`` or
    ``"number"``. It changes how ``min``/``max`` are compared and whether the
    value is masked on output, but the value itself is never checked against
    it. Some fields are mutually irrelevant, e.g. ``step`` on a text input;
    setting them is harmless.
    """

    control: Literal["input"] = "input"
    type: str = ""
    value: str = ""
    min_length: int = 0
    max_length: int = 0
    step: float = 0
    min: str = ""
    max: str = ""

    def extract(self, form: FormValues) -> list[str]:
        """Set ``value`` to the first value found at ``form[name]``.

        The taken value is removed from ``form``; any others stay for
        same-named controls extracted afterwards.
        """
        value = take_first(form, self.name)
        if value is None:
            return []
        self.value = value
        return [self.name]

    def validate(self) -> Optional[ValidationFailure]:
        """Perform the minimal checks a browser would make for this input.

        ``required``, ``max``, ``min``, ``max_length`` and ``min_length`` are
        checked in that order and the first failure is reported. Bespoke
        rules can be layered on afterwards by setting ``error`` directly.
        """
        return self._record(self._check())

    def _check(self) -> Optional[ValidationFailure]:
        if self.required and not self.value:
            return ValidationFailure(FailureKind.REQUIRED)

        if self.value:
            if self.max and self._less(self.max, self.value):
                return ValidationFailure(FailureKind.MAX, limit=self.max)
            if self.min and self._less(self.value, self.min):
                return ValidationFailure(FailureKind.MIN, limit=self.min)

        length = len(self.value)
        if self.max_length > 0 and length > self.max_length:
            return ValidationFailure(FailureKind.MAX_LENGTH, limit=str(self.max_length))
        if self.min_length > 0 and length < self.min_length:
            return ValidationFailure(FailureKind.MIN_LENGTH, limit=str(self.min_length))
        return None

    def _less(self, a: str, b: str) -> bool:
        if self.type in NUMERIC_TYPES:
            try:
                return float(a) < float(b)
            except ValueError:
                logger.debug(f"Comparing {a!r} and {b!r} as text on {self.type} input {self.name!r}")
        return a < b

    def _parse(self, pattern: re.Pattern, kind: FailureKind, build) -> Parsed:
        if not self.value:
            return Parsed()
        match = pattern.fullmatch(self.value)
        if match is not None:
            try:
                return Parsed(value=build(match.groups()))
            except ValueError as e:
                logger.debug(f"{self.value!r} matched {kind.value} layout but is out of range: {e}")
        failure = ValidationFailure(kind, subject=self.value)
        self._record(failure)
        return Parsed(failure=failure)

    def parse_time(self) -> Parsed[time]:
        """Parse the value as a time of day, e.g. ``13:45`` or ``13:45:30.5``."""
        return self._parse(TIME_PATTERN, FailureKind.PARSE_TIME, _clock)

    def parse_date(self) -> Parsed[date]:
        """Parse the value as a calendar date, ``YYYY-MM-DD``."""
        return self._parse(
            DATE_PATTERN,
            FailureKind.PARSE_DATE,
            lambda g: date(int(g[0]), int(g[1]), int(g[2])),
        )

    def parse_datetime(self) -> Parsed[datetime]:
        """Parse the value as an RFC 3339 timestamp with a timezone."""
        return self._parse(
            DATETIME_PATTERN,
            FailureKind.PARSE_DATETIME,
            lambda g: datetime.combine(
                date(int(g[0]), int(g[1]), int(g[2])),
                _clock(g[3:7]),
                tzinfo=_offset(g[7]),
            ),
        )

    def parse_datetime_local(self) -> Parsed[datetime]:
        """Parse the value as a timezone-naive ``YYYY-MM-DDTHH:MM[:SS]``."""
        return self._parse(
            DATETIME_LOCAL_PATTERN,
            FailureKind.PARSE_DATETIME_LOCAL,
            lambda g: datetime.combine(date(int(g[0]), int(g[1]), int(g[2])), _clock(g[3:7])),
        )

    @property
    def display_value(self) -> str:
        return mask_secret(self.type, self.value)

    @model_serializer
    def serialize_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"label": self.label}
        if self.type:
            data["type"] = self.type
        data["name"] = self.name
        data["value"] = self.display_value
        if self.error:
            data["error"] = self.error
        if self.required:
            data["required"] = True
        if self.min_length > 0:
            data["minlength"] = self.min_length
        if self.max_length > 0:
            data["maxlength"] = self.max_length
        if self.step > 0:
            data["step"] = self.step
        if self.min:
            data["min"] = self.min
        if self.max:
            data["max"] = self.max
        return data

    def to_xml(self) -> ET.Element:
        element = ET.Element("c:Input")
        element.set("label", self.label)
        element.set("name", self.name)
        if self.type:
            element.set("type", self.type)
        element.set("value", self.display_value)
        if self.min_length > 0:
            element.set("minlength", str(self.min_length))
        if self.max_length > 0:
            element.set("maxlength", str(self.max_length))
        if self.step > 0:
            element.set("step", f"{self.step:f}")
        if self.min:
            element.set("min", self.min)
        if self.max:
            element.set("max", self.max)
        if self.required:
            element.set("required", "true")
        self._append_error(element)
        return element
