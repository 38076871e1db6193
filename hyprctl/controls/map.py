"""Open-ended key/value control."""
import logging
import xml.etree.ElementTree as ET
from typing import Any, Literal, Optional

from pydantic import model_serializer

from .base import Control
from .decoding import FormValues, take_matching
from .failures import FailureKind, ValidationFailure

logger = logging.getLogger(__name__)


class Map(Control):
    """An arbitrary set of sub-keyed, multi-valued entries.

    Where ``name == "foo"`` a submission such as ``foo[x]=y&foo[a]=b`` fills
    ``entries`` with ``{"x": ["y"], "a": ["b"]}``. An unnamed Map is a
    catch-all that takes every key left in the form, so it has to be
    extracted after all of its siblings.

    The ``max_*`` bounds are only checked by ``validate()`` and do nothing
    when zero.
    """

    control: Literal["map"] = "map"
    max_entries: int = 0
    max_key_length: int = 0
    max_values: int = 0
    max_value_length: int = 0
    entries: dict[str, list[str]] = {}

    def named_key(self, key: str) -> str:
        """Return ``key`` as a form name, e.g. ``foo[bar]`` for Map "foo"."""
        if not self.name:
            return key
        return f"{self.name}[{key}]"

    def sorted_entries(self) -> list[tuple[str, list[str]]]:
        return sorted(self.entries.items())

    def extract(self, form: FormValues) -> list[str]:
        taken = take_matching(form, self.name)
        self.entries.update(taken)
        return [self.named_key(key) for key in taken]

    def validate(self) -> Optional[ValidationFailure]:
        """Check every entry against the bounds.

        Every violation is visited and the last one found is reported; the
        entry count is checked after all entries.
        """
        failure = None
        for key, values in self.sorted_entries():
            if self.max_key_length > 0 and len(key) > self.max_key_length:
                failure = ValidationFailure(
                    FailureKind.MAP_MAX_KEY_LENGTH, limit=str(self.max_key_length)
                )
            if self.max_values > 0 and len(values) > self.max_values:
                failure = ValidationFailure(FailureKind.MAP_MAX_VALUES, limit=str(self.max_values))
            if self.max_value_length > 0:
                for value in values:
                    if len(value) > self.max_value_length:
                        failure = ValidationFailure(
                            FailureKind.MAP_MAX_VALUE_LENGTH,
                            limit=str(self.max_value_length),
                            subject=key,
                        )

        if self.max_entries > 0 and len(self.entries) > self.max_entries:
            failure = ValidationFailure(FailureKind.MAP_MAX_ENTRIES, limit=str(self.max_entries))

        return self._record(failure)

    @model_serializer
    def serialize_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"label": self.label, "name": self.name}
        if self.error:
            data["error"] = self.error
        if self.max_entries > 0:
            data["maxentries"] = self.max_entries
        if self.max_key_length > 0:
            data["maxkeylength"] = self.max_key_length
        if self.max_values > 0:
            data["maxvalues"] = self.max_values
        if self.max_value_length > 0:
            data["maxvaluelength"] = self.max_value_length
        data["entries"] = {key: list(values) for key, values in self.sorted_entries()}
        return data

    def to_xml(self) -> ET.Element:
        element = ET.Element("c:Map")
        element.set("label", self.label)
        element.set("name", self.name)
        if self.max_entries > 0:
            element.set("maxentries", str(self.max_entries))
        if self.max_key_length > 0:
            element.set("maxkeylength", str(self.max_key_length))
        if self.max_values > 0:
            element.set("maxvalues", str(self.max_values))
        if self.max_value_length > 0:
            element.set("maxvaluelength", str(self.max_value_length))
        self._append_error(element)
        for key, values in self.sorted_entries():
            for value in values:
                entry = ET.SubElement(element, "c:Input")
                entry.set("name", self.named_key(key))
                entry.set("value", value)
        return element
