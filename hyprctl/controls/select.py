"""Enumerated-choice control, analogous to HTML's <select>."""
import logging
import xml.etree.ElementTree as ET
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr, model_serializer

from .base import Control
from .decoding import FormValues, take_all, take_first
from .failures import FailureKind, ValidationFailure

logger = logging.getLogger(__name__)


class Option(BaseModel):
    """One choice of a Select. ``label`` falls back to ``value`` for display."""

    model_config = ConfigDict(extra="forbid")

    value: str = ""
    label: str = ""
    selected: bool = False
    disabled: bool = False

    @property
    def display_label(self) -> str:
        return self.label or self.value

    @model_serializer
    def serialize_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"value": self.value}
        if self.label:
            data["label"] = self.label
        if self.selected:
            data["selected"] = True
        if self.disabled:
            data["disabled"] = True
        return data

    def to_xml(self) -> ET.Element:
        element = ET.Element("c:Option")
        if self.selected:
            element.set("selected", "")
        if self.disabled:
            element.set("disabled", "")
        if self.label:
            element.set("value", self.value)
        element.text = self.display_label
        return element


class Select(Control):
    """A control whose value(s) must be one of an ordered set of options.

    Options are matched in order, first match wins. A submitted value with no
    matching enabled option is kept as a synthetic option, selected and
    disabled, at the front of ``options`` so the client can see what it sent,
    and is reported by the next ``validate()``.
    """

    control: Literal["select"] = "select"
    multiple: bool = False
    options: list[Option] = []

    _unknown: list[str] = PrivateAttr(default_factory=list)
    _synthetic: list[Option] = PrivateAttr(default_factory=list)

    def set_values(self, *values: str) -> Optional[ValidationFailure]:
        """Select exactly the options matching ``values``.

        Returns:
            An unknown-option failure naming the last unmatched value, or None.
        """
        self.options = [o for o in self.options if not any(o is s for s in self._synthetic)]
        self._synthetic = []
        for option in self.options:
            option.selected = False
        self._unknown = []

        failure = None
        for value in values:
            match = next(
                (o for o in self.options if o.value == value and not o.disabled),
                None,
            )
            if match is not None:
                match.selected = True
                continue

            logger.debug(f"Select {self.name!r} received unknown option {value!r}")
            self._unknown.append(value)
            synthetic = Option(value=value, selected=True, disabled=True)
            self._synthetic.append(synthetic)
            self.options.insert(0, synthetic)
            failure = ValidationFailure(FailureKind.UNKNOWN_OPTION, subject=value)
        return failure

    def extract(self, form: FormValues) -> list[str]:
        """Select the options submitted at ``form[name]``.

        When ``multiple`` is set every value is taken; otherwise only the
        first, following the same partial consumption as Input.
        """
        if self.multiple:
            values = take_all(form, self.name)
            if values is None:
                return []
            self.set_values(*values)
        else:
            value = take_first(form, self.name)
            if value is None:
                return []
            self.set_values(value)
        return [self.name]

    def values(self) -> list[str]:
        """Selected, enabled option values in option order.

        Only the first is returned unless ``multiple`` is set.
        """
        selected = [o.value for o in self.options if o.selected and not o.disabled]
        if not self.multiple:
            return selected[:1]
        return selected

    def value(self) -> str:
        """The first selected value, or an empty string."""
        values = self.values()
        return values[0] if values else ""

    @property
    def unknown_values(self) -> list[str]:
        return list(self._unknown)

    def validate(self) -> Optional[ValidationFailure]:
        if self._unknown:
            return self._record(
                ValidationFailure(FailureKind.UNKNOWN_OPTION, subject=self._unknown[-1])
            )
        if self.required and not self.values():
            return self._record(ValidationFailure(FailureKind.REQUIRED))
        return self._record(None)

    @model_serializer
    def serialize_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"label": self.label, "name": self.name}
        if self.multiple:
            data["multiple"] = True
        if self.required:
            data["required"] = True
        if self.error:
            data["error"] = self.error
        data["options"] = [o.serialize_json() for o in self.options]
        return data

    def to_xml(self) -> ET.Element:
        element = ET.Element("c:Select")
        if self.multiple:
            element.set("multiple", "")
        element.set("label", self.label)
        element.set("name", self.name)
        if self.required:
            element.set("required", "true")
        self._append_error(element)
        for option in self.options:
            element.append(option.to_xml())
        return element
