"""Form submission control."""
import xml.etree.ElementTree as ET
from typing import Any, Literal

from pydantic import model_serializer

from .base import Element


class Submit(Element):
    """A control that submits its Form.

    A form may offer several Submits with different names and values; the
    pair sent by one is mutually exclusive with those of the others.
    """

    control: Literal["submit"] = "submit"
    label: str = ""
    name: str = ""
    value: str = ""

    @model_serializer
    def serialize_json(self) -> dict[str, Any]:
        data: dict[str, Any] = {"label": self.label}
        if self.name:
            data["name"] = self.name
        if self.name or self.value:
            data["value"] = self.value
        return data

    def to_xml(self) -> ET.Element:
        element = ET.Element("c:Submit")
        if self.name:
            element.set("name", self.name)
            element.set("value", self.value)
        elif self.value:
            element.set("value", self.value)
        element.text = self.label
        return element
