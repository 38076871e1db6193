"""Navigation control requiring no input."""
import xml.etree.ElementTree as ET
from typing import Any, Literal

from pydantic import model_serializer

from .base import Element


class Link(Element):
    """A state transition that needs no input, such as plain navigation."""

    control: Literal["link"] = "link"
    label: str = ""
    href: str = ""

    @model_serializer
    def serialize_json(self) -> dict[str, Any]:
        return {"label": self.label, "href": self.href}

    def to_xml(self) -> ET.Element:
        element = ET.Element("c:Link")
        element.set("href", self.href)
        element.text = self.label
        return element
