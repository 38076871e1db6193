"""Base models shared by every hypermedia control."""
import logging
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict

from .decoding import FormValues
from .failures import ValidationFailure

logger = logging.getLogger(__name__)

PASSWORD_TYPE = "password"
PASSWORD_MASK = "********"


def mask_secret(type_: str, value: str) -> str:
    """Return the value as it may be shown to a client.

    Non-empty values of password controls are replaced by a fixed mask.
    """
    if type_ == PASSWORD_TYPE and value:
        return PASSWORD_MASK
    return value


class Element(BaseModel, ABC):
    """Anything rendered as its own element in the XML dialect."""

    model_config = ConfigDict(extra="forbid")

    @abstractmethod
    def to_xml(self) -> ET.Element:
        """Build this element's XML representation."""
        pass


class Control(Element):
    """A named, independently validatable unit of form input."""

    label: str = ""
    name: str = ""
    error: str = ""
    required: bool = False

    @abstractmethod
    def extract(self, form: FormValues) -> list[str]:
        """Consume this control's values from ``form``.

        Returns:
            The keys that were matched, whether or not values remain under them.
        """
        pass

    @abstractmethod
    def validate(self) -> Optional[ValidationFailure]:
        """Check the current state and record the outcome in ``error``."""
        pass

    def _record(self, failure: Optional[ValidationFailure]) -> Optional[ValidationFailure]:
        if failure is None:
            self.error = ""
        else:
            self.error = str(failure)
            logger.debug(f"{type(self).__name__} {self.name!r} failed: {failure.kind.value}")
        return failure

    def _append_error(self, parent: ET.Element) -> None:
        if self.error:
            ET.SubElement(parent, "c:Error").text = self.error


def iter_controls(value: Any) -> Iterator[Control]:
    """Yield every control held by ``value``, in declaration order."""
    if isinstance(value, Control):
        yield value
    elif isinstance(value, BaseModel):
        for field_name in type(value).model_fields:
            yield from iter_controls(getattr(value, field_name))
    elif isinstance(value, (list, tuple)):
        for item in value:
            yield from iter_controls(item)


def append_xml(parent: ET.Element, tag: Optional[str], value: Any) -> None:
    """Append the XML rendering of ``value`` to ``parent``.

    Elements render themselves, other models become an element named ``tag``
    (or their class name) holding one child per field, sequences render each
    item in turn and plain scalars become ``<tag>text</tag>``.
    """
    if value is None:
        return
    if isinstance(value, Element):
        parent.append(value.to_xml())
    elif isinstance(value, BaseModel):
        parent.append(model_to_xml(value, tag))
    elif isinstance(value, (list, tuple)):
        for item in value:
            append_xml(parent, tag, item)
    elif isinstance(value, (str, int, float, bool)):
        if tag is None:
            raise TypeError(f"Cannot render bare {type(value).__name__} without a tag")
        child = ET.SubElement(parent, tag)
        if isinstance(value, bool):
            child.text = "true" if value else "false"
        else:
            child.text = str(value)
    else:
        raise TypeError(f"Cannot render {type(value).__name__} as XML")


def model_to_xml(model: BaseModel, tag: Optional[str] = None) -> ET.Element:
    """Render a composite model whose fields hold controls or plain data."""
    element = ET.Element(tag or type(model).__name__)
    for field_name in type(model).model_fields:
        append_xml(element, field_name, getattr(model, field_name))
    return element
