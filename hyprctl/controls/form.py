"""Form container, analogous to HTML's <form>."""
import logging
import xml.etree.ElementTree as ET
from typing import Any, Generic, TypeVar

from pydantic import model_serializer

from .base import Control, Element, append_xml, iter_controls
from .decoding import FormValues
from .failures import ValidationFailure
from .map import Map

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Form(Element, Generic[T]):
    """A state transition that needs input from the client.

    ``elements`` is usually a model whose fields are controls, but it may be
    any structure of controls, nested models, lists and plain values. On JSON
    output the form folds to its bare elements.
    """

    method: str = ""
    action: str = ""
    elements: T

    def controls(self) -> list[Control]:
        """Every control in ``elements``, unnamed Maps last."""
        named: list[Control] = []
        catch_alls: list[Control] = []
        for control in iter_controls(self.elements):
            if isinstance(control, Map) and not control.name:
                catch_alls.append(control)
            else:
                named.append(control)
        return named + catch_alls

    def extract(self, form: FormValues) -> list[str]:
        """Extract every control from ``form``, catch-all Maps after the rest."""
        consumed: list[str] = []
        for control in self.controls():
            consumed.extend(control.extract(form))
        if form:
            logger.debug(f"{len(form)} key(s) left unclaimed: {sorted(form)}")
        return consumed

    def validate(self) -> list[ValidationFailure]:
        """Validate every control; one failing never stops the others."""
        failures = []
        for control in self.controls():
            failure = control.validate()
            if failure is not None:
                failures.append(failure)
        return failures

    @model_serializer
    def serialize_json(self) -> Any:
        return self.elements

    def to_xml(self) -> ET.Element:
        element = ET.Element("c:Form")
        if self.method:
            element.set("method", self.method)
        if self.action:
            element.set("action", self.action)
        append_xml(element, None, self.elements)
        return element
