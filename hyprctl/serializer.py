"""JSON and XML output for controls and composites of controls.

Both formats are projected from the same in-memory state; neither changes
it. The XML dialect needs a namespace declaration on its outermost element,
so callers pass the application's NamespaceConfig explicitly.
"""
import json
import xml.etree.ElementTree as ET
from typing import Any, Optional

from pydantic import BaseModel

from .controls.base import append_xml
from .core.config import NamespaceConfig


def to_jsonable(document: Any) -> Any:
    """Convert a control, composite model or list of them to plain data."""
    if isinstance(document, BaseModel):
        return document.model_dump(mode="json", by_alias=True)
    if isinstance(document, (list, tuple)):
        return [to_jsonable(item) for item in document]
    return document


def to_json(document: Any, indent: Optional[int] = None) -> str:
    """Serialize ``document`` as JSON."""
    return json.dumps(to_jsonable(document), indent=indent, ensure_ascii=False)


def to_xml_element(
    document: Any,
    namespace: NamespaceConfig,
    root_tag: Optional[str] = None,
) -> ET.Element:
    """Build the XML tree for ``document`` with the namespace on its root.

    Models that are not themselves controls become an element named
    ``root_tag`` or their class name. A list is wrapped in ``root_tag``
    (default ``"Elements"``).
    """
    if isinstance(document, BaseModel):
        holder = ET.Element("holder")
        append_xml(holder, root_tag, document)
        root = holder[0]
    elif isinstance(document, (list, tuple)):
        root = ET.Element(root_tag or "Elements")
        append_xml(root, None, document)
    else:
        raise TypeError(f"Cannot render {type(document).__name__} as an XML document")

    attributes = dict(root.attrib)
    root.attrib.clear()
    root.set("xmlns:c", namespace.xmlns)
    root.attrib.update(attributes)
    root.insert(0, ET.Comment(namespace.comment))
    return root


def to_xml(
    document: Any,
    namespace: NamespaceConfig,
    root_tag: Optional[str] = None,
    pretty: bool = False,
) -> str:
    """Serialize ``document`` in the XML dialect."""
    root = to_xml_element(document, namespace, root_tag)
    if pretty:
        ET.indent(root)
    return ET.tostring(root, encoding="unicode")


__all__ = ["to_json", "to_jsonable", "to_xml", "to_xml_element"]
