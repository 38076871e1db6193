"""hyprctl: typed hypermedia controls for HATEOAS APIs.

Each control describes a piece of input the server needs (an Input, a
Select, a free-form Map) or a transition it offers (a Link, a Submit). The
same controls decode URL-encoded submissions, check them against a minimal
rule set, and render themselves as JSON for programmatic clients or as an
XML dialect for command line inspection.
"""
from .controls import (
    PASSWORD_MASK,
    Control,
    FailureKind,
    Form,
    FormValues,
    Input,
    Link,
    Map,
    Option,
    Parsed,
    Select,
    Submit,
    ValidationFailure,
    parse_form_values,
)
from .core import NamespaceConfig, Settings, setup_logging
from .serializer import to_json, to_xml

__all__ = [
    "PASSWORD_MASK",
    "Control",
    "FailureKind",
    "Form",
    "FormValues",
    "Input",
    "Link",
    "Map",
    "NamespaceConfig",
    "Option",
    "Parsed",
    "Select",
    "Settings",
    "Submit",
    "ValidationFailure",
    "parse_form_values",
    "setup_logging",
    "to_json",
    "to_xml",
]
