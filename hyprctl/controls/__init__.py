"""Hypermedia controls: decoding, validation and serialization."""
from .base import PASSWORD_MASK, Control, Element, iter_controls, mask_secret
from .decoding import FormValues, parse_form_values
from .failures import FailureKind, ValidationFailure
from .form import Form
from .input import Input, Parsed
from .link import Link
from .map import Map
from .select import Option, Select
from .submit import Submit

__all__ = [
    "PASSWORD_MASK",
    "Control",
    "Element",
    "FailureKind",
    "Form",
    "FormValues",
    "Input",
    "Link",
    "Map",
    "Option",
    "Parsed",
    "Select",
    "Submit",
    "ValidationFailure",
    "iter_controls",
    "mask_secret",
    "parse_form_values",
]
