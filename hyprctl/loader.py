"""Form definitions loaded from YAML."""
import logging
from pathlib import Path
from typing import Annotated, Any, Union

import yaml
from pydantic import Field

from .controls import Form, Input, Link, Map, Select, Submit

logger = logging.getLogger(__name__)


AnyControl = Annotated[
    Union[Input, Select, Map, Link, Submit],
    Field(discriminator="control"),
]

FormDefinition = Form[list[AnyControl]]


def build_form(data: dict[str, Any]) -> FormDefinition:
    """Build a form from plain data.

    Each entry of ``elements`` names its kind with a ``control`` key
    (``input``, ``select``, ``map``, ``link`` or ``submit``).

    Raises:
        pydantic.ValidationError: If the data does not describe a form.
    """
    return FormDefinition.model_validate(data)


def load_form(path: Path) -> FormDefinition:
    """Load a form definition from a YAML file.

    Args:
        path: Path to the form YAML file.

    Returns:
        Form whose elements are the declared controls, in file order.
    """
    logger.info(f"Loading form from {path}")
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    form = build_form(data or {})
    logger.info(f"Loaded form with {len(form.elements)} element(s)")
    return form
