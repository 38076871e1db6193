"""Command line entry point: decode a submission against a form definition."""
import argparse
import logging
import sys
from pathlib import Path

from .controls import parse_form_values
from .core.config import Settings
from .core.logging import setup_logging
from .loader import load_form
from .serializer import to_json, to_xml


def main(argv: list[str] | None = None) -> int:
    """Extract, validate and print a form.

    Returns:
        0 when every control validates, 1 otherwise.
    """
    parser = argparse.ArgumentParser(
        description="Decode a form submission and render the resulting controls"
    )
    parser.add_argument(
        "form",
        help="Path to form definition YAML file"
    )
    parser.add_argument(
        "--data",
        default="",
        help="URL-encoded form body, e.g. 'username=john&misc[iq]=80'"
    )
    parser.add_argument(
        "--format", "-f",
        choices=["json", "xml"],
        default="json",
        help="Output format (default: json)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to settings YAML file"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args(argv)

    settings = Settings.from_yaml(Path(args.config)) if args.config else Settings()
    setup_logging("DEBUG" if args.debug else settings.log_level)
    logger = logging.getLogger(__name__)

    form = load_form(Path(args.form))
    values = parse_form_values(args.data)
    consumed = form.extract(values)
    logger.info(f"Extracted {len(consumed)} key(s)")
    if values:
        logger.warning(f"Unclaimed keys: {', '.join(sorted(values))}")

    failures = form.validate()
    for failure in failures:
        logger.info(f"Validation failed: {failure}")

    if args.format == "xml":
        print(to_xml(form, settings.namespace, pretty=True))
    else:
        print(to_json(form, indent=2))

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
