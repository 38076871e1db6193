"""Matching and consuming keys from a flat multi-valued form source.

A ``FormValues`` source is the decoded request body: each key maps to every
value submitted under it, in submission order. Controls extract from the same
source one after another, and each removes what it takes, so whatever is left
afterwards was not claimed by any control.
"""
import logging
from typing import Optional
from urllib.parse import parse_qs

logger = logging.getLogger(__name__)

FormValues = dict[str, list[str]]


def parse_form_values(body: str) -> FormValues:
    """Decode an ``application/x-www-form-urlencoded`` body or query string.

    Blank values are kept, since an empty submission is still a submission.
    """
    return parse_qs(body, keep_blank_values=True)


def take_first(form: FormValues, name: str) -> Optional[str]:
    """Remove and return the first value submitted under ``name``.

    Any further values stay in ``form`` under the same key, so several
    same-named controls can each consume one value in turn.
    """
    values = form.get(name)
    if values is None:
        return None
    if not values:
        del form[name]
        return None

    first, rest = values[0], values[1:]
    if rest:
        form[name] = rest
    else:
        del form[name]
    logger.debug(f"Consumed first value of {name!r} ({len(rest)} left)")
    return first


def take_all(form: FormValues, name: str) -> Optional[list[str]]:
    """Remove ``name`` from ``form`` and return all of its values."""
    values = form.pop(name, None)
    if values is not None:
        logger.debug(f"Consumed {len(values)} value(s) of {name!r}")
    return values


def bracketed_subkey(key: str, name: str) -> Optional[str]:
    """Return ``sub`` when ``key`` is exactly ``name[sub]``, else None."""
    prefix = name + "["
    if not key.startswith(prefix) or not key.endswith("]"):
        return None
    return key[len(prefix):-1]


def take_matching(form: FormValues, name: str) -> dict[str, list[str]]:
    """Remove and return every entry belonging to the map called ``name``.

    With a non-empty ``name`` only keys shaped ``name[sub]`` match and are
    returned under ``sub``. With an empty ``name`` every key matches and is
    returned verbatim.
    """
    taken: dict[str, list[str]] = {}
    for key in list(form):
        if name:
            sub = bracketed_subkey(key, name)
            if sub is None:
                continue
        else:
            sub = key
        taken[sub] = form.pop(key)

    if taken:
        logger.debug(f"Map {name!r} consumed {len(taken)} key(s)")
    return taken
