"""Numeric attribute parsing with unit suffix tolerance."""

from __future__ import annotations

import re

from svg2cetz.exceptions import MalformedNumeric

# Suffixes stripped before numeric parsing. Values are taken as user units.
UNIT_SUFFIXES = ("px", "pt")

NUMBER_PATTERN = r"[-+]?\d*\.?\d+(?:[eE][-+]?\d+)?"

_NUMBER_RE = re.compile(NUMBER_PATTERN)
_NUMBER_WITH_UNIT_RE = re.compile(NUMBER_PATTERN + r"(?:px|pt)?")
_SEPARATOR_RE = re.compile(r"\s*,?\s*")


def split_numbers(text: str, units: bool = False) -> list[str]:
    """Split a number list into its items.

    Items may be separated by whitespace, a comma, or nothing at all when the
    next number starts with a sign or a dot (``10-5``, ``.5.5``). With
    ``units`` each item may carry a ``px`` or ``pt`` suffix.

    Raises:
        ValueError: If anything else is left over.
    """
    item_re = _NUMBER_WITH_UNIT_RE if units else _NUMBER_RE
    items: list[str] = []
    pos = _SEPARATOR_RE.match(text).end()
    while pos < len(text):
        match = item_re.match(text, pos)
        if match is None:
            raise ValueError(f"unexpected text {text[pos:]!r}")
        items.append(match.group())
        pos = _SEPARATOR_RE.match(text, match.end()).end()
    return items


def parse_number(value: str, attribute: str | None = None) -> float:
    """Parse a number that may carry a ``px`` or ``pt`` suffix.

    Raises:
        MalformedNumeric: If the remaining text is not a number.
    """
    text = value.strip()
    for suffix in UNIT_SUFFIXES:
        if text.endswith(suffix):
            text = text[: -len(suffix)].rstrip()
            break
    try:
        return float(text)
    except ValueError as e:
        raise MalformedNumeric(value, attribute) from e


def parse_number_list(value: str, attribute: str | None = None) -> list[float]:
    """Parse a whitespace or comma separated number list; empty text is ``[]``."""
    try:
        items = split_numbers(value, units=True)
    except ValueError as e:
        raise MalformedNumeric(value, attribute) from e
    return [parse_number(item, attribute) for item in items]
