"""Inline ``style`` attribute parsing.

A :class:`Style` only records what an element specifies itself. A field left
as ``None`` means "not specified here" and is different from a field set to
the literal ``"none"``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields

from svg2cetz.emit.numbers import format_number
from svg2cetz.exceptions import MalformedStyleSyntax
from svg2cetz.units import parse_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Style:
    """Presentation attributes parsed from an inline style."""

    fill: str | None = None
    fill_rule: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    dash_array: str | None = None
    font_family: str | None = None
    font_size: float | None = None

    @classmethod
    def parse(cls, value: str) -> Style:
        """Parse a ``key:value;key:value`` list.

        Empty segments are skipped and unknown keys are logged and ignored.

        Raises:
            MalformedStyleSyntax: If a non-empty segment has no colon.
            MalformedNumeric: If ``stroke-width`` or ``font-size`` is not a
                number.
        """
        parsed: dict[str, str | float] = {}
        for segment in value.split(";"):
            if not segment.strip():
                continue
            key, sep, raw = segment.partition(":")
            if not sep:
                raise MalformedStyleSyntax(segment)
            key = key.strip()
            raw = raw.strip()
            if key == "fill":
                parsed["fill"] = raw
            elif key == "fill-rule":
                parsed["fill_rule"] = raw
            elif key == "stroke":
                parsed["stroke"] = raw
            elif key == "stroke-width":
                parsed["stroke_width"] = parse_number(raw, key)
            elif key == "stroke-dasharray":
                parsed["dash_array"] = raw
            elif key == "font-family":
                parsed["font_family"] = raw
            elif key == "font-size":
                parsed["font_size"] = parse_number(raw, key)
            else:
                logger.debug("Unprocessed style: %s", segment)
        return cls(**parsed)

    @property
    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    @property
    def has_fill(self) -> bool:
        """True when a fill paint is set to something other than ``none``."""
        return self.fill is not None and self.fill != "none"

    @property
    def has_stroke(self) -> bool:
        return (
            self.stroke is not None
            or self.stroke_width is not None
            or self.dash_array is not None
        )


def format_fill(style: Style) -> str:
    if style.fill is None:
        return ""
    return f"fill: {style.fill}, "


def format_stroke(style: Style) -> str:
    if not style.has_stroke:
        return "stroke: none, "
    parts = []
    if style.stroke is not None:
        parts.append(f"paint: {style.stroke}, ")
    if style.stroke_width is not None:
        parts.append(f"thickness: {format_number(style.stroke_width)}pt, ")
    if style.dash_array is not None:
        parts.append('dash: "dashed", ')
    return f"stroke: ({''.join(parts)}), "
