"""Typed attribute records for the recognized element kinds.

Each record enumerates the attributes it understands. Anything else on the
element is logged at debug level and otherwise ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from svg2cetz.geometry.transform import Point, Transform
from svg2cetz.svg.paths import PathSegment, parse_path
from svg2cetz.svg.style import Style
from svg2cetz.units import parse_number, parse_number_list

logger = logging.getLogger(__name__)


def _read(
    element: str,
    attributes: Mapping[str, str],
    parsers: Mapping[str, Callable[[str, str], Any]],
) -> dict[str, Any]:
    values: dict[str, Any] = {}
    for key, raw in attributes.items():
        parser = parsers.get(key)
        if parser is None:
            logger.debug("Unprocessed attribute for <%s>: %s", element, key)
            continue
        values[key] = parser(raw, key)
    return values


def _style(raw: str, _key: str) -> Style:
    return Style.parse(raw)


def _transform(raw: str, _key: str) -> Transform:
    return Transform.from_attribute(raw)


def _path_data(raw: str, _key: str) -> list[PathSegment]:
    return parse_path(raw)


@dataclass(frozen=True)
class GroupAttributes:
    transform: Transform | None = None

    @classmethod
    def from_attributes(cls, name: str, attributes: Mapping[str, str]) -> GroupAttributes:
        values = _read(name, attributes, {"transform": _transform})
        return cls(**values)


@dataclass(frozen=True)
class RectAttributes:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    style: Style | None = None

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> RectAttributes:
        values = _read(
            "rect",
            attributes,
            {
                "x": parse_number,
                "y": parse_number,
                "width": parse_number,
                "height": parse_number,
                "style": _style,
            },
        )
        return cls(**values)


@dataclass(frozen=True)
class CircleAttributes:
    cx: float = 0.0
    cy: float = 0.0
    r: float = 0.0
    style: Style | None = None

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> CircleAttributes:
        values = _read(
            "circle",
            attributes,
            {"cx": parse_number, "cy": parse_number, "r": parse_number, "style": _style},
        )
        return cls(**values)


@dataclass(frozen=True)
class EllipseAttributes:
    cx: float = 0.0
    cy: float = 0.0
    rx: float = 0.0
    ry: float = 0.0
    style: Style | None = None

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> EllipseAttributes:
        values = _read(
            "ellipse",
            attributes,
            {
                "cx": parse_number,
                "cy": parse_number,
                "rx": parse_number,
                "ry": parse_number,
                "style": _style,
            },
        )
        return cls(**values)


@dataclass(frozen=True)
class PathAttributes:
    d: list[PathSegment] | None = None
    style: Style | None = None

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> PathAttributes:
        values = _read("path", attributes, {"d": _path_data, "style": _style})
        return cls(**values)


@dataclass(frozen=True)
class TextAttributes:
    x: float = 0.0
    y: float = 0.0
    style: Style | None = None

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> TextAttributes:
        values = _read(
            "text",
            attributes,
            {"x": parse_number, "y": parse_number, "style": _style},
        )
        return cls(**values)

    @property
    def anchor(self) -> Point:
        return (self.x, self.y)


@dataclass(frozen=True)
class SpanAttributes:
    x: tuple[float, ...] = ()
    y: tuple[float, ...] = ()
    style: Style | None = None

    @classmethod
    def from_attributes(cls, attributes: Mapping[str, str]) -> SpanAttributes:
        values = _read(
            "tspan",
            attributes,
            {
                "x": lambda raw, key: tuple(parse_number_list(raw, key)),
                "y": lambda raw, key: tuple(parse_number_list(raw, key)),
                "style": _style,
            },
        )
        return cls(**values)

    @property
    def anchors(self) -> tuple[Point, ...]:
        """Positions paired elementwise; the shorter list decides the count."""
        return tuple(zip(self.x, self.y))
