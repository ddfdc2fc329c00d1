"""Output primitives.

Every coordinate held by a primitive is already in output space; the
interpreters resolve the transform stack before constructing one.
"""

from __future__ import annotations

from dataclasses import dataclass

from svg2cetz.geometry.transform import Point
from svg2cetz.svg.style import Style


@dataclass(frozen=True)
class Rect:
    p1: Point
    p2: Point
    style: Style


@dataclass(frozen=True)
class CircleIso:
    center: Point
    radius: float
    style: Style | None


@dataclass(frozen=True)
class CircleAniso:
    center: Point
    radii: tuple[float, float]
    style: Style | None


@dataclass(frozen=True)
class LineSeg:
    """Straight segment. ``style`` is None for the bodies of a filled group."""

    p1: Point
    p2: Point
    style: Style | None = None


@dataclass(frozen=True)
class Bezier:
    p1: Point
    p2: Point
    ctrl1: Point
    ctrl2: Point
    style: Style | None = None


@dataclass(frozen=True)
class FilledPathGroup:
    style: Style
    segments: tuple[LineSeg | Bezier, ...]


@dataclass(frozen=True)
class Content:
    position: Point
    text: str
    style: Style | None = None
    anchor: str = "south-west"


Primitive = Rect | CircleIso | CircleAniso | LineSeg | Bezier | FilledPathGroup | Content
