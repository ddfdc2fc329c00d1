"""Path data simplification.

``svg.path`` parses the ``d`` attribute into absolute segments; this module
reduces them to four record types so the interpreters only deal with moves,
straight lines, cubic curves and closes. Quadratic curves are degree
elevated and elliptical arcs are approximated by cubic curves.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass

from svg.path import Arc, Close, CubicBezier, Line, Move, QuadraticBezier
from svg.path import parse_path as parse_svg_path

from svg2cetz.exceptions import MalformedPathData
from svg2cetz.geometry.transform import Point


@dataclass(frozen=True)
class MoveTo:
    point: Point


@dataclass(frozen=True)
class LineTo:
    point: Point


@dataclass(frozen=True)
class CurveTo:
    ctrl1: Point
    ctrl2: Point
    point: Point


@dataclass(frozen=True)
class ClosePath:
    pass


PathSegment = MoveTo | LineTo | CurveTo | ClosePath


def _pt(point: complex) -> Point:
    return (float(point.real), float(point.imag))


def _elevate(start: Point, control: Point, end: Point) -> CurveTo:
    """Exact cubic form of a quadratic curve."""
    ctrl1 = (
        start[0] + 2.0 / 3.0 * (control[0] - start[0]),
        start[1] + 2.0 / 3.0 * (control[1] - start[1]),
    )
    ctrl2 = (
        end[0] + 2.0 / 3.0 * (control[0] - end[0]),
        end[1] + 2.0 / 3.0 * (control[1] - end[1]),
    )
    return CurveTo(ctrl1, ctrl2, end)


def _arc_curves(arc: Arc) -> Iterator[PathSegment]:
    """Approximate an elliptical arc with cubic curves of at most 90 degrees each."""
    if arc.start == arc.end:
        return
    if arc.radius.real == 0 or arc.radius.imag == 0:
        # Zero radius: SVG draws a straight line.
        yield LineTo(_pt(arc.end))
        return

    pieces = max(1, math.ceil(abs(arc.delta) / 90.0))
    # Position offset that advances the ellipse angle by a quarter turn.
    quarter = 90.0 / arc.delta

    def tangent(pos: float) -> complex:
        # Derivative with respect to the angle, in radians.
        center = (arc.point(pos) + arc.point(pos + 2 * quarter)) / 2
        return arc.point(pos + quarter) - center

    k = 4.0 / 3.0 * math.tan(math.radians(arc.delta / pieces) / 4.0)
    for i in range(pieces):
        t0, t1 = i / pieces, (i + 1) / pieces
        p0 = arc.point(t0)
        p3 = arc.end if i == pieces - 1 else arc.point(t1)
        yield CurveTo(_pt(p0 + k * tangent(t0)), _pt(p3 - k * tangent(t1)), _pt(p3))


def _simplify(segments) -> Iterator[PathSegment]:
    for segment in segments:
        if isinstance(segment, Move):
            yield MoveTo(_pt(segment.end))
        elif isinstance(segment, Close):
            yield ClosePath()
        elif isinstance(segment, Line):
            yield LineTo(_pt(segment.end))
        elif isinstance(segment, CubicBezier):
            yield CurveTo(_pt(segment.control1), _pt(segment.control2), _pt(segment.end))
        elif isinstance(segment, QuadraticBezier):
            yield _elevate(_pt(segment.start), _pt(segment.control), _pt(segment.end))
        elif isinstance(segment, Arc):
            yield from _arc_curves(segment)


def parse_path(d: str) -> list[PathSegment]:
    """Parse path data into absolute, simplified segments.

    Raises:
        MalformedPathData: If ``svg.path`` rejects the data.
    """
    try:
        return list(_simplify(parse_svg_path(d)))
    except (ValueError, IndexError, TypeError) as e:
        raise MalformedPathData(d, str(e)) from e
