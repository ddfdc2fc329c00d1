"""Per-element interpretation into output primitives.

Every interpreter receives the element's typed attributes and the transform
of the enclosing context, and yields primitives in document order.
"""

from __future__ import annotations

import dataclasses
import logging
import math
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from svg2cetz.emit.primitives import (
    Bezier,
    CircleAniso,
    CircleIso,
    Content,
    FilledPathGroup,
    LineSeg,
    Primitive,
    Rect,
)
from svg2cetz.engine.context import ContextFrame
from svg2cetz.geometry.transform import Transform, apply
from svg2cetz.svg.attributes import (
    CircleAttributes,
    EllipseAttributes,
    PathAttributes,
    RectAttributes,
)
from svg2cetz.svg.paths import CurveTo, LineTo, MoveTo
from svg2cetz.svg.style import Style

logger = logging.getLogger(__name__)


def interpret_rect(attrs: RectAttributes, transform: Transform) -> Iterator[Primitive]:
    # Corners are mapped one by one; a rotation is not turned into a bounding box.
    p1 = apply(transform, (attrs.x, attrs.y))
    p2 = apply(transform, (attrs.x + attrs.width, attrs.y + attrs.height))
    yield Rect(p1, p2, attrs.style or Style())


def _radii(transform: Transform, cx: float, cy: float, rx: float, ry: float):
    center = apply(transform, (cx, cy))
    edge = apply(transform, (cx + rx, cy + ry))
    return center, (abs(edge[0] - center[0]), abs(edge[1] - center[1]))


def interpret_circle(attrs: CircleAttributes, transform: Transform) -> Iterator[Primitive]:
    center, (rx, ry) = _radii(transform, attrs.cx, attrs.cy, attrs.r, attrs.r)
    style = attrs.style or Style()
    if math.isclose(rx, ry):
        yield CircleIso(center, rx, style)
    else:
        yield CircleAniso(center, (rx, ry), style)


def interpret_ellipse(attrs: EllipseAttributes, transform: Transform) -> Iterator[Primitive]:
    center, radii = _radii(transform, attrs.cx, attrs.cy, attrs.rx, attrs.ry)
    yield CircleAniso(center, radii, attrs.style or Style())


def interpret_path(attrs: PathAttributes, transform: Transform) -> Iterator[Primitive]:
    """Emit a path as one filled group or as independent stroked segments.

    A fill other than ``none`` merges every line and curve into a single
    :class:`FilledPathGroup`; otherwise each segment is emitted on its own
    with the path's stroke, or with no stroke argument when the path has no
    style. Close commands do not draw back to the subpath start.
    """
    if attrs.d is None:
        logger.debug("Skipping <path> without path data")
        return
    style = attrs.style or Style()
    filled = style.has_fill
    segment_style = None if filled else attrs.style

    current = apply(transform, (0.0, 0.0))
    bodies: list[LineSeg | Bezier] = []
    for segment in attrs.d:
        if isinstance(segment, MoveTo):
            current = apply(transform, segment.point)
        elif isinstance(segment, LineTo):
            end = apply(transform, segment.point)
            bodies.append(LineSeg(current, end, segment_style))
            current = end
        elif isinstance(segment, CurveTo):
            end = apply(transform, segment.point)
            bodies.append(
                Bezier(
                    current,
                    end,
                    apply(transform, segment.ctrl1),
                    apply(transform, segment.ctrl2),
                    segment_style,
                )
            )
            current = end

    if not bodies:
        return
    if filled:
        yield FilledPathGroup(style, tuple(bodies))
    else:
        yield from bodies


def scale_font(style: Style | None, font_scale: float) -> Style | None:
    if style is None or style.font_size is None:
        return style
    return dataclasses.replace(style, font_size=style.font_size * font_scale)


def interpret_text_content(
    text: str,
    container: ContextFrame,
    transform: Transform,
    style: Style | None,
) -> Iterator[Content]:
    """Place text content at the anchors of its container.

    A ``text`` container, or a ``tspan`` with a single anchor, places the whole
    string at that anchor. A ``tspan`` with several anchors places one
    character per anchor; surplus characters or anchors are dropped.
    """
    anchors = container.anchors or ()
    if container.identity == "text" or len(anchors) == 1:
        yield Content(apply(transform, anchors[0]), text, style)
        return
    if len(text) != len(anchors):
        logger.debug(
            "tspan has %d characters for %d positions", len(text), len(anchors)
        )
    for char, anchor in zip(text, anchors):
        yield Content(apply(transform, anchor), char, style)


ShapeInterpreter = tuple[type, Callable[[Any, Transform], Iterator[Primitive]]]

SHAPE_INTERPRETERS: Mapping[str, ShapeInterpreter] = {
    "rect": (RectAttributes, interpret_rect),
    "circle": (CircleAttributes, interpret_circle),
    "ellipse": (EllipseAttributes, interpret_ellipse),
    "path": (PathAttributes, interpret_path),
}
