"""2D affine transforms.

A transform ``(a, b, c, d, e, f)`` maps ``(x, y)`` to
``(a*x + c*y + e, b*x + d*y + f)``, the same coefficient order SVG uses for
``matrix(...)``.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from svg2cetz.exceptions import MalformedTransform
from svg2cetz.units import split_numbers

Point = tuple[float, float]

# One transform function, optionally followed by a comma separator.
_FUNCTION_RE = re.compile(r"\s*([A-Za-z]+)\s*\(([^()]*)\)\s*,?")

# Accepted argument counts per SVG transform function.
_ARITY: dict[str, tuple[int, ...]] = {
    "matrix": (6,),
    "translate": (1, 2),
    "scale": (1, 2),
    "rotate": (1, 3),
    "skewX": (1,),
    "skewY": (1,),
}


@dataclass(frozen=True)
class Transform:
    """Immutable affine transform."""

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    @classmethod
    def from_values(cls, values: list[float] | tuple[float, ...]) -> Transform:
        """Build a transform from six coefficients ``a, b, c, d, e, f``."""
        if len(values) != 6:
            raise ValueError(f"expected 6 coefficients, got {len(values)}")
        return cls(*(float(v) for v in values))

    @classmethod
    def from_attribute(cls, value: str) -> Transform:
        """Parse an SVG ``transform`` attribute into a single matrix.

        The functions of the list are applied right to left, so
        ``translate(10) scale(2)`` scales first. An empty string is the
        identity.

        Raises:
            MalformedTransform: On unknown functions, wrong argument counts,
                unparsable numbers or stray text.
        """
        result = cls.identity()
        pos = 0
        text = value.strip()
        while pos < len(text):
            match = _FUNCTION_RE.match(text, pos)
            if match is None:
                raise MalformedTransform(value, f"unexpected text at offset {pos}")
            name, arg_text = match.group(1), match.group(2)
            result = compose(result, _function_matrix(value, name, arg_text))
            pos = match.end()
        return result

    def values(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)


def _function_matrix(source: str, name: str, arg_text: str) -> Transform:
    arity = _ARITY.get(name)
    if arity is None:
        raise MalformedTransform(source, f"unknown function {name!r}")
    try:
        args = [float(chunk) for chunk in split_numbers(arg_text)]
    except ValueError as e:
        raise MalformedTransform(source, f"non-numeric argument in {name}()") from e
    if len(args) not in arity:
        raise MalformedTransform(
            source, f"{name}() takes {' or '.join(map(str, arity))} arguments, got {len(args)}"
        )

    if name == "matrix":
        return Transform(*args)
    if name == "translate":
        tx = args[0]
        ty = args[1] if len(args) > 1 else 0.0
        return Transform(1.0, 0.0, 0.0, 1.0, tx, ty)
    if name == "scale":
        sx = args[0]
        sy = args[1] if len(args) > 1 else sx
        return Transform(sx, 0.0, 0.0, sy, 0.0, 0.0)
    if name == "rotate":
        angle = math.radians(args[0])
        cos_v, sin_v = math.cos(angle), math.sin(angle)
        rotation = Transform(cos_v, sin_v, -sin_v, cos_v, 0.0, 0.0)
        if len(args) == 3:
            cx, cy = args[1], args[2]
            return compose(
                compose(Transform(1.0, 0.0, 0.0, 1.0, cx, cy), rotation),
                Transform(1.0, 0.0, 0.0, 1.0, -cx, -cy),
            )
        return rotation
    if name == "skewX":
        return Transform(1.0, 0.0, math.tan(math.radians(args[0])), 1.0, 0.0, 0.0)
    # skewY
    return Transform(1.0, math.tan(math.radians(args[0])), 0.0, 1.0, 0.0, 0.0)


def compose(outer: Transform, inner: Transform) -> Transform:
    """Return the transform applying ``inner`` first, then ``outer``."""
    return Transform(
        a=outer.a * inner.a + outer.c * inner.b,
        b=outer.b * inner.a + outer.d * inner.b,
        c=outer.a * inner.c + outer.c * inner.d,
        d=outer.b * inner.c + outer.d * inner.d,
        e=outer.a * inner.e + outer.c * inner.f + outer.e,
        f=outer.b * inner.e + outer.d * inner.f + outer.f,
    )


def apply(transform: Transform, point: Point) -> Point:
    """Map ``point`` through ``transform``."""
    x, y = point
    return (
        transform.a * x + transform.c * y + transform.e,
        transform.b * x + transform.d * y + transform.f,
    )
