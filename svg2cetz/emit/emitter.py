"""Render primitives as CeTZ drawing calls."""

from __future__ import annotations

from collections.abc import Iterable
from functools import singledispatch

from svg2cetz.emit.numbers import format_number, format_point
from svg2cetz.emit.primitives import (
    Bezier,
    CircleAniso,
    CircleIso,
    Content,
    FilledPathGroup,
    LineSeg,
    Rect,
)
from svg2cetz.svg.style import Style, format_fill, format_stroke

# Characters with meaning inside a Typst content block.
ESCAPED_CHARACTERS = frozenset("$[]/#")

WRAP_MODES = ("none", "canvas", "figure", "align")


def escape_content(text: str) -> str:
    """Backslash-escape Typst markup characters, one source character at a time."""
    return "".join("\\" + ch if ch in ESCAPED_CHARACTERS else ch for ch in text)


def format_font_family(family: str) -> str:
    """Turn a CSS font-family value into the items of a Typst font array."""
    family = family.replace("'", '"').replace(", monospace", "")
    names = [name.strip() for name in family.split(",") if name.strip()]
    return ", ".join(name if name.startswith('"') else f'"{name}"' for name in names)


def format_text_style(style: Style) -> str:
    parts = []
    if style.font_size is not None:
        parts.append(f"size: {format_number(style.font_size)}pt, ")
    if style.font_family is not None:
        parts.append(f"font: ({format_font_family(style.font_family)}, ), ")
    if style.has_fill:
        parts.append(f"fill: {style.fill}, ")
    return f"text({''.join(parts)})"


@singledispatch
def render(primitive) -> str:
    """Return the CeTZ source for one primitive."""
    raise TypeError(f"cannot render {type(primitive).__name__}")


@render.register
def _(primitive: Rect) -> str:
    style = primitive.style
    return (
        f"rect({format_point(primitive.p1)}, {format_point(primitive.p2)}, "
        f"{format_fill(style)}{format_stroke(style)})"
    )


@render.register
def _(primitive: CircleIso) -> str:
    style = primitive.style or Style()
    return (
        f"circle({format_point(primitive.center)}, "
        f"radius: {format_number(primitive.radius)}, "
        f"{format_fill(style)}{format_stroke(style)})"
    )


@render.register
def _(primitive: CircleAniso) -> str:
    style = primitive.style or Style()
    return (
        f"circle({format_point(primitive.center)}, "
        f"radius: {format_point(primitive.radii)}, "
        f"{format_fill(style)}{format_stroke(style)})"
    )


@render.register
def _(primitive: LineSeg) -> str:
    body = f"line({format_point(primitive.p1)}, {format_point(primitive.p2)}"
    if primitive.style is None:
        return body + ")"
    return f"{body}, {format_stroke(primitive.style)})"


@render.register
def _(primitive: Bezier) -> str:
    body = (
        f"bezier({format_point(primitive.p1)}, {format_point(primitive.p2)}, "
        f"{format_point(primitive.ctrl1)}, {format_point(primitive.ctrl2)}"
    )
    if primitive.style is None:
        return body + ")"
    return f"{body}, {format_stroke(primitive.style)})"


@render.register
def _(primitive: FilledPathGroup) -> str:
    style = primitive.style
    lines = [f"merge-path({format_fill(style)}{format_stroke(style)}{{"]
    lines.extend(f"  {render(segment)}" for segment in primitive.segments)
    lines.append("})")
    return "\n".join(lines)


@render.register
def _(primitive: Content) -> str:
    body = f"[{escape_content(primitive.text)}]"
    if primitive.style is not None:
        body = format_text_style(primitive.style) + body
    return f'content({format_point(primitive.position)}, anchor: "{primitive.anchor}", {body})'


def wrap_output(lines: Iterable[str], mode: str = "none") -> str:
    """Join emitted calls into a document, optionally inside a CeTZ canvas.

    ``none`` returns the bare calls one per line; ``canvas``, ``figure`` and
    ``align`` wrap them the way they are pasted into a Typst document.
    """
    if mode not in WRAP_MODES:
        raise ValueError(f"unknown wrap mode {mode!r}")
    body = [line for chunk in lines for line in chunk.split("\n")]
    if mode == "none":
        return "".join(f"{line}\n" for line in body)

    if mode == "canvas":
        head, tail, indent = ["#cetz.canvas({"], ["})"], "  "
    elif mode == "figure":
        head, tail, indent = ["#figure(", "  cetz.canvas({"], ["  })", ")"], "    "
    else:
        head = ["#align(", "  center,", "  cetz.canvas({"]
        tail, indent = ["  })", ")"], "    "
    out = [*head, f"{indent}import cetz.draw: *"]
    out.extend(f"{indent}{line}" for line in body)
    out.extend(tail)
    return "\n".join(out) + "\n"
