"""SVG input handling for svg2cetz.

This subpackage provides:
- Safe document parsing and the structural event stream (defusedxml)
- Path data simplification (svg.path)
- Inline style and numeric attribute parsing
- Typed attribute records per element kind
"""

from svg2cetz.svg.events import Event, EventKind, document_events, iter_events, parse_document
from svg2cetz.svg.paths import ClosePath, CurveTo, LineTo, MoveTo, PathSegment, parse_path
from svg2cetz.svg.style import Style, format_fill, format_stroke

__all__ = [
    "Event",
    "EventKind",
    "document_events",
    "iter_events",
    "parse_document",
    "ClosePath",
    "CurveTo",
    "LineTo",
    "MoveTo",
    "PathSegment",
    "parse_path",
    "Style",
    "format_fill",
    "format_stroke",
]
