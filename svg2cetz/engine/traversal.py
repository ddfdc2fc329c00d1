"""Traversal engine: walks the event stream and emits CeTZ calls.

The engine keeps a :class:`ContextStack` in step with element nesting. Groups
contribute transforms, ``text`` and ``tspan`` contribute anchors and styles,
and leaf shapes are interpreted against the frame on top of the stack.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from svg2cetz.emit.emitter import render
from svg2cetz.emit.primitives import Primitive
from svg2cetz.emit.sinks import OutputSink
from svg2cetz.engine.context import ContextFrame, ContextStack
from svg2cetz.engine.interpreters import (
    SHAPE_INTERPRETERS,
    interpret_text_content,
    scale_font,
)
from svg2cetz.exceptions import (
    ConversionError,
    MissingTextAnchor,
    MissingTextContainer,
)
from svg2cetz.geometry.transform import Transform, compose
from svg2cetz.svg.attributes import GroupAttributes, SpanAttributes, TextAttributes
from svg2cetz.svg.events import Event, EventKind

logger = logging.getLogger(__name__)

CONTAINER_ELEMENTS = frozenset({"g", "a"})
TEXT_ELEMENTS = frozenset({"text", "tspan"})


class TraversalEngine:
    """Convert one event stream, writing each emission to ``sink``.

    Args:
        sink: Receives rendered primitives in document order.
        root_transform: Transform of the root context, usually a scale with a
            vertical flip.
        font_scale: Multiplier applied to every font size.
        strict_text: When True, text without a container or position aborts
            the conversion. When False it is logged and skipped.
    """

    def __init__(
        self,
        sink: OutputSink,
        root_transform: Transform | None = None,
        font_scale: float = 1.0,
        strict_text: bool = True,
    ) -> None:
        self.sink = sink
        self.font_scale = font_scale
        self.strict_text = strict_text
        self.stack = ContextStack(root_transform)
        self.primitive_count = 0

    def run(self, events: Iterable[Event]) -> int:
        """Consume ``events`` until end-of-stream; return the number of primitives."""
        for event in events:
            if event.kind is EventKind.EOF:
                break
            self.handle(event)
        if len(self.stack) > 1:
            logger.debug("Stream ended with %d open contexts", len(self.stack) - 1)
        return self.primitive_count

    def handle(self, event: Event) -> None:
        if event.kind is EventKind.START:
            self._open(event)
        elif event.kind is EventKind.END:
            if not self.stack.pop_if(event.name):
                logger.debug("Ignoring close of <%s> without a context", event.name)
        elif event.kind is EventKind.EMPTY:
            self._leaf(event)
        elif event.kind is EventKind.TEXT:
            self._text(event.text)

    def _emit(self, primitive: Primitive) -> None:
        logger.debug("emit %s", primitive)
        self.sink.write(render(primitive))
        self.primitive_count += 1

    def _open(self, event: Event) -> None:
        top = self.stack.top
        if event.name in CONTAINER_ELEMENTS:
            attrs = GroupAttributes.from_attributes(event.name, event.attributes)
            transform = top.transform
            if attrs.transform is not None:
                transform = compose(top.transform, attrs.transform)
                logger.debug("<%s> transform %s", event.name, transform)
            self.stack.push(ContextFrame(event.name, transform))
        elif event.name == "text":
            attrs = TextAttributes.from_attributes(event.attributes)
            self.stack.push(
                ContextFrame("text", top.transform, (attrs.anchor,), attrs.style)
            )
        elif event.name == "tspan":
            attrs = SpanAttributes.from_attributes(event.attributes)
            style = attrs.style if attrs.style is not None else self.stack.resolve_style()
            self.stack.push(ContextFrame("tspan", top.transform, attrs.anchors, style))
        else:
            logger.debug("Unprocessed element: <%s>", event.name)

    def _leaf(self, event: Event) -> None:
        entry = SHAPE_INTERPRETERS.get(event.name)
        if entry is None:
            logger.debug("Unprocessed element: <%s/>", event.name)
            return
        record_type, interpret = entry
        attrs = record_type.from_attributes(event.attributes)
        for primitive in interpret(attrs, self.stack.top.transform):
            self._emit(primitive)

    def _text(self, text: str) -> None:
        found = self.stack.nearest(TEXT_ELEMENTS)
        try:
            if found is None:
                raise MissingTextContainer(text)
            index, container = found
            if not container.anchors:
                raise MissingTextAnchor(text, container.identity)
        except ConversionError as e:
            if self.strict_text:
                raise
            logger.warning("Skipping text: %s", e)
            return

        style = scale_font(self.stack.resolve_style(index), self.font_scale)
        for primitive in interpret_text_content(
            text, container, self.stack.top.transform, style
        ):
            self._emit(primitive)


def convert_events(
    events: Iterable[Event],
    sink: OutputSink,
    root_transform: Transform | None = None,
    font_scale: float = 1.0,
    strict_text: bool = True,
) -> int:
    """Run a fresh engine over ``events``; return the number of primitives."""
    engine = TraversalEngine(
        sink,
        root_transform=root_transform,
        font_scale=font_scale,
        strict_text=strict_text,
    )
    return engine.run(events)
