"""Structural event stream over an SVG document.

The document is parsed with defusedxml (entity expansion and external
references are refused) and flattened into the events the traversal engine
consumes:

- ``START`` for an element with children or text content,
- ``EMPTY`` for an element with neither,
- ``TEXT`` for trimmed, non-blank character data,
- ``END`` when a ``START`` element closes,
- ``EOF`` once at the end.

Element names are reduced to their local names. Attributes keep their local
names when unqualified or in the xlink or xml namespace; other namespaced
attributes are dropped. The walk uses an explicit work list, so document depth
is not bounded by the interpreter's recursion limit.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

import defusedxml
import defusedxml.ElementTree as ET

from svg2cetz.exceptions import SVGParseError

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element


class EventKind(enum.Enum):
    START = "start"
    END = "end"
    EMPTY = "empty"
    TEXT = "text"
    EOF = "eof"


_NO_ATTRIBUTES: Mapping[str, str] = MappingProxyType({})

# Namespaced attributes outside these namespaces (editor metadata such as
# inkscape: or sodipodi:) are dropped.
KEPT_ATTRIBUTE_NAMESPACES = frozenset(
    {"http://www.w3.org/1999/xlink", "http://www.w3.org/XML/1998/namespace"}
)


@dataclass(frozen=True)
class Event:
    """One structural event."""

    kind: EventKind
    name: str = ""
    attributes: Mapping[str, str] = field(default_factory=lambda: _NO_ATTRIBUTES)
    text: str = ""


def local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element or attribute name."""
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def parse_document(source: str | bytes) -> Element:
    """Parse SVG text into an element tree.

    Raises:
        SVGParseError: If the document is not well-formed or uses forbidden
            XML constructs.
    """
    try:
        return ET.fromstring(source)
    except ET.ParseError as e:
        raise SVGParseError(f"Failed to parse SVG: {e}") from e
    except defusedxml.DefusedXmlException as e:
        raise SVGParseError(f"Refused to parse SVG: {e}") from e


def _trimmed(text: str | None) -> str | None:
    if text is None:
        return None
    text = text.strip()
    return text or None


def _attributes(element: Element) -> Mapping[str, str]:
    if not element.attrib:
        return _NO_ATTRIBUTES
    attributes: dict[str, str] = {}
    namespaced: dict[str, str] = {}
    for key, value in element.attrib.items():
        if not key.startswith("{"):
            attributes[key] = value
            continue
        namespace, _, name = key[1:].partition("}")
        if namespace in KEPT_ATTRIBUTE_NAMESPACES:
            namespaced[name] = value
    # A plain attribute wins over a namespaced one with the same local name.
    for name, value in namespaced.items():
        attributes.setdefault(name, value)
    return MappingProxyType(attributes)


def iter_events(root: Element) -> Iterator[Event]:
    """Yield the event stream for ``root`` and its descendants."""
    # Work items: ("open", element) | ("close", name) | ("text", str)
    pending: list[tuple[str, object]] = [("open", root)]
    while pending:
        action, payload = pending.pop()
        if action == "text":
            yield Event(EventKind.TEXT, text=payload)  # type: ignore[arg-type]
            continue
        if action == "close":
            yield Event(EventKind.END, name=payload)  # type: ignore[arg-type]
            continue

        element: Element = payload  # type: ignore[assignment]
        children = [child for child in element if isinstance(child.tag, str)]
        text = _trimmed(element.text)
        name = local_name(element.tag)
        attributes = _attributes(element)

        if not children and text is None:
            yield Event(EventKind.EMPTY, name=name, attributes=attributes)
            continue

        yield Event(EventKind.START, name=name, attributes=attributes)
        if text is not None:
            yield Event(EventKind.TEXT, text=text)

        pending.append(("close", name))
        for child in reversed(children):
            tail = _trimmed(child.tail)
            if tail is not None:
                pending.append(("text", tail))
            pending.append(("open", child))
    yield Event(EventKind.EOF)


def document_events(source: str | bytes) -> Iterator[Event]:
    """Parse ``source`` and yield its event stream."""
    return iter_events(parse_document(source))
