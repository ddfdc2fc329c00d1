"""Exception hierarchy for svg2cetz.

Every failure raised while converting a document derives from
:class:`Svg2CetzError`. All of them abort the conversion in progress; the
engine never skips an element and carries on after one of these.
"""

from __future__ import annotations

from typing import Any


class Svg2CetzError(Exception):
    """Base class for all svg2cetz errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        extra = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} ({extra})"


class SVGParseError(Svg2CetzError):
    """The input document is not well-formed XML."""


class ConfigError(Svg2CetzError):
    """A configuration file or value is invalid."""


class ParseError(Svg2CetzError):
    """An attribute value could not be parsed."""


class MalformedTransform(ParseError):
    """A ``transform`` attribute is not a valid SVG transform list."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Malformed transform: {reason}", details={"value": value})
        self.value = value


class MalformedStyleSyntax(ParseError):
    """A ``style`` segment has no ``key:value`` separator."""

    def __init__(self, segment: str) -> None:
        super().__init__(f"Malformed style segment {segment!r}: expected 'key:value'")
        self.segment = segment


class MalformedNumeric(ParseError):
    """A numeric value, with or without a unit suffix, failed to parse."""

    def __init__(self, value: str, attribute: str | None = None) -> None:
        details = {"attribute": attribute} if attribute else None
        super().__init__(f"Malformed number {value!r}", details=details)
        self.value = value
        self.attribute = attribute


class MalformedPathData(ParseError):
    """A path ``d`` attribute could not be parsed."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Malformed path data: {reason}", details={"d": value})
        self.value = value


class ConversionError(Svg2CetzError):
    """The document structure cannot be converted."""


class MissingTextContainer(ConversionError):
    """Text content appeared outside any ``text`` or ``tspan`` element."""

    def __init__(self, text: str) -> None:
        super().__init__(f"No text container for content {text!r}")
        self.text = text


class MissingTextAnchor(ConversionError):
    """Text content appeared in a container without any position."""

    def __init__(self, text: str, container: str) -> None:
        super().__init__(
            f"No position for text content {text!r}",
            details={"container": container},
        )
        self.text = text
        self.container = container
