"""svg2cetz: Convert SVG drawings to CeTZ drawing calls for Typst.

This library provides:
- A context-carrying traversal of the SVG element stream
- Transform and inherited text style resolution
- Rectangles, circles, ellipses, paths and text as CeTZ primitives
- A click command line for single files and batches

Example:
    >>> from svg2cetz import Svg2CetzConverter
    >>> converter = Svg2CetzConverter()
    >>> result = converter.convert_file("input.svg", "output.typ")
"""

from svg2cetz.api import ConversionResult, Svg2CetzConverter
from svg2cetz.config import Config
from svg2cetz.exceptions import (
    ConfigError,
    ConversionError,
    MalformedNumeric,
    MalformedPathData,
    MalformedStyleSyntax,
    MalformedTransform,
    MissingTextAnchor,
    MissingTextContainer,
    ParseError,
    SVGParseError,
    Svg2CetzError,
)
from svg2cetz.geometry import Transform

__version__ = "0.1.0"

__all__ = [
    # Main API
    "Svg2CetzConverter",
    "ConversionResult",
    "Config",
    "Transform",
    # Exceptions
    "Svg2CetzError",
    "SVGParseError",
    "ConfigError",
    "ParseError",
    "MalformedTransform",
    "MalformedStyleSyntax",
    "MalformedNumeric",
    "MalformedPathData",
    "ConversionError",
    "MissingTextAnchor",
    "MissingTextContainer",
    # Metadata
    "__version__",
]
