"""High-level conversion API."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from svg2cetz.config import Config
from svg2cetz.emit.emitter import wrap_output
from svg2cetz.emit.sinks import ListSink
from svg2cetz.engine.traversal import convert_events
from svg2cetz.exceptions import Svg2CetzError
from svg2cetz.geometry.transform import Transform
from svg2cetz.svg.events import document_events

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of converting one file."""

    success: bool
    input_path: Path | None = None
    output_path: Path | None = None
    primitive_count: int = 0
    output: str = ""
    errors: list[str] = field(default_factory=list)


class Svg2CetzConverter:
    """Convert SVG documents to CeTZ drawing calls.

    Example:
        >>> converter = Svg2CetzConverter(root_transform=Transform.identity())
        >>> converter.convert_string('<svg><circle cx="10" cy="10" r="5"/></svg>')
        'circle((10, 10), radius: 5, stroke: none, )\\n'
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        root_transform: Transform | None = None,
        font_scale: float | None = None,
        strict_text: bool | None = None,
        wrap: str | None = None,
    ) -> None:
        self.config = config or Config()
        self.root_transform = root_transform or self.config.root_transform
        self.font_scale = self.config.font_scale if font_scale is None else font_scale
        self.strict_text = self.config.strict_text if strict_text is None else strict_text
        self.wrap = wrap or self.config.wrap

    def convert_lines(self, source: str | bytes) -> list[str]:
        """Convert ``source`` and return one string per emitted primitive.

        Raises:
            Svg2CetzError: On any parse or conversion failure.
        """
        sink = ListSink()
        count = convert_events(
            document_events(source),
            sink,
            root_transform=self.root_transform,
            font_scale=self.font_scale,
            strict_text=self.strict_text,
        )
        logger.info("Emitted %d primitives", count)
        return sink.emissions

    def convert_string(self, source: str | bytes) -> str:
        """Convert ``source`` and return the document text.

        Raises:
            Svg2CetzError: On any parse or conversion failure.
        """
        return wrap_output(self.convert_lines(source), self.wrap)

    def convert_file(self, input_path: Path | str, output_path: Path | str) -> ConversionResult:
        """Convert one file, reporting failures in the result instead of raising."""
        input_path = Path(input_path)
        output_path = Path(output_path)
        result = ConversionResult(success=False, input_path=input_path, output_path=output_path)
        try:
            lines = self.convert_lines(input_path.read_bytes())
            result.output = wrap_output(lines, self.wrap)
            output_path.write_text(result.output, encoding="utf-8")
        except (Svg2CetzError, OSError) as e:
            logger.error("Failed to convert %s: %s", input_path, e)
            result.errors.append(str(e))
            return result
        result.primitive_count = len(lines)
        result.success = True
        return result
