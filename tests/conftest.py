"""Pytest configuration and shared fixtures for svg2cetz tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from svg2cetz import Svg2CetzConverter, Transform


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep user config files and environment out of every test."""
    monkeypatch.delenv("SVG2CETZ_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def identity_converter() -> Svg2CetzConverter:
    """Converter with an identity root transform and unscaled fonts."""
    return Svg2CetzConverter(root_transform=Transform.identity(), font_scale=1.0)


@pytest.fixture
def convert(identity_converter: Svg2CetzConverter) -> Callable[[str], list[str]]:
    """Convert an SVG body (without the <svg> wrapper) to emitted calls."""

    def _convert(body: str) -> list[str]:
        svg = f'<svg xmlns="http://www.w3.org/2000/svg">{body}</svg>'
        return identity_converter.convert_lines(svg)

    return _convert


@pytest.fixture
def simple_svg_content() -> str:
    """Return an SVG with one rectangle, one circle and one text."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 200 100">
  <rect x="0" y="0" width="10" height="5"/>
  <circle cx="10" cy="10" r="5" style="fill:#ff0000"/>
  <text x="5" y="5">Hello</text>
</svg>"""


@pytest.fixture
def temp_svg(tmp_path: Path, simple_svg_content: str) -> Path:
    """Write the simple SVG to a temporary file."""
    svg_path = tmp_path / "test.svg"
    svg_path.write_text(simple_svg_content, encoding="utf-8")
    return svg_path


@pytest.fixture
def malformed_svg_content() -> str:
    """Return malformed SVG for error testing."""
    return """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg">
  <text x="10" y="50">Unclosed text
</svg>"""


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
