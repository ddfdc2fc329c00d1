"""Configuration for svg2cetz.

Settings come from a YAML file when one is found, otherwise from defaults:

```yaml
root_transform: [0.01, 0, 0, -0.01, 0, 0]
font_scale: 0.27
strict_text: true
wrap: none
log_level: WARNING
```
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from svg2cetz.emit.emitter import WRAP_MODES
from svg2cetz.exceptions import ConfigError
from svg2cetz.geometry.transform import Transform

CONFIG_ENV_VAR = "SVG2CETZ_CONFIG"
DEFAULT_CONFIG_PATH = Path("~/.config/svg2cetz/config.yaml")

# SVG user units to CeTZ canvas units, with the y axis pointing up.
DEFAULT_ROOT_TRANSFORM = Transform(0.01, 0.0, 0.0, -0.01, 0.0, 0.0)
DEFAULT_FONT_SCALE = 0.27

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Config:
    """Conversion settings."""

    root_transform: Transform = field(default=DEFAULT_ROOT_TRANSFORM)
    font_scale: float = DEFAULT_FONT_SCALE
    strict_text: bool = True
    wrap: str = "none"
    log_level: str = "WARNING"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Config:
        """Build a config from parsed YAML, validating every value.

        Raises:
            ConfigError: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(unknown)}")

        values: dict[str, Any] = {}
        if "root_transform" in data:
            raw = data["root_transform"]
            if (
                not isinstance(raw, (list, tuple))
                or len(raw) != 6
                or not all(isinstance(v, (int, float)) for v in raw)
            ):
                raise ConfigError("root_transform must be a list of 6 numbers")
            values["root_transform"] = Transform.from_values(raw)
        if "font_scale" in data:
            scale = data["font_scale"]
            if not isinstance(scale, (int, float)) or isinstance(scale, bool) or scale <= 0:
                raise ConfigError("font_scale must be a positive number")
            values["font_scale"] = float(scale)
        if "strict_text" in data:
            if not isinstance(data["strict_text"], bool):
                raise ConfigError("strict_text must be true or false")
            values["strict_text"] = data["strict_text"]
        if "wrap" in data:
            wrap = str(data["wrap"])
            if wrap not in WRAP_MODES:
                raise ConfigError(f"wrap must be one of: {', '.join(WRAP_MODES)}")
            values["wrap"] = wrap
        if "log_level" in data:
            level = str(data["log_level"]).upper()
            if level not in LOG_LEVELS:
                raise ConfigError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
            values["log_level"] = level
        return cls(**values)

    @classmethod
    def load(cls, path: Path | str | None = None) -> Config:
        """Load settings from ``path``, ``$SVG2CETZ_CONFIG`` or the user config.

        Falls back to defaults when no file is configured and the default
        location does not exist. An explicitly named file must exist.

        Raises:
            FileNotFoundError: If an explicitly named file is missing.
            ConfigError: If the file is not valid YAML or has bad values.
        """
        explicit = path if path is not None else os.environ.get(CONFIG_ENV_VAR)
        if explicit:
            config_path = Path(explicit).expanduser()
            if not config_path.exists():
                raise FileNotFoundError(f"Config file not found: {config_path}")
        else:
            config_path = DEFAULT_CONFIG_PATH.expanduser()
            if not config_path.exists():
                return cls()

        try:
            data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a mapping")
        logging.getLogger(__name__).debug("Loaded config from %s", config_path)
        return cls.from_dict(data)
