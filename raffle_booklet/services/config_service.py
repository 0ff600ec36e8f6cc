"""
Configuration Service - Loads and saves booklet configuration.

This service reads a BookletConfig from a JSON file, converts colors and
alignment to their typed form, and writes configurations back out.
"""

import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

from PIL import ImageColor

from ..config import DEFAULT_CONFIG_FILENAME, RGBA
from ..exceptions import ConfigurationError
from ..models import Alignment, BookletConfig

logger = logging.getLogger(__name__)

COLOR_FIELDS = ('text_color', 'border_color')
INT_FIELDS = (
    'tickets_per_row', 'min_number', 'max_number', 'tickets_per_page', 'page_count',
    'canvas_width', 'canvas_height', 'margin_top', 'margin_bottom', 'margin_left',
    'margin_right', 'line_thickness',
)


def parse_color(value: Any) -> RGBA:
    """
    Convert a color setting to an RGBA tuple.

    Accepts [r, g, b], [r, g, b, a] or any color string Pillow understands.

    Example:
        >>> parse_color('#f8dcbf')
        (248, 220, 191, 255)
        >>> parse_color([0, 0, 0])
        (0, 0, 0, 255)

    Raises:
        ValueError: If the value is not a color
    """
    if isinstance(value, str):
        rgb = ImageColor.getcolor(value, 'RGBA')
        return tuple(rgb)

    if isinstance(value, (list, tuple)) and len(value) in (3, 4):
        channels = [int(c) for c in value]
        if any(not 0 <= c <= 255 for c in channels):
            raise ValueError(f"Color channels must be between 0 and 255, got {list(value)}")
        if len(channels) == 3:
            channels.append(255)
        return tuple(channels)

    raise ValueError(f"Invalid color: {value!r}")


def config_from_dict(data: Dict[str, Any]) -> BookletConfig:
    """
    Build a BookletConfig from a plain dictionary.

    Missing keys keep their defaults; unknown keys are ignored with a warning.

    Raises:
        ValueError: If a value has the wrong type or form
    """
    known = {f.name for f in fields(BookletConfig)}
    values = {}

    for key, value in data.items():
        if key not in known:
            logger.warning("Warning: Unknown configuration key '%s' ignored", key)
            continue

        if key in COLOR_FIELDS:
            value = parse_color(value)
        elif key == 'alignment':
            value = Alignment.parse(value)
        elif key in INT_FIELDS:
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{key} must be an integer, got {value!r}")
        elif key == 'font_size':
            value = float(value)
        elif key == 'seed':
            value = None if value is None else int(value)
        else:
            value = "" if value is None else str(value)

        values[key] = value

    return BookletConfig(**values)


def config_to_dict(config: BookletConfig) -> Dict[str, Any]:
    """Convert a BookletConfig to a JSON-serializable dictionary."""
    data = {}
    for f in fields(BookletConfig):
        value = getattr(config, f.name)
        if isinstance(value, Alignment):
            value = value.value
        elif isinstance(value, tuple):
            value = list(value)
        data[f.name] = value
    return data


class ConfigService:
    """
    Manages booklet configuration persistence.

    Handles loading configuration from a JSON file, saving changes, and
    providing defaults when the file doesn't exist.
    """

    def __init__(self, config_path: Optional[Path] = None, required: bool = False):
        """
        Initialize config service.

        Args:
            config_path: Optional custom config file path.
                        If None, uses config.json in the current directory.
            required: If True, a missing file is an error instead of
                      falling back to defaults.
        """
        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_FILENAME)

        self.config_path = Path(config_path)
        self.required = required

    def load(self) -> BookletConfig:
        """
        Load configuration from file.

        Returns:
            BookletConfig with loaded settings, or defaults if file doesn't exist

        Raises:
            ConfigurationError: If a required file is missing, is not valid
                JSON or holds invalid values
        """
        if not self.config_path.exists():
            if self.required:
                raise ConfigurationError(f"Config file not found: {self.config_path}")
            logger.debug("No config file at %s, using defaults", self.config_path)
            return BookletConfig()

        try:
            with open(self.config_path, encoding='utf-8') as f:
                data = json.load(f)
        except (ValueError, OSError) as e:
            raise ConfigurationError(f"Failed to read config {self.config_path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config {self.config_path} must contain a JSON object")

        try:
            return config_from_dict(data)
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid value in config {self.config_path}: {e}") from e

    def save(self, config: BookletConfig):
        """
        Save configuration to file.

        Args:
            config: BookletConfig to save

        Raises:
            ConfigurationError: If the file cannot be written
        """
        try:
            # Ensure parent directory exists
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, 'w', encoding='utf-8') as f:
                json.dump(config_to_dict(config), f, indent=2)

        except OSError as e:
            raise ConfigurationError(f"Failed to save config to {self.config_path}: {e}") from e

    def get_config_path(self) -> Path:
        """
        Get the path to the configuration file.

        Returns:
            Path to config file (may not exist yet)
        """
        return self.config_path
