"""
Centralized configuration and constants for the raffle booklet generator.

This module contains all default values used when no configuration file is
given, making it easy to customize sizes, colors and fonts in one place.
"""

from typing import Tuple


RGBA = Tuple[int, int, int, int]

# Canvas size in pixels (portrait, 9:16)
DEFAULT_CANVAS_WIDTH = 1080
DEFAULT_CANVAS_HEIGHT = 1920

# Margins in pixels - the printable area sits between them
DEFAULT_MARGIN_TOP = 610
DEFAULT_MARGIN_BOTTOM = 440
DEFAULT_MARGIN_LEFT = 50
DEFAULT_MARGIN_RIGHT = 50

# Numbering
DEFAULT_MIN_NUMBER = 0
DEFAULT_MAX_NUMBER = 9999
DEFAULT_TICKETS_PER_PAGE = 10
DEFAULT_TICKETS_PER_ROW = 1
DEFAULT_PAGE_COUNT = 500

# Colors (RGBA)
DEFAULT_TEXT_COLOR: RGBA = (248, 220, 191, 255)     # Cream
DEFAULT_BORDER_COLOR: RGBA = (248, 220, 191, 255)   # Cream
CANVAS_FILL_COLOR: RGBA = (0, 0, 0, 255)            # Opaque black under the background

# Strokes and text
DEFAULT_LINE_THICKNESS = 5
DEFAULT_FONT_PATH = ""
DEFAULT_FONT_SIZE = 38.0

# Output
DEFAULT_OUTPUT_FOLDER = "talonarios"
OUTPUT_NAME_TEMPLATE = "talonario_{index:03d}.png"
DEFAULT_CONFIG_FILENAME = "config.json"

# Built-in fallback face (fixed 7x13 monospace cell)
FALLBACK_GLYPH_ADVANCE = 7
FALLBACK_LINE_HEIGHT = 13
FALLBACK_ASCENT = 11

# Rejection sampling gets slow once most of the range is used up
DENSE_RANGE_WARNING_RATIO = 0.9
