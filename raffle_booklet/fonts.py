"""
Font faces used to print ticket numbers.

The rasterizer only needs three things from a font: the advance width of a
glyph, the line height, and a way to draw a string from a baseline anchor.
FontFace captures that; TrueTypeFace and FallbackFace provide it on top of
Pillow's ImageFont.
"""

import math
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Tuple, Union

from PIL import Image, ImageDraw, ImageFont

from .config import FALLBACK_ASCENT, FALLBACK_GLYPH_ADVANCE, FALLBACK_LINE_HEIGHT, RGBA


class FontFace(ABC):
    """Interface for the text capabilities the layout engine relies on."""

    @abstractmethod
    def glyph_width(self, char: str) -> int:
        """Advance width of a single character, in pixels."""

    @property
    @abstractmethod
    def line_height(self) -> int:
        """Recommended distance between baselines, in pixels."""

    @abstractmethod
    def draw_text(self, canvas: Image.Image, text: str, origin: Tuple[int, int], color: RGBA):
        """Draw `text` with its left baseline point at `origin`."""


class TrueTypeFace(FontFace):
    """A TrueType/OpenType font loaded through FreeType."""

    def __init__(self, font: ImageFont.FreeTypeFont, path: str = ""):
        self.font = font
        self.path = path

    @classmethod
    def from_file(cls, path: Union[str, Path], size: float) -> 'TrueTypeFace':
        """
        Load a font file at the given pixel size.

        Raises:
            OSError: If the file is missing or is not a font FreeType can read
        """
        return cls(ImageFont.truetype(str(path), size), path=str(path))

    def glyph_width(self, char: str) -> int:
        # Halves round up, not to even
        return math.floor(self.font.getlength(char) + 0.5)

    @property
    def line_height(self) -> int:
        ascent, descent = self.font.getmetrics()
        return ascent + descent

    def draw_text(self, canvas: Image.Image, text: str, origin: Tuple[int, int], color: RGBA):
        ImageDraw.Draw(canvas).text(origin, text, font=self.font, fill=color, anchor="ls")

    def __repr__(self):
        return f"TrueTypeFace(path='{self.path}', size={self.font.size})"


class FallbackFace(FontFace):
    """
    Built-in monospace face with fixed 7x13 cell metrics.

    Glyphs come from Pillow's default font, but every character is placed
    on a fixed advance so measurements never depend on which default font
    the installed Pillow ships.
    """

    def __init__(self):
        self.font = ImageFont.load_default()

    def glyph_width(self, char: str) -> int:
        return FALLBACK_GLYPH_ADVANCE

    @property
    def line_height(self) -> int:
        return FALLBACK_LINE_HEIGHT

    def draw_text(self, canvas: Image.Image, text: str, origin: Tuple[int, int], color: RGBA):
        x, baseline = origin
        top = baseline - FALLBACK_ASCENT
        draw = ImageDraw.Draw(canvas)
        for i, char in enumerate(text):
            draw.text((x + i * FALLBACK_GLYPH_ADVANCE, top), char, font=self.font, fill=color)

    def __repr__(self):
        return "FallbackFace(7x13)"
