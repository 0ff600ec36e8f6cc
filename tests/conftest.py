"""
Pytest configuration and fixtures.
"""

import pytest
from PIL import Image

from raffle_booklet.fonts import FontFace
from raffle_booklet.models import BookletConfig


class RecordingFace(FontFace):
    """Font stub with round metrics that records every draw call."""

    def __init__(self, advance=10, height=20):
        self.advance = advance
        self.height = height
        self.calls = []

    def glyph_width(self, char):
        return self.advance

    @property
    def line_height(self):
        return self.height

    def draw_text(self, canvas, text, origin, color):
        self.calls.append((text, origin, color))


@pytest.fixture
def recording_face():
    """Font stub that records draw calls."""
    return RecordingFace()


@pytest.fixture
def black_canvas():
    """Small opaque black RGBA canvas."""
    return Image.new('RGBA', (20, 20), (0, 0, 0, 255))


@pytest.fixture
def small_config(tmp_path):
    """A fast configuration: 3 pages of 2 tickets on a small canvas."""
    return BookletConfig(
        tickets_per_row=1,
        min_number=0,
        max_number=99,
        tickets_per_page=2,
        page_count=3,
        output_folder=str(tmp_path / "out"),
        canvas_width=120,
        canvas_height=200,
        margin_top=40,
        margin_bottom=20,
        margin_left=10,
        margin_right=10,
        line_thickness=2,
        seed=1234,
    )


@pytest.fixture
def background_file(tmp_path):
    """A 4x4 solid green PNG on disk."""
    path = tmp_path / "background.png"
    Image.new('RGB', (4, 4), (0, 200, 0)).save(path)
    return path
