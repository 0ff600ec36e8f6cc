"""
Tests for grid geometry and page rendering.
"""

import pytest
from PIL import Image

from raffle_booklet.layout import LayoutEngine, compute_geometry, compute_text_x
from raffle_booklet.models import Alignment, Margins, Page, Style, Ticket

BLACK = (0, 0, 0, 255)
BORDER = (248, 220, 191, 255)
GREEN = (0, 200, 0, 255)


def make_page(*texts):
    return Page(index=1, tickets=[Ticket(value=int(t), text=t) for t in texts])


class TestComputeGeometry:
    """Tests for compute_geometry."""

    def test_default_portrait_sheet(self):
        """Test the 1080x1920 sheet with 10 tickets in one column."""
        margins = Margins(top=610, bottom=440, left=50, right=50)

        geometry = compute_geometry((1080, 1920), margins, 1, 10)

        assert geometry.row_count == 10
        assert geometry.cells_per_row == 1
        assert geometry.cell_width == 980
        assert geometry.cell_height == 87

    def test_last_row_stays_inside_printable_area(self):
        """Test the last row ends at most the floor remainder above the bottom margin."""
        margins = Margins(top=610, bottom=440, left=50, right=50)
        geometry = compute_geometry((1080, 1920), margins, 1, 10)

        _, last_y = geometry.cell_origin(9)
        bottom_edge = last_y + geometry.cell_height
        limit = 1920 - margins.bottom

        assert bottom_edge <= limit
        assert limit - bottom_edge == geometry.printable_height % geometry.row_count

    def test_rows_round_up(self):
        """Test a partial last row still gets a full row of height."""
        geometry = compute_geometry((400, 300), Margins(0, 0, 0, 0), 3, 7)

        assert geometry.row_count == 3
        assert geometry.cell_width == 133
        assert geometry.cell_height == 100

    def test_cell_origin_row_major(self):
        """Test cells fill left to right, then top to bottom."""
        geometry = compute_geometry((400, 300), Margins(top=5, bottom=0, left=7, right=0), 3, 7)

        assert geometry.cell_origin(0) == (7, 5)
        assert geometry.cell_origin(2) == (7 + 2 * 131, 5)
        assert geometry.cell_origin(4) == (7 + 131, 5 + 98)

    def test_rejects_zero_columns(self):
        """Test tickets_per_row of 0 raises ValueError."""
        with pytest.raises(ValueError, match="tickets_per_row"):
            compute_geometry((100, 100), Margins(0, 0, 0, 0), 0, 4)

    def test_rejects_empty_page(self):
        """Test ticket_count of 0 raises ValueError."""
        with pytest.raises(ValueError, match="ticket_count"):
            compute_geometry((100, 100), Margins(0, 0, 0, 0), 1, 0)


class TestComputeTextX:
    """Tests for number placement per alignment."""

    def test_left(self):
        """Test left alignment starts one character in."""
        assert compute_text_x(Alignment.LEFT, 50, 980, 4, 7, 1) == 57

    def test_center(self):
        """Test center alignment offsets half the number width from the middle."""
        assert compute_text_x(Alignment.CENTER, 50, 980, 4, 7, 1) == 50 + 490 - 14

    def test_center_rounds_down(self):
        """Test odd number widths use floor division."""
        assert compute_text_x(Alignment.CENTER, 0, 100, 3, 7, 1) == 50 - 10

    def test_right_single_column(self):
        """Test right alignment leaves one character before the right border."""
        assert compute_text_x(Alignment.RIGHT, 50, 980, 4, 7, 1) == 50 + 980 - 35

    def test_right_multi_column_keeps_divided_width(self):
        """Test right alignment divides cell width by tickets per row again."""
        # Two columns of 490px: reference edge is x + 490 // 2, not x + 490
        assert compute_text_x(Alignment.RIGHT, 540, 490, 4, 7, 2) == 540 + 245 - 35
        assert compute_text_x(Alignment.RIGHT, 50, 490, 4, 7, 2) == 260


class TestLayoutEngine:
    """Tests for LayoutEngine page rendering."""

    def make_engine(self, face, alignment=Alignment.LEFT, tickets_per_row=1,
                    margins=Margins(top=20, bottom=0, left=10, right=10),
                    background=None):
        style = Style(text_color=(255, 255, 255, 255), border_color=BORDER,
                      line_thickness=2, alignment=alignment)
        return LayoutEngine(style, face, (100, 120), margins, tickets_per_row,
                            digit_width=2, background=background)

    def test_canvas_size_and_mode(self, recording_face):
        """Test the rendered page matches the configured canvas."""
        canvas = self.make_engine(recording_face).layout_page(make_page("01", "02"))

        assert canvas.size == (100, 120)
        assert canvas.mode == 'RGBA'

    def test_text_positions_left(self, recording_face):
        """Test each number is drawn one character in, at the cell's vertical middle."""
        self.make_engine(recording_face).layout_page(make_page("01", "02"))

        # cells are 80x50; baseline = top + 25 + 20 // 4
        assert [call[:2] for call in recording_face.calls] == [
            ("01", (20, 50)),
            ("02", (20, 100)),
        ]

    def test_text_color_from_style(self, recording_face):
        """Test numbers use the style's text color."""
        self.make_engine(recording_face).layout_page(make_page("07"))

        assert recording_face.calls[0][2] == (255, 255, 255, 255)

    def test_borders_and_rule(self, recording_face):
        """Test cell borders and the separator rule are painted."""
        canvas = self.make_engine(recording_face).layout_page(make_page("01", "02"))

        assert canvas.getpixel((10, 20)) == BORDER    # rule / first cell corner
        assert canvas.getpixel((50, 20)) == BORDER    # rule along top margin
        assert canvas.getpixel((10, 45)) == BORDER    # left border
        assert canvas.getpixel((89, 45)) == BORDER    # right border
        assert canvas.getpixel((50, 69)) == BORDER    # bottom of first cell
        assert canvas.getpixel((50, 45)) == BLACK     # cell interior
        assert canvas.getpixel((5, 5)) == BLACK       # margin

    def test_background_scaled_under_grid(self, recording_face):
        """Test the background fills the canvas beneath borders."""
        background = Image.new('RGB', (3, 7), (0, 200, 0))
        engine = self.make_engine(recording_face, background=background)

        canvas = engine.layout_page(make_page("01", "02"))

        assert canvas.getpixel((5, 5)) == GREEN
        assert canvas.getpixel((50, 45)) == GREEN
        assert canvas.getpixel((99, 119)) == GREEN
        assert canvas.getpixel((10, 45)) == BORDER

    def test_pages_are_independent(self, recording_face):
        """Test rendering twice gives identical canvases."""
        engine = self.make_engine(recording_face)
        page = make_page("01", "02")

        assert engine.layout_page(page).tobytes() == engine.layout_page(page).tobytes()

    def test_right_alignment_multi_column_pinned(self, recording_face):
        """Test right alignment with two per row keeps the divided-width offset."""
        engine = self.make_engine(recording_face, alignment=Alignment.RIGHT,
                                  tickets_per_row=2, margins=Margins(0, 0, 0, 0))

        engine.layout_page(make_page("01", "02"))

        # cell width 50: x + 50 // 2 - 10 * 3
        assert [call[1][0] for call in recording_face.calls] == [-5, 45]

    def test_center_alignment(self, recording_face):
        """Test center alignment on a single column."""
        engine = self.make_engine(recording_face, alignment=Alignment.CENTER)

        engine.layout_page(make_page("01"))

        # cell x 10, width 80: 10 + 40 - 10 * 2 // 2
        assert recording_face.calls[0][1][0] == 40
