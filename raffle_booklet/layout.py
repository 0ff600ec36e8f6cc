"""
Grid layout and page rendering.

The layout engine splits the printable area (canvas minus margins) into a
grid of equal cells, one per ticket, and paints each page: background,
separator rule, cell borders and ticket numbers.
"""

from typing import Optional, Tuple

from PIL import Image

from .fonts import FontFace
from .models import Alignment, CanvasGeometry, Margins, Page, Style, Ticket
from .raster import (
    composite_image,
    draw_centered_text,
    draw_horizontal_rule,
    draw_rect_border,
    new_canvas,
    scale_nearest,
)


def compute_geometry(
    canvas_size: Tuple[int, int],
    margins: Margins,
    tickets_per_row: int,
    ticket_count: int
) -> CanvasGeometry:
    """
    Compute the ticket grid for a page.

    Cell sizes use floor division; the leftover pixels stay unused past the
    last column and the last row.

    Args:
        canvas_size: (width, height) of the page in pixels
        margins: Page margins
        tickets_per_row: Number of grid columns
        ticket_count: Tickets on the page

    Returns:
        CanvasGeometry for the page

    Raises:
        ValueError: If tickets_per_row or ticket_count is not positive

    Example:
        >>> g = compute_geometry((1080, 1920), Margins(610, 440, 50, 50), 1, 10)
        >>> (g.row_count, g.cell_width, g.cell_height)
        (10, 980, 87)
    """
    if tickets_per_row <= 0:
        raise ValueError(f"tickets_per_row must be > 0, got {tickets_per_row}")
    if ticket_count <= 0:
        raise ValueError(f"ticket_count must be > 0, got {ticket_count}")

    canvas_width, canvas_height = canvas_size
    rows = (ticket_count + tickets_per_row - 1) // tickets_per_row

    return CanvasGeometry(
        canvas_width=canvas_width,
        canvas_height=canvas_height,
        margins=margins,
        cells_per_row=tickets_per_row,
        row_count=rows,
        cell_width=(canvas_width - margins.left - margins.right) // tickets_per_row,
        cell_height=(canvas_height - margins.top - margins.bottom) // rows,
    )


def compute_text_x(
    alignment: Alignment,
    cell_x: int,
    cell_width: int,
    digit_width: int,
    char_width: int,
    tickets_per_row: int
) -> int:
    """
    Get the x position where a ticket number starts.

    - LEFT: one character in from the cell's left edge.
    - CENTER: half the number's width left of the cell center.
    - RIGHT: digit_width + 1 characters left of x + cell_width / tickets_per_row.
      The extra division by tickets_per_row lines up with the right border
      only when there is a single ticket per row; with more columns the
      number drifts left (and may leave the cell). Kept as is so existing
      booklets reprint identically.
    """
    if alignment == Alignment.LEFT:
        return cell_x + char_width
    if alignment == Alignment.CENTER:
        return cell_x + cell_width // 2 - char_width * digit_width // 2
    if alignment == Alignment.RIGHT:
        return cell_x + cell_width // tickets_per_row - char_width * (digit_width + 1)
    raise ValueError(f"Unknown alignment: {alignment}")


class LayoutEngine:
    """
    Renders pages of tickets onto canvases.

    The engine is configured once per run; the background, if any, is
    scaled to the canvas size up front and reused for every page.
    """

    def __init__(
        self,
        style: Style,
        face: FontFace,
        canvas_size: Tuple[int, int],
        margins: Margins,
        tickets_per_row: int,
        digit_width: int,
        background: Optional[Image.Image] = None
    ):
        self.style = style
        self.face = face
        self.canvas_size = canvas_size
        self.margins = margins
        self.tickets_per_row = tickets_per_row
        self.digit_width = digit_width
        self._background = scale_nearest(background, *canvas_size) if background is not None else None

    def geometry(self, ticket_count: int) -> CanvasGeometry:
        return compute_geometry(self.canvas_size, self.margins, self.tickets_per_row, ticket_count)

    def layout_page(self, page: Page) -> Image.Image:
        """
        Render a page to a new RGBA canvas.

        Drawing order: black fill, background, separator rule along the top
        margin, then for each ticket its cell border and number.
        """
        width, height = self.canvas_size
        canvas = new_canvas(width, height)

        if self._background is not None:
            composite_image(canvas, self._background, (0, 0, width, height))

        geometry = self.geometry(len(page.tickets))

        draw_horizontal_rule(
            canvas,
            self.margins.left,
            self.margins.top,
            geometry.printable_width,
            self.style.line_thickness,
            self.style.border_color
        )

        char_width = self.face.glyph_width('0')
        for index, ticket in enumerate(page.tickets):
            x, y = geometry.cell_origin(index)
            self._draw_ticket(canvas, ticket, x, y, geometry, char_width)

        return canvas

    def _draw_ticket(
        self,
        canvas: Image.Image,
        ticket: Ticket,
        x: int,
        y: int,
        geometry: CanvasGeometry,
        char_width: int
    ):
        draw_rect_border(
            canvas, x, y,
            geometry.cell_width, geometry.cell_height,
            self.style.line_thickness, self.style.border_color
        )

        text_x = compute_text_x(
            self.style.alignment, x, geometry.cell_width,
            self.digit_width, char_width, self.tickets_per_row
        )
        draw_centered_text(
            canvas, ticket.text, self.face,
            text_x, y + geometry.cell_height // 2,
            self.style.text_color
        )
