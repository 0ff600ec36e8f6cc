"""
Pixel-level drawing primitives on RGBA canvases.

All primitives clip silently to the canvas: a stroke that runs past an edge
is cut off there, and one lying entirely outside is skipped. Grid rounding
at the page edges therefore never raises.
"""

from typing import Optional, Tuple

from PIL import Image

from .config import CANVAS_FILL_COLOR, RGBA
from .fonts import FontFace


Box = Tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = CANVAS_FILL_COLOR) -> Image.Image:
    """Create an RGBA canvas filled with `color`."""
    return Image.new('RGBA', (width, height), color)


def _clip_box(canvas: Image.Image, left: int, top: int, right: int, bottom: int) -> Optional[Box]:
    """Intersect a half-open box with the canvas; None if nothing is left."""
    width, height = canvas.size
    left, top = max(left, 0), max(top, 0)
    right, bottom = min(right, width), min(bottom, height)
    if left >= right or top >= bottom:
        return None
    return (left, top, right, bottom)


def _fill_clipped(canvas: Image.Image, left: int, top: int, right: int, bottom: int, color: RGBA):
    box = _clip_box(canvas, left, top, right, bottom)
    if box is not None:
        canvas.paste(color, box)


def fill_background(canvas: Image.Image, color: RGBA):
    """Fill the whole canvas with a solid color."""
    canvas.paste(color, (0, 0) + canvas.size)


def scale_nearest(source: Image.Image, width: int, height: int) -> Image.Image:
    """
    Resize an image with nearest-neighbour sampling.

    Destination pixel (x, y) takes the source pixel at
    (floor(x * src_w / width), floor(y * src_h / height)). The resize runs as
    one column pass and one row pass of single-pixel strips, so every sample
    position is exact integer arithmetic.

    Args:
        source: Image to resample (any mode; converted to RGBA)
        width: Target width in pixels
        height: Target height in pixels

    Returns:
        New RGBA image of size (width, height)

    Raises:
        ValueError: If the target size is not positive
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Target size must be positive, got {width}x{height}")

    src = source.convert('RGBA')
    src_width, src_height = src.size

    columns = Image.new('RGBA', (width, src_height))
    for x in range(width):
        src_x = x * src_width // width
        columns.paste(src.crop((src_x, 0, src_x + 1, src_height)), (x, 0))

    scaled = Image.new('RGBA', (width, height))
    for y in range(height):
        src_y = y * src_height // height
        scaled.paste(columns.crop((0, src_y, width, src_y + 1)), (0, y))

    return scaled


def composite_image(canvas: Image.Image, source: Image.Image, dest_rect: Box):
    """
    Alpha-composite `source` over `canvas` inside `dest_rect`.

    Args:
        canvas: RGBA canvas, modified in place
        source: Image to overlay; resampled to the rectangle size if needed
        dest_rect: (x, y, width, height) in canvas pixels
    """
    x, y, width, height = dest_rect
    if width <= 0 or height <= 0:
        return

    overlay = source.convert('RGBA')
    if overlay.size != (width, height):
        overlay = scale_nearest(overlay, width, height)

    box = _clip_box(canvas, x, y, x + width, y + height)
    if box is None:
        return

    left, top, right, bottom = box
    canvas.alpha_composite(
        overlay,
        dest=(left, top),
        source=(left - x, top - y, right - x, bottom - y)
    )


def draw_rect_border(
    canvas: Image.Image,
    x: int,
    y: int,
    width: int,
    height: int,
    thickness: int,
    color: RGBA
):
    """
    Draw a hollow rectangle whose strokes lie inside (x, y, width, height).

    The stroke is clamped to the rectangle size, and each of the four edges
    is clipped to the canvas on its own.
    """
    thickness = max(0, min(thickness, width, height))
    if thickness == 0:
        return

    right, bottom = x + width, y + height
    _fill_clipped(canvas, x, y, right, y + thickness, color)               # top
    _fill_clipped(canvas, x, bottom - thickness, right, bottom, color)     # bottom
    _fill_clipped(canvas, x, y, x + thickness, bottom, color)              # left
    _fill_clipped(canvas, right - thickness, y, right, bottom, color)      # right


def draw_horizontal_rule(
    canvas: Image.Image,
    x: int,
    y: int,
    length: int,
    thickness: int,
    color: RGBA
):
    """Draw a horizontal line `length` pixels long, growing downward from `y`."""
    if length <= 0 or thickness <= 0:
        return
    _fill_clipped(canvas, x, y, x + length, y + thickness, color)


def draw_centered_text(
    canvas: Image.Image,
    text: str,
    face: FontFace,
    x: int,
    y: int,
    color: RGBA
):
    """
    Draw `text` starting at `x` with its vertical middle near `y`.

    The baseline is pushed a quarter of the line height below `y`, which
    roughly centers digits without needing exact ascent/descent metrics.
    """
    baseline = y + face.line_height // 4
    face.draw_text(canvas, text, (x, baseline), color)
