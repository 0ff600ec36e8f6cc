"""
Data models for the raffle booklet generator.

This module defines typed dataclasses that carry configuration, tickets and
layout geometry between the allocator, the layout engine and the services.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .config import (
    DEFAULT_BORDER_COLOR,
    DEFAULT_CANVAS_HEIGHT,
    DEFAULT_CANVAS_WIDTH,
    DEFAULT_FONT_PATH,
    DEFAULT_FONT_SIZE,
    DEFAULT_LINE_THICKNESS,
    DEFAULT_MARGIN_BOTTOM,
    DEFAULT_MARGIN_LEFT,
    DEFAULT_MARGIN_RIGHT,
    DEFAULT_MARGIN_TOP,
    DEFAULT_MAX_NUMBER,
    DEFAULT_MIN_NUMBER,
    DEFAULT_OUTPUT_FOLDER,
    DEFAULT_PAGE_COUNT,
    DEFAULT_TEXT_COLOR,
    DEFAULT_TICKETS_PER_PAGE,
    DEFAULT_TICKETS_PER_ROW,
    RGBA,
)


class Alignment(Enum):
    """Horizontal placement of the ticket number inside its cell."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    @classmethod
    def parse(cls, value) -> 'Alignment':
        """
        Parse an alignment from a name or a legacy integer code.

        Accepts an Alignment, one of 'left'/'center'/'right' (any case),
        or the integer codes 0 (left), 1 (center) and 2 (right), given as
        ints or digit strings.

        Raises:
            ValueError: If the value names no alignment
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and value.strip().isdigit():
            value = int(value)
        if isinstance(value, int) and not isinstance(value, bool):
            codes = list(cls)
            if 0 <= value < len(codes):
                return codes[value]
            raise ValueError(f"Invalid alignment code: {value}. Must be 0, 1 or 2")
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(
                f"Invalid alignment: '{value}'. Must be 'left', 'center' or 'right'"
            ) from None


@dataclass(frozen=True)
class NumberRange:
    """Inclusive range of ticket numbers available to a run."""
    min: int
    max: int

    def __post_init__(self):
        """Validate range bounds."""
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must be <= max ({self.max})")

    @property
    def size(self) -> int:
        """Number of distinct values in the range."""
        return self.max - self.min + 1

    def __contains__(self, value: int) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class Margins:
    """Page margins in pixels."""
    top: int = DEFAULT_MARGIN_TOP
    bottom: int = DEFAULT_MARGIN_BOTTOM
    left: int = DEFAULT_MARGIN_LEFT
    right: int = DEFAULT_MARGIN_RIGHT

    def has_negative(self) -> bool:
        """Check if any margin is negative."""
        return min(self.top, self.bottom, self.left, self.right) < 0


@dataclass(frozen=True)
class Style:
    """Colors and strokes shared read-only by every page."""
    text_color: RGBA = DEFAULT_TEXT_COLOR
    border_color: RGBA = DEFAULT_BORDER_COLOR
    line_thickness: int = DEFAULT_LINE_THICKNESS
    alignment: Alignment = Alignment.LEFT


@dataclass(frozen=True)
class Ticket:
    """A single raffle ticket: its number and the zero-padded text printed on it."""
    value: int
    text: str


@dataclass
class Page:
    """One booklet page: a 1-based index and its tickets in grid order."""
    index: int
    tickets: List[Ticket] = field(default_factory=list)

    @property
    def numbers(self) -> List[str]:
        """Formatted numbers of the tickets on this page."""
        return [ticket.text for ticket in self.tickets]

    def __repr__(self):
        return f"Page(index={self.index}, tickets={len(self.tickets)})"


@dataclass(frozen=True)
class CanvasGeometry:
    """
    Grid geometry for one page.

    Derived from the canvas size, the margins and the ticket count; never
    stored between pages.
    """
    canvas_width: int
    canvas_height: int
    margins: Margins
    cells_per_row: int
    row_count: int
    cell_width: int
    cell_height: int

    @property
    def printable_width(self) -> int:
        return self.canvas_width - self.margins.left - self.margins.right

    @property
    def printable_height(self) -> int:
        return self.canvas_height - self.margins.top - self.margins.bottom

    def cell_origin(self, index: int) -> Tuple[int, int]:
        """
        Get the top-left pixel of the cell holding ticket `index` (0-based).

        Example:
            >>> geometry = CanvasGeometry(1080, 1920, Margins(610, 440, 50, 50), 1, 10, 980, 87)
            >>> geometry.cell_origin(2)
            (50, 784)
        """
        row = index // self.cells_per_row
        col = index % self.cells_per_row
        return (
            col * self.cell_width + self.margins.left,
            row * self.cell_height + self.margins.top,
        )


@dataclass
class BookletConfig:
    """
    Configuration for a booklet run.

    Holds everything needed to allocate numbers, lay out the grid and write
    the pages. Values are checked by ConfigValidator, not here, so that all
    problems can be reported together.
    """
    background_path: str = ""
    tickets_per_row: int = DEFAULT_TICKETS_PER_ROW
    min_number: int = DEFAULT_MIN_NUMBER
    max_number: int = DEFAULT_MAX_NUMBER
    tickets_per_page: int = DEFAULT_TICKETS_PER_PAGE
    page_count: int = DEFAULT_PAGE_COUNT
    output_folder: str = DEFAULT_OUTPUT_FOLDER
    canvas_width: int = DEFAULT_CANVAS_WIDTH
    canvas_height: int = DEFAULT_CANVAS_HEIGHT
    margin_top: int = DEFAULT_MARGIN_TOP
    margin_bottom: int = DEFAULT_MARGIN_BOTTOM
    margin_left: int = DEFAULT_MARGIN_LEFT
    margin_right: int = DEFAULT_MARGIN_RIGHT
    text_color: RGBA = DEFAULT_TEXT_COLOR
    border_color: RGBA = DEFAULT_BORDER_COLOR
    font_path: str = DEFAULT_FONT_PATH
    font_size: float = DEFAULT_FONT_SIZE
    line_thickness: int = DEFAULT_LINE_THICKNESS
    alignment: Alignment = Alignment.LEFT
    seed: Optional[int] = None

    @property
    def number_range(self) -> NumberRange:
        return NumberRange(self.min_number, self.max_number)

    @property
    def margins(self) -> Margins:
        return Margins(
            top=self.margin_top,
            bottom=self.margin_bottom,
            left=self.margin_left,
            right=self.margin_right,
        )

    @property
    def style(self) -> Style:
        return Style(
            text_color=self.text_color,
            border_color=self.border_color,
            line_thickness=self.line_thickness,
            alignment=self.alignment,
        )

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return (self.canvas_width, self.canvas_height)

    @property
    def total_tickets(self) -> int:
        """Numbers consumed by the whole run."""
        return self.tickets_per_page * self.page_count

    @property
    def available_numbers(self) -> int:
        return self.max_number - self.min_number + 1


@dataclass
class ValidationResult:
    """
    Result of validation checks.

    Contains validation status, errors, and warnings that can be
    displayed to the user.
    """
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error message and mark as invalid."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_issues(self) -> bool:
        """Check if there are any errors or warnings."""
        return len(self.errors) > 0 or len(self.warnings) > 0

    def get_summary(self) -> str:
        """Get a human-readable summary of validation results."""
        if self.is_valid and not self.warnings:
            return "Validation passed with no issues"

        parts = []
        if self.errors:
            parts.append(f"{len(self.errors)} error(s)")
        if self.warnings:
            parts.append(f"{len(self.warnings)} warning(s)")

        return ", ".join(parts)

    def __repr__(self):
        return f"ValidationResult(is_valid={self.is_valid}, {self.get_summary()})"
