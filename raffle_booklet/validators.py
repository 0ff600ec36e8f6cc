"""
Configuration validators for booklet generation.

This module checks a BookletConfig once, before any number is drawn or any
page is rendered. Problems are collected into a ValidationResult so the
user sees every error at once instead of fixing them one run at a time.
"""

import logging

from .config import DENSE_RANGE_WARNING_RATIO
from .exceptions import ConfigurationError
from .models import Alignment, BookletConfig, ValidationResult

logger = logging.getLogger(__name__)


class ConfigValidator:
    """Validates booklet configuration before a run starts."""

    @staticmethod
    def validate(config: BookletConfig) -> ValidationResult:
        """
        Validate a booklet configuration.

        Args:
            config: The configuration to check

        Returns:
            ValidationResult with any errors or warnings

        Example:
            >>> result = ConfigValidator.validate(BookletConfig(page_count=1001))
            >>> result.is_valid
            False
        """
        result = ValidationResult(is_valid=True)

        if config.min_number > config.max_number:
            result.add_error(
                f"Minimum number ({config.min_number}) must not exceed maximum number ({config.max_number})"
            )

        if config.tickets_per_page <= 0 or config.page_count <= 0:
            result.add_error("Tickets per page and page count must be greater than 0")
        elif config.total_tickets > config.available_numbers:
            result.add_error(
                f"Not enough numbers: {config.total_tickets} needed "
                f"({config.tickets_per_page} tickets x {config.page_count} pages) "
                f"but only {max(config.available_numbers, 0)} available "
                f"in {config.min_number}-{config.max_number}"
            )
        elif config.total_tickets > config.available_numbers * DENSE_RANGE_WARNING_RATIO:
            result.add_warning(
                f"Run uses {config.total_tickets} of {config.available_numbers} available numbers; "
                "drawing the last ones may be slow"
            )

        if config.tickets_per_row <= 0:
            result.add_error("Tickets per row must be greater than 0")

        if config.margins.has_negative():
            result.add_error("Margins must be positive or zero")

        if config.canvas_width <= 0 or config.canvas_height <= 0:
            result.add_error(
                f"Canvas size must be positive, got {config.canvas_width}x{config.canvas_height}"
            )

        if config.line_thickness < 0:
            result.add_error(f"Line thickness must not be negative, got {config.line_thickness}")

        if config.font_size <= 0:
            result.add_error(f"Font size must be greater than 0, got {config.font_size}")

        if result.is_valid:
            ConfigValidator._check_grid(config, result)

        return result

    @staticmethod
    def _check_grid(config: BookletConfig, result: ValidationResult):
        """Check that the grid fits the printable area (assumes counts are already valid)."""
        margins = config.margins
        printable_width = config.canvas_width - margins.left - margins.right
        printable_height = config.canvas_height - margins.top - margins.bottom

        if printable_width <= 0 or printable_height <= 0:
            result.add_error(
                f"Margins leave no printable area on a {config.canvas_width}x{config.canvas_height} canvas"
            )
            return

        rows = -(-config.tickets_per_page // config.tickets_per_row)
        if printable_width // config.tickets_per_row < 1 or printable_height // rows < 1:
            result.add_error(
                f"Grid of {config.tickets_per_row} column(s) x {rows} row(s) does not fit "
                f"the {printable_width}x{printable_height} printable area"
            )

        if config.tickets_per_row > config.tickets_per_page:
            result.add_warning(
                f"Tickets per row ({config.tickets_per_row}) exceeds tickets per page "
                f"({config.tickets_per_page}); some columns will stay empty"
            )

        if config.alignment == Alignment.RIGHT and config.tickets_per_row > 1:
            result.add_warning(
                "Right alignment measures from cell width / tickets per row; "
                "numbers will not sit against the right border with more than one ticket per row"
            )


def ensure_valid(config: BookletConfig) -> ValidationResult:
    """
    Validate a configuration and raise if it cannot be used.

    Warnings are logged and returned; errors abort with a single
    ConfigurationError listing all of them.

    Raises:
        ConfigurationError: If any validation error was found
    """
    result = ConfigValidator.validate(config)

    if not result.has_issues():
        logger.debug("Configuration check: %s", result.get_summary())
        return result

    for warning in result.warnings:
        logger.warning("Warning: %s", warning)

    if not result.is_valid:
        raise ConfigurationError("; ".join(result.errors))

    return result
