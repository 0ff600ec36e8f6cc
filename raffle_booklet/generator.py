"""
Booklet generation orchestrator.

BookletGenerator ties the number allocator, the formatter and the layout
engine together: for each page it draws fresh numbers, renders the grid and
hands the canvas to a writer. Pages are produced strictly in order because
the allocator's used-number set is shared by the whole run.
"""

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from PIL import Image

from .allocator import NumberAllocator
from .exceptions import ConfigurationError
from .formatter import TicketFormatter
from .layout import LayoutEngine
from .models import BookletConfig, Page
from .services.output_service import OutputService
from .services.resource_service import ResourceService
from .validators import ensure_valid

logger = logging.getLogger(__name__)

PageWriter = Callable[[Image.Image, int], Optional[Path]]


@dataclass
class GeneratedPage:
    """A rendered page and where its writer put it."""
    page: Page
    path: Optional[Path]


class BookletGenerator:
    """
    Generates booklet pages of uniquely numbered tickets.

    All collaborators are passed in; use `from_config` to build the usual
    set (validated config, loaded resources, PNG writer) in one step.
    """

    def __init__(
        self,
        tickets_per_page: int,
        allocator: NumberAllocator,
        formatter: TicketFormatter,
        engine: LayoutEngine,
        writer: PageWriter
    ):
        self.tickets_per_page = tickets_per_page
        self.allocator = allocator
        self.formatter = formatter
        self.engine = engine
        self.writer = writer

    @classmethod
    def from_config(
        cls,
        config: BookletConfig,
        resources: Optional[ResourceService] = None,
        output: Optional[OutputService] = None
    ) -> 'BookletGenerator':
        """
        Build a generator from a configuration.

        Validates the configuration, loads the font and background, and
        creates the output folder, in that order.

        Raises:
            ConfigurationError: If the configuration is invalid
            ResourceError: If the background image cannot be loaded
            OutputError: If the output folder cannot be created
        """
        ensure_valid(config)

        allocator = NumberAllocator(
            config.number_range,
            config.total_tickets,
            rng=random.Random(config.seed)
        )
        formatter = TicketFormatter(config.max_number)

        resources = resources or ResourceService()
        face = resources.load_font(config.font_path, config.font_size)
        background = resources.load_background(config.background_path)

        output = output or OutputService(config.output_folder)
        output.ensure_folder()

        engine = LayoutEngine(
            style=config.style,
            face=face,
            canvas_size=config.canvas_size,
            margins=config.margins,
            tickets_per_row=config.tickets_per_row,
            digit_width=formatter.digit_width,
            background=background
        )

        return cls(config.tickets_per_page, allocator, formatter, engine, output.write_page)

    def create_page(self, index: int) -> Page:
        """Draw `tickets_per_page` new numbers and build page `index`."""
        tickets = [
            self.formatter.ticket(number)
            for number in self.allocator.allocate_many(self.tickets_per_page)
        ]
        return Page(index=index, tickets=tickets)

    def generate_all(self, page_count: int) -> List[GeneratedPage]:
        """
        Generate, render and write `page_count` pages.

        Args:
            page_count: Number of pages to produce

        Returns:
            GeneratedPage for every page, in page order

        Raises:
            ConfigurationError: If the allocator cannot supply enough numbers
            OutputError: If a page cannot be written (remaining pages are skipped)
        """
        needed = page_count * self.tickets_per_page
        if needed > self.allocator.remaining:
            raise ConfigurationError(
                f"Not enough numbers: {needed} needed for {page_count} pages "
                f"but only {self.allocator.remaining} left"
            )

        logger.info(
            "Generating %d booklets with %d tickets each...",
            page_count, self.tickets_per_page
        )

        generated = []
        for index in range(1, page_count + 1):
            logger.info("Generating booklet %d/%d...", index, page_count)

            page = self.create_page(index)
            canvas = self.engine.layout_page(page)
            path = self.writer(canvas, index)

            logger.info("  Numbers: %s", ", ".join(page.numbers))
            generated.append(GeneratedPage(page=page, path=path))

        return generated
