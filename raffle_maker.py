#!/usr/bin/env python3
"""
Raffle Ticket Booklet Maker

Generates print-ready PNG sheets of uniquely numbered raffle tickets.
Supports a background image, custom TrueType fonts, configurable grid and
margins, and left/center/right number placement.
"""

import argparse
import dataclasses
import logging
import sys
from pathlib import Path
from typing import List, Optional

from raffle_booklet.exceptions import BookletError
from raffle_booklet.generator import BookletGenerator
from raffle_booklet.models import Alignment, BookletConfig
from raffle_booklet.services import ConfigService

logger = logging.getLogger("raffle_maker")

# argparse destination -> BookletConfig field
OVERRIDES = {
    'pages': 'page_count',
    'tickets_per_page': 'tickets_per_page',
    'tickets_per_row': 'tickets_per_row',
    'min': 'min_number',
    'max': 'max_number',
    'output': 'output_folder',
    'background': 'background_path',
    'font': 'font_path',
    'font_size': 'font_size',
    'alignment': 'alignment',
    'seed': 'seed',
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate PNG sheets of uniquely numbered raffle tickets.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                        # Use config.json or built-in defaults
  %(prog)s --config rifa.json
  %(prog)s --pages 50 --tickets-per-page 10 --max 999
  %(prog)s --background Base.png --font calibri-bold.ttf --font-size 38
  %(prog)s --tickets-per-row 2 --alignment center
  %(prog)s --pages 20 --save-config rifa.json       # Store the effective settings
        """
    )

    parser.add_argument('--config', type=Path, help='JSON configuration file (default: config.json)')
    parser.add_argument('--pages', type=int, help='Number of booklet pages to generate')
    parser.add_argument('--tickets-per-page', type=int, help='Tickets on each page')
    parser.add_argument('--tickets-per-row', type=int, help='Tickets on each grid row')
    parser.add_argument('--min', type=int, help='Smallest ticket number')
    parser.add_argument('--max', type=int, help='Largest ticket number')
    parser.add_argument('--output', help='Output folder for the PNG pages')
    parser.add_argument('--background', help='Background image stretched over each page')
    parser.add_argument('--font', help='TrueType font file for the numbers')
    parser.add_argument('--font-size', type=float, help='Font size in pixels')
    parser.add_argument('--alignment', type=Alignment.parse,
                        help='Number placement: left, center or right')
    parser.add_argument('--seed', type=int, help='Random seed for a reproducible draw')
    parser.add_argument('--save-config', type=Path, metavar='PATH',
                        help='Write the effective configuration to PATH')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show debug output')

    return parser


def build_config(args: argparse.Namespace) -> BookletConfig:
    """Load the configuration file and apply command-line overrides."""
    config = ConfigService(args.config, required=args.config is not None).load()

    overrides = {
        field: getattr(args, dest)
        for dest, field in OVERRIDES.items()
        if getattr(args, dest) is not None
    }
    return dataclasses.replace(config, **overrides)


def print_banner(config: BookletConfig):
    digits = len(str(config.max_number))
    print("Raffle Ticket Booklet Generator")
    print("===============================")
    print(f"Number range: {config.min_number:0{digits}d} - {config.max_number:0{digits}d}")
    print(f"Tickets per booklet: {config.tickets_per_page}")
    print(f"Number of booklets: {config.page_count}")
    print(f"Total numbers to use: {config.total_tickets}\n")


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s"
    )

    try:
        config = build_config(args)

        print_banner(config)

        generator = BookletGenerator.from_config(config)

        if args.save_config:
            ConfigService(args.save_config).save(config)
            logger.info("Configuration saved to %s", args.save_config)

        generated = generator.generate_all(config.page_count)

        print(f"\nAll {len(generated)} booklets generated in: {config.output_folder}")
    except BookletError as e:
        print(f"\nError: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
