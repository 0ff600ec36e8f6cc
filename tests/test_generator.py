"""
Tests for the booklet generation orchestrator.
"""

import dataclasses
import random
from pathlib import Path

import pytest
from PIL import Image

from raffle_booklet.allocator import NumberAllocator
from raffle_booklet.exceptions import ConfigurationError, OutputError, ResourceError
from raffle_booklet.formatter import TicketFormatter
from raffle_booklet.generator import BookletGenerator
from raffle_booklet.layout import LayoutEngine
from raffle_booklet.models import Margins, NumberRange, Style


def make_generator(face, number_range, tickets_per_page, writer):
    engine = LayoutEngine(Style(), face, (60, 80), Margins(10, 10, 5, 5), 1, len(str(number_range.max)))
    allocator = NumberAllocator(number_range, number_range.size, rng=random.Random(5))
    return BookletGenerator(tickets_per_page, allocator, TicketFormatter(number_range.max), engine, writer)


class TestBookletGeneratorFromConfig:
    """End-to-end tests through BookletGenerator.from_config."""

    def test_writes_one_png_per_page(self, small_config):
        """Test 3 pages x 2 tickets produce 3 files and 6 distinct numbers."""
        generator = BookletGenerator.from_config(small_config)

        generated = generator.generate_all(small_config.page_count)

        assert [g.page.index for g in generated] == [1, 2, 3]
        assert [g.path.name for g in generated] == [
            "talonario_001.png", "talonario_002.png", "talonario_003.png"
        ]
        numbers = [n for g in generated for n in g.page.numbers]
        assert len(numbers) == 6
        assert len(set(numbers)) == 6
        assert all(len(n) == 2 for n in numbers)

    def test_written_files_are_canvas_sized_pngs(self, small_config):
        """Test each output decodes as a PNG of the configured size."""
        generator = BookletGenerator.from_config(small_config)

        generated = generator.generate_all(small_config.page_count)

        for g in generated:
            with Image.open(g.path) as img:
                assert img.format == 'PNG'
                assert img.size == (120, 200)

    def test_with_background(self, small_config, background_file):
        """Test a configured background shows in the page margins."""
        config = dataclasses.replace(small_config, background_path=str(background_file), page_count=1)

        generated = BookletGenerator.from_config(config).generate_all(1)

        with Image.open(generated[0].path) as img:
            assert img.convert('RGBA').getpixel((2, 2)) == (0, 200, 0, 255)

    def test_same_seed_same_numbers(self, small_config, tmp_path):
        """Test a fixed seed reproduces the draw."""
        first = BookletGenerator.from_config(small_config).generate_all(3)
        again = dataclasses.replace(small_config, output_folder=str(tmp_path / "again"))
        second = BookletGenerator.from_config(again).generate_all(3)

        assert [g.page.numbers for g in first] == [g.page.numbers for g in second]

    def test_oversubscribed_range_fails_before_output(self, small_config):
        """Test too many tickets abort before the output folder is created."""
        config = dataclasses.replace(small_config, max_number=4)

        with pytest.raises(ConfigurationError, match="Not enough numbers"):
            BookletGenerator.from_config(config)

        assert not Path(config.output_folder).exists()

    def test_missing_background_is_fatal(self, small_config, tmp_path):
        """Test a missing background image aborts the run."""
        config = dataclasses.replace(small_config, background_path=str(tmp_path / "nope.png"))

        with pytest.raises(ResourceError, match="nope.png"):
            BookletGenerator.from_config(config)

    def test_missing_font_falls_back(self, small_config, tmp_path, caplog):
        """Test a missing font degrades to the built-in face and still renders."""
        config = dataclasses.replace(small_config, font_path=str(tmp_path / "missing.ttf"), page_count=1)

        generated = BookletGenerator.from_config(config).generate_all(1)

        assert generated[0].path.exists()
        assert "missing.ttf" in caplog.text


class TestBookletGenerator:
    """Tests for BookletGenerator with injected collaborators."""

    def test_numbers_unique_across_pages(self, recording_face):
        """Test pages share one allocator, so the whole range is used exactly once."""
        canvases = []
        generator = make_generator(recording_face, NumberRange(0, 5), 2,
                                   lambda canvas, index: canvases.append(index))

        generated = generator.generate_all(3)

        values = sorted(t.value for g in generated for t in g.page.tickets)
        assert values == [0, 1, 2, 3, 4, 5]
        assert canvases == [1, 2, 3]

    def test_writer_receives_canvas(self, recording_face):
        """Test the writer gets the rendered canvas and page index."""
        received = []
        generator = make_generator(recording_face, NumberRange(0, 99), 3,
                                   lambda canvas, index: received.append((canvas.size, index)))

        generator.generate_all(2)

        assert received == [((60, 80), 1), ((60, 80), 2)]

    def test_reports_numbers(self, recording_face, caplog):
        """Test the formatted numbers of every page are logged."""
        generator = make_generator(recording_face, NumberRange(0, 99), 2, lambda c, i: None)

        with caplog.at_level('INFO', logger='raffle_booklet'):
            generated = generator.generate_all(1)

        assert ", ".join(generated[0].page.numbers) in caplog.text

    def test_write_failure_stops_run(self, recording_face):
        """Test an OutputError aborts the remaining pages."""
        calls = []

        def failing_writer(canvas, index):
            calls.append(index)
            raise OutputError(f"disk full on page {index}")

        generator = make_generator(recording_face, NumberRange(0, 99), 2, failing_writer)

        with pytest.raises(OutputError, match="page 1"):
            generator.generate_all(5)

        assert calls == [1]

    def test_page_count_beyond_remaining_fails_fast(self, recording_face):
        """Test asking for more pages than numbers left fails before drawing any."""
        generator = make_generator(recording_face, NumberRange(0, 5), 2, lambda c, i: None)

        with pytest.raises(ConfigurationError, match="8 needed"):
            generator.generate_all(4)

        assert generator.allocator.remaining == 6

    def test_create_page(self, recording_face):
        """Test a page holds tickets_per_page formatted tickets."""
        generator = make_generator(recording_face, NumberRange(0, 999), 4, lambda c, i: None)

        page = generator.create_page(7)

        assert page.index == 7
        assert len(page.tickets) == 4
        assert all(t.text == f"{t.value:03d}" for t in page.tickets)
