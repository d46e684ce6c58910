# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Functional tests for the word hunt shell, rendering and logging."""

import io
import logging
import os
import shutil
import sys
import tempfile
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from config import PuzzleConfig
from logging_config import setup_logging
from models import CellOutOfBoundsError, Grid
from svg_renderer import SVGRenderer
from word_hunt import FINAL_MESSAGE, WIN_MESSAGE, WordHuntApp


def move_for(placement, reverse=False):
    (r1, c1), (r2, c2) = placement.cells[0], placement.cells[-1]
    if reverse:
        (r1, c1), (r2, c2) = (r2, c2), (r1, c1)
    return f"{r1} {c1} {r2} {c2}\n"


class TestWordHuntApp(unittest.TestCase):
    """Tests for WordHuntApp driven through in-memory streams."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        self.sleeps = []

    def tearDown(self):
        shutil.rmtree(self.temp_dir)

    def make_app(self, lines="", **overrides):
        config = PuzzleConfig(
            words=["cat", "dog"],
            seed=21,
            output={'directory': self.temp_dir},
            **overrides
        )
        stdout = io.StringIO()
        app = WordHuntApp(config, stdin=io.StringIO(lines), stdout=stdout,
                          sleep=self.sleeps.append)
        return app, stdout

    def test_full_game(self):
        """Test finding every word wins and runs the countdown."""
        app, stdout = self.make_app()
        first, second = app.session.placements
        app.stdin = io.StringIO(
            move_for(first) + move_for(first, reverse=True)
            + "not a move\n" + move_for(second, reverse=True)
        )

        self.assertEqual(app.run(), 0)

        output = stdout.getvalue()
        self.assertIn("Words left: 2", output)
        self.assertIn(f"Found: {first.word}", output)
        self.assertIn("Words left: 1", output)
        self.assertIn(f"Already found: {first.word}", output)
        self.assertIn("Invalid move 'not a move'", output)
        self.assertIn(WIN_MESSAGE, output)
        self.assertIn(FINAL_MESSAGE, output)
        self.assertTrue(app.session.is_won)
        # win delay plus five countdown ticks
        self.assertEqual(self.sleeps, [0.5] + [1.0] * 5)

    def test_miss_and_quit(self):
        """Test a non-matching move then quitting."""
        app, stdout = self.make_app()
        app.stdin = io.StringIO("0 0 2 5\nquit\n")

        self.assertEqual(app.run(), 0)
        self.assertIn("No word there.", stdout.getvalue())
        self.assertFalse(app.session.is_won)

    def test_move_off_grid(self):
        """Test a drag ending off the grid is released safely."""
        app, _ = self.make_app()

        self.assertIsNone(app.play_move("0 0 0 20"))
        self.assertFalse(app.session.is_selecting)

    def test_restart_command(self):
        """Test restart swaps in a new grid."""
        app, _ = self.make_app()
        old_grid = app.session.grid
        app.stdin = io.StringIO("restart\n")

        app.run()

        self.assertIsNot(app.session.grid, old_grid)

    def test_nothing_placed_finishes_at_once(self):
        """Test an empty puzzle goes straight to the win screen."""
        with self.assertLogs('word_placer', level='WARNING'):
            app, stdout = self.make_app(retry_budget=0)
        app.stdin = io.StringIO("0 0 0 1\n")

        self.assertEqual(app.run(), 0)

        output = stdout.getvalue()
        self.assertIn("Words left: 0", output)
        self.assertIn(WIN_MESSAGE, output)
        self.assertIn(FINAL_MESSAGE, output)
        self.assertNotIn("No word there.", output)
        self.assertEqual(self.sleeps, [0.5] + [1.0] * 5)

    def test_svg_export(self):
        """Test the grid is written when an SVG file is configured."""
        app, _ = self.make_app()
        app.config.output.svg_file = "grid.svg"

        path = app.export_svg()

        self.assertTrue(os.path.exists(path))
        with open(path, encoding='utf-8') as f:
            self.assertIn("<svg", f.read())


class TestSVGRenderer(unittest.TestCase):
    """Tests for SVGRenderer."""

    def test_cell_states_rendered(self):
        """Test each cell carries its render state as a class."""
        grid = Grid(size=2)
        for cell in grid.iter_cells():
            cell.letter = "A"
        grid.select([(0, 0), (0, 1)])
        grid.mark_found([(0, 1)])

        svg = SVGRenderer().render(grid, title="Test & Grid")

        self.assertIn('class="cell selected" data-row="0" data-col="0"', svg)
        self.assertIn('class="cell found" data-row="0" data-col="1"', svg)
        self.assertEqual(svg.count('class="cell default"'), 2)
        self.assertIn("<title>Test &amp; Grid</title>", svg)


class TestGridModel(unittest.TestCase):
    """Tests for Grid bounds handling and text rendering."""

    def test_out_of_bounds_raises(self):
        """Test bad coordinates raise an IndexError subclass."""
        grid = Grid(size=3)

        with self.assertRaises(CellOutOfBoundsError):
            grid.get_cell(3, 0)
        with self.assertRaises(IndexError):
            grid.get_cell(0, -1)

    def test_to_string_lowercases_found(self):
        """Test found cells are shown in lowercase."""
        grid = Grid(size=2)
        for cell in grid.iter_cells():
            cell.letter = "B"
        grid.mark_found([(1, 1)])

        self.assertEqual(grid.to_string(), "B B\nB b")
        self.assertEqual(grid.to_string(highlight=False), "B B\nB B")


class TestLoggingSetup(unittest.TestCase):
    """Tests for logging_config.setup_logging."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        root = logging.getLogger()
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        shutil.rmtree(self.temp_dir)

    def test_log_file_and_console(self):
        """Test the log file is created and console goes to the given stream."""
        stream = io.StringIO()

        path = setup_logging(self.temp_dir, log_level="WARNING",
                             enable_console=True, console_stream=stream)
        logging.getLogger("word_placer").warning("Could not place word: cat")
        logging.getLogger("word_placer").info("quiet on console")

        self.assertTrue(os.path.basename(path).startswith("word_hunt_"))
        self.assertTrue(os.path.exists(path))
        self.assertIn("Could not place word: cat", stream.getvalue())
        self.assertNotIn("quiet on console", stream.getvalue())


if __name__ == '__main__':
    unittest.main()
