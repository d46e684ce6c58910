# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for selection_tracer module."""

import os
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from selection_tracer import clip_to_grid, is_straight_line, trace_line


class TestTraceLine(unittest.TestCase):
    """Tests for trace_line."""

    def test_horizontal(self):
        """Test a horizontal drag covers every cell."""
        self.assertEqual(
            trace_line((0, 0), (0, 5)),
            [(0, 0), (0, 1), (0, 2), (0, 3), (0, 4), (0, 5)]
        )

    def test_diagonal(self):
        """Test a diagonal drag yields the diagonal cells."""
        self.assertEqual(
            trace_line((0, 0), (3, 3)),
            [(0, 0), (1, 1), (2, 2), (3, 3)]
        )

    def test_non_straight_collapses_to_start(self):
        """Test a knight-ish drag keeps only the start cell."""
        self.assertEqual(trace_line((0, 0), (2, 5)), [(0, 0)])

    def test_same_cell(self):
        """Test dragging onto the start cell."""
        self.assertEqual(trace_line((4, 4), (4, 4)), [(4, 4)])

    def test_reverse_directions(self):
        """Test up, left and anti-diagonal drags run from start to end."""
        self.assertEqual(trace_line((5, 2), (2, 2)),
                         [(5, 2), (4, 2), (3, 2), (2, 2)])
        self.assertEqual(trace_line((1, 3), (1, 0)),
                         [(1, 3), (1, 2), (1, 1), (1, 0)])
        self.assertEqual(trace_line((0, 4), (3, 1)),
                         [(0, 4), (1, 3), (2, 2), (3, 1)])
        self.assertEqual(trace_line((3, 3), (0, 0)),
                         [(3, 3), (2, 2), (1, 1), (0, 0)])

    def test_cell_count_and_no_gaps(self):
        """Test steps+1 cells, each one step from the previous."""
        for end in [(7, 0), (0, 7), (7, 7), (-7, 7), (7, -7), (-7, 0)]:
            cells = trace_line((0, 0), end)
            self.assertEqual(len(cells), 8)
            self.assertEqual(len(set(cells)), 8)
            self.assertEqual(cells[0], (0, 0))
            self.assertEqual(cells[-1], end)
            for (r1, c1), (r2, c2) in zip(cells, cells[1:]):
                self.assertLessEqual(abs(r2 - r1), 1)
                self.assertLessEqual(abs(c2 - c1), 1)

    def test_no_bounds_check(self):
        """Test coordinates off the grid are passed through."""
        self.assertEqual(trace_line((0, 1), (0, -1)),
                         [(0, 1), (0, 0), (0, -1)])

    def test_is_straight_line(self):
        """Test straight line detection."""
        self.assertTrue(is_straight_line((2, 2), (2, 9)))
        self.assertTrue(is_straight_line((2, 2), (6, 2)))
        self.assertTrue(is_straight_line((2, 2), (0, 4)))
        self.assertFalse(is_straight_line((2, 2), (3, 4)))


class TestClipToGrid(unittest.TestCase):
    """Tests for clip_to_grid."""

    def test_drops_out_of_bounds(self):
        """Test cells outside the grid are removed in order."""
        cells = [(-1, 0), (0, 0), (0, 1), (0, 12), (12, 3)]
        self.assertEqual(clip_to_grid(cells, 12), [(0, 0), (0, 1)])

    def test_keeps_in_bounds(self):
        """Test a fully inside selection is unchanged."""
        cells = trace_line((11, 0), (0, 11))
        self.assertEqual(clip_to_grid(cells, 12), cells)


if __name__ == '__main__':
    unittest.main()
