# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Selection tracing for drag gestures.

A drag only ever selects a straight line: horizontal, vertical or a true
45-degree diagonal. Anything else collapses to the start cell.
"""

from typing import List

from models import Coord


def is_straight_line(start: Coord, end: Coord) -> bool:
    """Check if start->end is axis-aligned or an exact diagonal."""
    d_row = end[0] - start[0]
    d_col = end[1] - start[1]
    return d_row == 0 or d_col == 0 or abs(d_row) == abs(d_col)


def trace_line(start: Coord, end: Coord) -> List[Coord]:
    """
    Get the cells on the line from start to end, both included.

    Args:
        start: (row, col) where the drag began
        end: (row, col) currently under the pointer

    Returns:
        Ordered cells from start to end, or [start] for a non-straight drag.
        Coordinates are not bounds-checked.
    """
    start_row, start_col = start
    d_row = end[0] - start_row
    d_col = end[1] - start_col

    if not is_straight_line(start, end):
        return [(start_row, start_col)]

    steps = max(abs(d_row), abs(d_col))
    if steps == 0:
        return [(start_row, start_col)]

    # Exact for straight lines, so no rounding needed
    return [
        (start_row + (d_row * i) // steps, start_col + (d_col * i) // steps)
        for i in range(steps + 1)
    ]


def clip_to_grid(cells: List[Coord], size: int) -> List[Coord]:
    """Drop cells outside a size x size grid, keeping order."""
    return [
        (row, col) for row, col in cells
        if 0 <= row < size and 0 <= col < size
    ]
