# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Match verification.

A selection matches a placed word when its letters spell the word in either
direction AND it covers exactly the word's cells. The second check stops the
same letters elsewhere in the grid from counting.
"""

from typing import List, Optional, Sequence

from models import Coord, Grid, PlacementRecord


MIN_MATCH_LENGTH = 2


def check_match(
    selection: Sequence[Coord],
    grid: Grid,
    placements: List[PlacementRecord],
) -> Optional[str]:
    """
    Find the placed word a finished selection corresponds to.

    Args:
        selection: Ordered (row, col) cells, all inside the grid
        grid: The puzzle grid
        placements: Placement records from generation

    Returns:
        The word as originally given (spaces kept), or None
    """
    if len(selection) < MIN_MATCH_LENGTH:
        return None

    letters = grid.letters_at(list(selection))
    reversed_letters = letters[::-1]
    selected = frozenset(selection)

    for placement in placements:
        target = placement.normalized
        if letters != target and reversed_letters != target:
            continue
        if selected == placement.cell_set():
            return placement.word

    return None
