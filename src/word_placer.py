# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word Placer

Builds a word hunt grid:
- Each word is tried along one of 8 directions from a random origin
- A conflicting attempt is retried, up to a fixed budget
- Words may cross where they share a letter
- Words that never fit are skipped with a warning
- Leftover cells get random filler letters
"""

import logging
import os
import random
import string
import sys
from typing import List, Optional, Sequence, Tuple

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import Coord, Direction, Grid, PlacementRecord, normalize_word


DEFAULT_RETRY_BUDGET = 100

DIRECTIONS = list(Direction)


class WordPlacer:
    """Places target words into a fresh grid."""

    def __init__(
        self,
        size: int = 12,
        retry_budget: int = DEFAULT_RETRY_BUDGET,
        rng: Optional[random.Random] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize placer.

        Args:
            size: Grid dimension (grid is size x size)
            retry_budget: Attempts per word before giving up on it
            rng: Random source (a fresh random.Random if None)
            logger: Logger to report placement results on
        """
        self.size = size
        self.retry_budget = retry_budget
        self.rng = rng or random.Random()
        self.logger = logger or logging.getLogger(__name__)
        self.unplaced: List[str] = []

    def generate(self, words: Sequence[str]) -> Tuple[Grid, List[PlacementRecord]]:
        """
        Place every word in input order, then fill the gaps.

        Args:
            words: Target words, display form (may contain spaces)

        Returns:
            (grid, placements) - one record per word that was placed
        """
        grid = Grid(size=self.size)
        placements: List[PlacementRecord] = []
        self.unplaced = []

        for word in words:
            placement = self.try_place_word(word, grid, placements)
            if placement is None:
                self.logger.warning(f"Could not place word: {word}")
                self.unplaced.append(word)
                continue
            placements.append(placement)

        filled = self.fill_empty_cells(grid)
        self.logger.info(
            f"Placed {len(placements)}/{len(words)} words in "
            f"{self.size}x{self.size} grid ({filled} filler letters)"
        )
        return grid, placements

    def try_place_word(
        self,
        word: str,
        grid: Grid,
        placements: Sequence[PlacementRecord] = (),
    ) -> Optional[PlacementRecord]:
        """
        Try to place a single word, committing its letters on success.

        A fit covering exactly the cells of an earlier placement is rejected,
        since a selection of those cells could only ever match the earlier word.
        """
        taken = {placement.cell_set() for placement in placements}
        clean_word = normalize_word(word)
        if not clean_word:
            return None

        for attempt in range(self.retry_budget):
            direction = self.rng.choice(DIRECTIONS)
            start_row = self.rng.randrange(self.size)
            start_col = self.rng.randrange(self.size)

            cells = self._fit(clean_word, grid, start_row, start_col, direction)
            if cells is None or frozenset(cells) in taken:
                continue

            for (row, col), letter in zip(cells, clean_word):
                grid.set_letter(row, col, letter)

            self.logger.debug(
                f"Placed {clean_word} at ({start_row}, {start_col}) "
                f"{direction.label} after {attempt + 1} attempt(s)"
            )
            return PlacementRecord(
                word=word, cells=tuple(cells), direction=direction
            )

        return None

    def _fit(
        self,
        clean_word: str,
        grid: Grid,
        start_row: int,
        start_col: int,
        direction: Direction,
    ) -> Optional[List[Coord]]:
        """
        Cells the word would occupy, or None if it runs off the grid or
        clashes with a different letter already there.
        """
        cells = []
        for i, letter in enumerate(clean_word):
            row = start_row + i * direction.dr
            col = start_col + i * direction.dc
            if not grid.is_valid_position(row, col):
                return None

            existing = grid.get_letter(row, col)
            if existing and existing != letter:
                return None
            cells.append((row, col))
        return cells

    def fill_empty_cells(self, grid: Grid) -> int:
        """Fill empty cells with random letters. Returns how many were filled."""
        empty = grid.empty_cells()
        for cell in empty:
            cell.letter = self.rng.choice(string.ascii_uppercase)
        return len(empty)


def generate(
    words: Sequence[str],
    size: int = 12,
    retry_budget: int = DEFAULT_RETRY_BUDGET,
    rng: Optional[random.Random] = None,
) -> Tuple[Grid, List[PlacementRecord]]:
    """Generate a grid and placement records for the given words."""
    return WordPlacer(size=size, retry_budget=retry_budget, rng=rng).generate(words)
