# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Game session for the word hunt.

Owns the grid, the placement records and the progress counters, and turns
drag events into selections and matches. One session object lives for the
whole game; restart() swaps in a freshly generated grid.
"""

import logging
import random
import time
from enum import Enum
from typing import Callable, Iterator, List, Optional, Sequence, Set

from models import Coord, Grid, PlacementRecord
from word_placer import DEFAULT_RETRY_BUDGET, WordPlacer
from selection_tracer import clip_to_grid, trace_line
from match_verifier import check_match


DEFAULT_WORDS = [
    "meow", "unreal", "perchance", "baby", "I love you", "strawberries", "waffles"
]
DEFAULT_GRID_SIZE = 12


class GameState(Enum):
    PLAYING = "playing"
    WON = "won"


class Countdown:
    """
    Decrementing countdown shown after a win.

    Yields ticks-1 down to 0, sleeping one interval before each value.
    """

    def __init__(
        self,
        ticks: int = 5,
        interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.ticks = ticks
        self.interval = interval
        self.sleep = sleep

    def __iter__(self) -> Iterator[int]:
        count = self.ticks
        while count > 0:
            self.sleep(self.interval)
            count -= 1
            yield count

    def run(self, on_tick: Callable[[int], None]) -> None:
        for value in self:
            on_tick(value)


class GameSession:
    """Single-owner mutable state for one game of word hunt."""

    def __init__(
        self,
        words: Sequence[str] = DEFAULT_WORDS,
        size: int = DEFAULT_GRID_SIZE,
        retry_budget: int = DEFAULT_RETRY_BUDGET,
        rng: Optional[random.Random] = None,
        win_delay: float = 0.5,
        logger: Optional[logging.Logger] = None,
    ):
        self.words = list(words)
        self.size = size
        self.retry_budget = retry_budget
        self.rng = rng or random.Random()
        self.win_delay = win_delay
        self.logger = logger or logging.getLogger(__name__)

        self.grid: Grid = Grid(size=size)
        self.placements: List[PlacementRecord] = []
        self.unplaced_words: List[str] = []
        self.found_words: Set[str] = set()
        self.remaining_count = 0
        self.state = GameState.PLAYING

        self.is_selecting = False
        self.selection: List[Coord] = []

        self.restart()

    @property
    def is_won(self) -> bool:
        return self.state == GameState.WON

    @property
    def placed_words(self) -> List[str]:
        return [placement.word for placement in self.placements]

    def restart(self) -> None:
        """Generate a new grid and reset all progress."""
        placer = WordPlacer(
            size=self.size,
            retry_budget=self.retry_budget,
            rng=self.rng,
        )
        self.grid, self.placements = placer.generate(self.words)
        self.unplaced_words = list(placer.unplaced)

        # Only placed words count towards the win; an unplaced word can
        # never be found.
        self.found_words = set()
        self.remaining_count = len(self.placements)
        self.state = GameState.PLAYING
        self.is_selecting = False
        self.selection = []

        if self.unplaced_words:
            self.logger.warning(
                f"{len(self.unplaced_words)} word(s) left out of this puzzle: "
                f"{', '.join(self.unplaced_words)}"
            )
        self.logger.info(f"New puzzle ready, {self.remaining_count} words to find")
        self._check_won()

    # Drag handling

    def start_drag(self, row: int, col: int) -> None:
        if self.is_won or not self.grid.is_valid_position(row, col):
            return
        self.is_selecting = True
        self.selection = [(row, col)]
        self.grid.select(self.selection)

    def continue_drag(self, row: int, col: int) -> None:
        if self.is_won or not self.is_selecting:
            return
        if not self.selection:
            self.selection = [(row, col)]
        else:
            self.selection = trace_line(self.selection[0], (row, col))
        self.grid.select(clip_to_grid(self.selection, self.size))

    def end_drag(self) -> Optional[str]:
        """Finish the drag. Returns the word found, if any."""
        if self.is_won or not self.is_selecting:
            return None

        cells = clip_to_grid(self.selection, self.size)
        word = check_match(cells, self.grid, self.placements)
        if word is not None:
            self.record_found(word, cells)

        self.is_selecting = False
        self.selection = []
        self.grid.clear_selection()
        return word

    def leave_grid(self) -> Optional[str]:
        """Pointer left the grid mid-drag; treated as a release."""
        return self.end_drag()

    def select_line(self, start: Coord, end: Coord) -> Optional[str]:
        """Play a whole drag from start to end in one call."""
        self.start_drag(*start)
        self.continue_drag(*end)
        return self.end_drag()

    def record_found(self, word: str, cells: List[Coord]) -> bool:
        """
        Apply a verified match.

        Returns False when the word was already found, leaving counters as is.
        """
        if word in self.found_words:
            self.logger.debug(f"Already found: {word}")
            return False

        self.found_words.add(word)
        self.remaining_count -= 1
        self.grid.mark_found(cells)
        self.logger.info(f"Found '{word}', {self.remaining_count} left")

        self._check_won()
        return True

    def _check_won(self) -> None:
        # Vacuously won when nothing could be placed
        if len(self.found_words) == len(self.placements):
            self.state = GameState.WON
            self.logger.info("All words found, puzzle won")

    def celebrate(self, sleep: Callable[[float], None] = time.sleep) -> None:
        """Hold for the post-win delay before the win screen."""
        if self.is_won and self.win_delay > 0:
            sleep(self.win_delay)
