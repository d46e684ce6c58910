# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Data models for the word hunt puzzle.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple
import re


Coord = Tuple[int, int]

_WHITESPACE = re.compile(r"\s")


class CellOutOfBoundsError(IndexError):
    """Raised when a grid coordinate falls outside the grid."""
    pass


class Direction(Enum):
    """The 8 straight-line directions a word can run in."""
    RIGHT = ("horizontal", 0, 1)
    LEFT = ("horizontal-rev", 0, -1)
    DOWN = ("vertical", 1, 0)
    UP = ("vertical-rev", -1, 0)
    DOWN_RIGHT = ("diagonal", 1, 1)
    UP_LEFT = ("diagonal-rev", -1, -1)
    DOWN_LEFT = ("anti-diagonal", 1, -1)
    UP_RIGHT = ("anti-diagonal-rev", -1, 1)

    def __init__(self, label: str, dr: int, dc: int):
        self.label = label
        self.dr = dr
        self.dc = dc


class CellState(Enum):
    DEFAULT = "default"
    SELECTED = "selected"
    FOUND = "found"


@dataclass
class Cell:
    """Represents a single cell in the letter grid."""
    row: int
    col: int
    letter: str = ""
    is_selected: bool = False
    is_found: bool = False

    def is_empty(self) -> bool:
        return self.letter == ""

    @property
    def state(self) -> CellState:
        # Found wins over selected
        if self.is_found:
            return CellState.FOUND
        if self.is_selected:
            return CellState.SELECTED
        return CellState.DEFAULT


@dataclass(frozen=True)
class PlacementRecord:
    """Where a target word ended up in the grid."""
    word: str
    cells: Tuple[Coord, ...]
    direction: Direction

    @property
    def normalized(self) -> str:
        return normalize_word(self.word)

    def cell_set(self) -> frozenset:
        return frozenset(self.cells)


@dataclass
class Grid:
    """Square letter grid with per-cell selection and found flags."""
    size: int
    cells: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self):
        if not self.cells:
            self.cells = [
                [Cell(row=r, col=c) for c in range(self.size)]
                for r in range(self.size)
            ]

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def get_cell(self, row: int, col: int) -> Cell:
        """Get cell at position."""
        if not self.is_valid_position(row, col):
            raise CellOutOfBoundsError(
                f"Cell ({row}, {col}) is outside a {self.size}x{self.size} grid"
            )
        return self.cells[row][col]

    def get_letter(self, row: int, col: int) -> str:
        return self.get_cell(row, col).letter

    def set_letter(self, row: int, col: int, letter: str):
        """Set a letter in a cell."""
        self.get_cell(row, col).letter = letter.upper()

    def iter_cells(self):
        for row in self.cells:
            for cell in row:
                yield cell

    def empty_cells(self) -> List[Cell]:
        return [cell for cell in self.iter_cells() if cell.is_empty()]

    def is_complete(self) -> bool:
        """True when every cell holds exactly one uppercase letter."""
        return all(
            len(cell.letter) == 1 and cell.letter.isalpha() and cell.letter.isupper()
            for cell in self.iter_cells()
        )

    def letters_at(self, coords: List[Coord]) -> str:
        return "".join(self.get_letter(row, col) for row, col in coords)

    def clear_selection(self):
        for cell in self.iter_cells():
            cell.is_selected = False

    def select(self, coords: List[Coord]):
        """Replace the selected flags with exactly the given cells."""
        self.clear_selection()
        for row, col in coords:
            self.get_cell(row, col).is_selected = True

    def mark_found(self, coords: List[Coord]):
        for row, col in coords:
            self.get_cell(row, col).is_found = True

    def to_string(self, highlight: bool = True) -> str:
        """Convert grid to string representation."""
        result = []
        for row in self.cells:
            line = []
            for cell in row:
                letter = cell.letter or "."
                if highlight and cell.is_found:
                    letter = letter.lower()
                line.append(letter)
            result.append(" ".join(line))
        return "\n".join(result)


def normalize_word(word: str) -> str:
    """Strip all whitespace and uppercase. 'I love you' -> 'ILOVEYOU'."""
    return _WHITESPACE.sub("", word).upper()
