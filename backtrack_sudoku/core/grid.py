"""Fixed 9x9 Sudoku grid stored as a flat array of 81 cells."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Iterable, Iterator, Optional

from .errors import InvalidGridError, OutOfRangeInputError

EMPTY = 0
SIZE = 9
BOX_SIZE = 3
CELL_COUNT = SIZE * SIZE
VALUES = tuple(range(1, SIZE + 1))
DIGITS = "0123456789"


def cell_index(row: int, col: int) -> int:
    """Flat index of (row, col) in row-major order."""
    return row * SIZE + col


def box_origin(row: int, col: int) -> Tuple[int, int]:
    """Top-left coordinate of the 3x3 box containing (row, col)."""
    return (row // BOX_SIZE) * BOX_SIZE, (col // BOX_SIZE) * BOX_SIZE


def check_coordinate(row: int, col: int) -> None:
    """Raise OutOfRangeInputError unless both coordinates are in [0, 9)."""
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise OutOfRangeInputError(
            f"Coordinate must be within 0-{SIZE - 1}, got ({row}, {col})"
        )


def _as_int_array(cells) -> np.ndarray:
    """Convert ``cells`` to an integer array without truncating anything."""
    if not isinstance(cells, np.ndarray):
        cells = list(cells)
    try:
        arr = np.array(cells)
    except ValueError as e:
        raise InvalidGridError(f"Grid cells must form a regular array: {e}") from e
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidGridError(f"Cell values must be integers, got dtype {arr.dtype}")
    return arr


class SudokuGrid:
    """
    A 9x9 Sudoku grid.

    Cells are kept in a flat ``int32`` array of length 81 addressed by
    ``row * 9 + col``. ``EMPTY`` (0) marks a blank cell; every other cell
    holds a value in 1-9. The array is never resized.
    """

    def __init__(self, cells: Optional[Iterable[int]] = None):
        """
        Initialize a grid.

        Args:
            cells: Optional 81 values in row-major order. If None, every
                cell starts EMPTY.
        """
        if cells is None:
            self.cells = np.full(CELL_COUNT, EMPTY, dtype=np.int32)
            return

        arr = _as_int_array(cells).ravel()
        if arr.shape != (CELL_COUNT,):
            raise InvalidGridError(f"Grid must have {CELL_COUNT} cells, got {arr.size}")
        if np.any((arr < EMPTY) | (arr > SIZE)):
            raise InvalidGridError(f"Cell values must be {EMPTY}-{SIZE}")
        self.cells = arr.astype(np.int32)

    @property
    def matrix(self) -> np.ndarray:
        """9x9 view over the flat cells (writes go through to the grid)."""
        return self.cells.reshape(SIZE, SIZE)

    def copy(self) -> SudokuGrid:
        """Create an independent copy of all 81 cells."""
        new_grid = SudokuGrid()
        new_grid.cells = self.cells.copy()
        return new_grid

    def get(self, row: int, col: int) -> int:
        """Get value at (row, col). 0 means empty."""
        check_coordinate(row, col)
        return int(self.cells[cell_index(row, col)])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at (row, col). Use 0 to clear."""
        check_coordinate(row, col)
        if value < EMPTY or value > SIZE:
            raise OutOfRangeInputError(f"Value must be {EMPTY}-{SIZE}, got {value}")
        self.cells[cell_index(row, col)] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at (row, col)."""
        check_coordinate(row, col)
        self.cells[cell_index(row, col)] = EMPTY

    def fill(self, value: int = EMPTY) -> None:
        """Overwrite every cell with ``value``."""
        self.cells[:] = value

    def is_empty(self, row: int, col: int) -> bool:
        check_coordinate(row, col)
        return self.cells[cell_index(row, col)] == EMPTY

    def get_row(self, row: int) -> np.ndarray:
        return self.matrix[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.matrix[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get the 9 values of the box containing (row, col)."""
        box_row, box_col = box_origin(row, col)
        return self.matrix[box_row:box_row + BOX_SIZE,
                           box_col:box_col + BOX_SIZE].flatten()

    def empty_cells(self) -> Iterator[Tuple[int, int]]:
        """Yield empty cell coordinates in row-major order."""
        for index in np.flatnonzero(self.cells == EMPTY):
            yield divmod(int(index), SIZE)

    def filled_cells(self) -> List[Tuple[int, int]]:
        return [divmod(int(index), SIZE) for index in np.flatnonzero(self.cells != EMPTY)]

    def count_empty(self) -> int:
        return int(np.sum(self.cells == EMPTY))

    def count_filled(self) -> int:
        return int(np.sum(self.cells != EMPTY))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def to_string(self) -> str:
        """Compact 81-character form, 0 for empty cells."""
        return ''.join(str(int(val)) for val in self.cells)

    def to_list(self) -> List[int]:
        return [int(val) for val in self.cells]

    @classmethod
    def from_string(cls, s: str) -> SudokuGrid:
        """
        Create a grid from an 81-character string.

        '0' or '.' mark empty cells, '1'-'9' are values. Whitespace is ignored.
        """
        s = ''.join(s.split())
        if len(s) != CELL_COUNT:
            raise InvalidGridError(f"String length must be {CELL_COUNT}, got {len(s)}")

        cells = []
        for c in s:
            if c == '.':
                cells.append(EMPTY)
            elif c in DIGITS:
                cells.append(int(c))
            else:
                raise InvalidGridError(f"Unexpected character {c!r} in grid string")
        return cls(cells)

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> SudokuGrid:
        """Create a grid from a 9x9 nested list."""
        arr = _as_int_array(data)
        if arr.shape != (SIZE, SIZE):
            raise InvalidGridError(f"Grid shape must be ({SIZE}, {SIZE}), got {arr.shape}")
        return cls(arr)

    def __str__(self) -> str:
        """Pretty-print the grid with box separators."""
        lines = []
        horizontal_sep = '+' + (('-' * (BOX_SIZE * 2 + 1)) + '+') * BOX_SIZE

        for i in range(SIZE):
            if i % BOX_SIZE == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(SIZE):
                val = self.get(i, j)
                row_str += ' .' if val == EMPTY else f' {val}'
                if (j + 1) % BOX_SIZE == 0:
                    row_str += ' |'
            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuGrid(filled={self.count_filled()})"

    def __len__(self) -> int:
        return CELL_COUNT

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuGrid):
            return False
        return np.array_equal(self.cells, other.cells)

    def __hash__(self) -> int:
        return hash(self.to_string())


def copy_grid(source: SudokuGrid) -> SudokuGrid:
    """Return a full independent duplicate of ``source``."""
    return source.copy()
