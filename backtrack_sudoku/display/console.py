"""Terminal glue: grid formatting, cursor control, pacing and user input."""

from __future__ import annotations
import sys
import time
from typing import Callable, Optional, TextIO, Tuple

from ..core.errors import OutOfRangeInputError, ConstraintViolationError, InputClosedError
from ..core.grid import SudokuGrid, EMPTY, SIZE, BOX_SIZE, check_coordinate
from ..core.validator import is_valid

CLEAR_SEQUENCE = "\x1b[2J\x1b[H"


def clear_terminal(stream: Optional[TextIO] = None) -> None:
    """Clear the terminal and home the cursor."""
    stream = stream or sys.stdout
    stream.write(CLEAR_SEQUENCE)
    stream.flush()


def move_cursor(x: int, y: int, stream: Optional[TextIO] = None) -> None:
    """Move the cursor to column ``x``, line ``y`` (both zero-based)."""
    if x < 0 or y < 0:
        raise OutOfRangeInputError(f"Cursor position must be non-negative, got ({x}, {y})")
    stream = stream or sys.stdout
    stream.write(f"\x1b[{y + 1};{x + 1}H")
    stream.flush()


def sleep(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000.0)


def format_grid(grid: SudokuGrid, clear_screen: bool = False) -> str:
    """
    Render the grid as console text.

    Every row starts on a fresh line. Empty cells print as two spaces,
    values as the digit plus a space, with an extra space after every
    third column.

    Args:
        grid: Grid to render.
        clear_screen: Clear the terminal before formatting.
    """
    if clear_screen:
        clear_terminal()

    parts = []
    for row in range(SIZE):
        parts.append("\n")
        for col in range(SIZE):
            value = grid.get(row, col)
            parts.append("  " if value == EMPTY else f"{value} ")
            if (col + 1) % BOX_SIZE == 0:
                parts.append(" ")
    parts.append("\n")
    return "".join(parts)


class ConsoleRenderer:
    """Redraws the grid in place; used as the solver's visualization hook."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def __call__(self, grid: SudokuGrid) -> None:
        move_cursor(0, 0, self.stream)
        self.stream.write(format_grid(grid))
        self.stream.flush()


def read_line(prompt: str, input_fn: Callable[[str], str] = input) -> str:
    """Read one line of input; a closed stream raises InputClosedError."""
    try:
        return input_fn(prompt)
    except EOFError as e:
        raise InputClosedError("Input ended before a value was entered") from e


def _read_int(prompt: str, input_fn: Callable[[str], str]) -> int:
    raw = read_line(prompt, input_fn)
    try:
        return int(raw.strip())
    except ValueError as e:
        raise OutOfRangeInputError(f"Expected an integer, got {raw!r}") from e


def read_user_move(input_fn: Callable[[str], str] = input) -> Tuple[int, int, int]:
    """
    Prompt for a row, a column and a value.

    No bounds or constraint checks are made here; see ``apply_user_move``.
    """
    row = _read_int("Enter row: ", input_fn)
    col = _read_int("Enter col: ", input_fn)
    value = _read_int("Enter value: ", input_fn)
    return row, col, value


def apply_user_move(
    grid: SudokuGrid,
    row: int,
    col: int,
    value: int,
    check_constraints: bool = False,
) -> None:
    """
    Write a user-entered value into the grid.

    A value of 0 clears the cell.

    Raises:
        OutOfRangeInputError: row/col outside 0-8 or value outside 0-9.
        ConstraintViolationError: ``check_constraints`` is set and the
            value already appears in the cell's row, column or box.
    """
    check_coordinate(row, col)
    if value < EMPTY or value > SIZE:
        raise OutOfRangeInputError(f"Value must be {EMPTY}-{SIZE}, got {value}")

    if check_constraints and value != EMPTY:
        previous = grid.get(row, col)
        grid.clear(row, col)
        if not is_valid(grid, row, col, value):
            grid.set(row, col, previous)
            raise ConstraintViolationError(
                f"{value} conflicts with its row, column or box at ({row}, {col})"
            )

    grid.set(row, col, value)
