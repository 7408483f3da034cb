"""Console display and input helpers."""

from .console import (
    ConsoleRenderer,
    format_grid,
    clear_terminal,
    move_cursor,
    sleep,
    read_line,
    read_user_move,
    apply_user_move,
)

__all__ = [
    "ConsoleRenderer",
    "format_grid",
    "clear_terminal",
    "move_cursor",
    "sleep",
    "read_line",
    "read_user_move",
    "apply_user_move",
]
