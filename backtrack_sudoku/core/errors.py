"""Exception types raised by the Sudoku engine and its console glue."""


class SudokuError(ValueError):
    """Base class for all errors raised by this package."""


class ConfigurationError(SudokuError):
    """Raised for invalid generator or solver settings (e.g. difficulty outside 0-81)."""


class InvalidGridError(SudokuError):
    """Raised when a grid has the wrong length or carries values outside 0-9."""


class OutOfRangeInputError(SudokuError):
    """Raised when a row, column or value is outside its domain."""


class ConstraintViolationError(SudokuError):
    """Raised when a move breaks the row, column or box uniqueness rule."""


class InputClosedError(SudokuError):
    """Raised when the input stream ends while a move is being read."""
