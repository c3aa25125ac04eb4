"""Exceptions raised by the Sudoku solver package."""


class SudokuError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(SudokuError, ValueError):
    """Board size is not a perfect square."""


class FormatError(SudokuError, ValueError):
    """Input does not describe a uniform, square grid."""
