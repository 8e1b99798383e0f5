"""Classic array, matrix, searching and sorting algorithms as plain functions."""

__version__ = "0.1.0"
__all__ = ["arrays", "matrix", "searching", "sorting"]