"""Small programming exercises: arithmetic, recursion, searching, sorting and puzzles."""

__version__ = "0.1.0"