"""Classic algorithms: sorting, searching, dynamic programming, backtracking and trees."""

__version__ = "0.1.0"