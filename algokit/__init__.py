"""Classic data structures, searching, sorting and graph algorithms in plain Python."""

__version__ = "0.1.0"