"""Classic data structures, sorting algorithms and small numeric utilities."""

__version__ = "0.1.0"