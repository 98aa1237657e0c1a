"""Thread-safe concurrent iterators over sequences, ranges and owned lists."""

__version__ = "0.1.0"