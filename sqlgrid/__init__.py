"""Aligned, bordered text rendering for tabular SQL query results."""

__version__ = "0.1.0"
