"""Project-wide custom exceptions."""

from __future__ import annotations


class SqlGridError(Exception):
    """Base exception for the sqlgrid toolkit."""


class ConfigurationError(SqlGridError):
    """Raised when configuration loading or validation fails."""


class ResultSourceError(SqlGridError):
    """Raised when a result set cannot be loaded from its source."""
