"""Golfkit Exceptions

Custom exceptions for the golfkit builders and page compiler.
"""

from __future__ import annotations


class GolfkitError(Exception):
    """Base exception for all golfkit errors."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class ContractError(GolfkitError, ValueError):
    """Raised when a builder receives input it cannot turn into valid output."""

    pass


class ConfigError(GolfkitError):
    """Raised when a page description cannot be read or validated."""

    def __init__(self, message: str, source: str | None = None):
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message, exit_code=2)
