"""Error types for serialscrape.

A traversal that finds nothing is not an error: every primitive reports it by
returning ``None``. The exceptions below are raised only when a traversal is
put together incorrectly.
"""

from __future__ import annotations

from typing import Optional


class SerialScrapeError(Exception):
    """Base class for all errors raised by serialscrape."""

    hint: Optional[str] = None

    def __init__(self, message: str, *, hint: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        if self.hint:
            return f"{self.message} Hint: {self.hint}"
        return self.message


class SerialUsageError(SerialScrapeError):
    """Raised when something other than a ``Serial`` is composed into a traversal."""


class NonProgressingRepetitionError(SerialScrapeError):
    """Raised by strict ``many`` when an iteration succeeds without moving."""


__all__ = [
    "SerialScrapeError",
    "SerialUsageError",
    "NonProgressingRepetitionError",
]
