"""Exception taxonomy for nbstats.

Fatal errors derive from :class:`NBStatsError` and carry the process exit
code the CLI should return. Rejected tokens are not fatal; they are logged
and only raised (as :class:`RejectedTokenWarning`) in strict mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .tokenizer import RejectionEvent


class NBStatsError(RuntimeError):
    """Raised when a run cannot produce statistics."""

    exit_code = 1


class UsageError(NBStatsError):
    """Raised for a malformed command line."""

    exit_code = 2


class StreamIOError(NBStatsError):
    """Raised when a file cannot be opened, read or written."""

    exit_code = 3


class MalformedTokenError(NBStatsError):
    """Raised when a token is unrecoverable input corruption; extraction stops."""

    exit_code = 4

    def __init__(self, index: int, text: str) -> None:
        self.index = index
        self.text = text
        super().__init__(
            f"failure reading element {index} (length = {len(text)}, value = \"{text}\")"
        )


class EmptyInputError(NBStatsError):
    """Raised when no value was accepted from the input."""

    exit_code = 5

    def __init__(self, message: str = "Data set is empty!") -> None:
        super().__init__(message)


class AllocationError(NBStatsError):
    """Raised when a growable buffer cannot be enlarged."""

    exit_code = 6


class RejectedTokenWarning(UserWarning):
    """A token excluded from the dataset (negative, bare zero or non-finite)."""

    def __init__(self, event: "RejectionEvent") -> None:
        self.event = event
        super().__init__(event.message)
