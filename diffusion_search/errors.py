"""Exception types raised by the search-time simulation."""

from __future__ import annotations


class DiffusionSearchError(Exception):
    """Base class for all package errors."""


class InvalidConfigurationError(DiffusionSearchError, ValueError):
    """Run or domain parameters are contradictory or out of range.

    Raised before any trial starts; never retried.
    """


class RejectionLimitError(DiffusionSearchError, RuntimeError):
    """A rejection-sampling loop exhausted its retry budget.

    Cannot happen with a correct uniform source and a valid configuration,
    so it signals an internal-consistency failure rather than a bad draw.
    """

    def __init__(self, loop: str, max_tries: int) -> None:
        super().__init__(f"{loop} rejection loop exceeded {max_tries} tries")
        self.loop = loop
        self.max_tries = max_tries
