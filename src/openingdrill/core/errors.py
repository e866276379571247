"""Exception hierarchy for parsing, resolving and training."""

from __future__ import annotations


class OpeningDrillError(ValueError):
    """Base class for all library errors."""


class MalformedPgnError(OpeningDrillError):
    """PGN text cannot be split into lines (unbalanced RAVs, no moves)."""


class NoMatchingOriginError(OpeningDrillError):
    """No piece on the board can play the given move text."""

    def __init__(self, san: str, reason: str = "no matching origin square") -> None:
        super().__init__(f"Cannot resolve move {san!r}: {reason}")
        self.san = san


class AttemptMismatchError(OpeningDrillError):
    """A trainee move does not match the expected move of the line."""

    def __init__(self, attempted: str, expected: str) -> None:
        super().__init__(f"Attempted {attempted!r}, expected {expected!r}")
        self.attempted = attempted
        self.expected = expected
