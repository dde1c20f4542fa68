"""Exception types for Betacode parsing and streaming."""

from __future__ import annotations

from typing import Optional

__all__ = [
    "BetacodeError",
    "InvalidDiacriticPlacement",
    "MisplacedAsterisk",
    "UnrecognizedCharacter",
    "WriteError",
]


class BetacodeError(ValueError):
    """Base class for all Betacode errors."""


class InvalidDiacriticPlacement(BetacodeError):
    """A diacritic was attached to a base letter of the wrong class."""

    def __init__(self, message: str, char: str) -> None:
        super().__init__(message)
        self.char = char


class MisplacedAsterisk(BetacodeError):
    """An asterisk appeared after the start of a symbol, or had no base letter."""

    def __init__(self, message: str, char: str = "*") -> None:
        super().__init__(message)
        self.char = char


class UnrecognizedCharacter(BetacodeError):
    """A character outside the Betacode alphabet and the terminator set."""

    def __init__(self, message: str, char: str) -> None:
        super().__init__(message)
        self.char = char


class WriteError(BetacodeError):
    """
    A Writer call stopped before consuming all of its input.

    Attributes:
        written: Characters emitted to the sink by the failing call
        position: Index of the input character being processed, or None
            when the failure happened while flushing
    """

    def __init__(self, message: str, written: int, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.written = written
        self.position = position
