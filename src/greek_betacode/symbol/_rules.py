"""
Symbol accumulator for Betacode.

A Symbol collects one Greek letter and its diacritics, one input character
at a time. It understands two dialects at once:

    - Relaxed (TypeGreek-style): diacritics follow the base letter and the
      case of the letter is literal, e.g. ``A)=`` or ``a)=|``.
    - Standard: a leading asterisk marks a capital and diacritics may sit
      between the asterisk and the letter, e.g. ``*)=A``.

Diacritic validity depends on the letter class: accents, iota subscript
and diaeresis need a vowel, breathings need a vowel or rho. Under a
pending asterisk the check waits until the base letter arrives.

Example:
    >>> from greek_betacode.symbol import Symbol
    >>> sym = Symbol()
    >>> for ch in "*)=a":
    ...     _ = sym.add(ch)
    >>> sym.canonical_text()
    'A)='
    >>> sym.precomposed_text()
    'Ἆ'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from greek_betacode._errors import (
    BetacodeError,
    InvalidDiacriticPlacement,
    MisplacedAsterisk,
    UnrecognizedCharacter,
)
from greek_betacode._table import (
    ASTERISK,
    DIACRITICS,
    FINAL_SIGMA,
    MEDIAL_SIGMA,
    RHO,
    VOWELS,
    combining_mark,
    compose,
    greek_letter,
    is_base,
)

__all__ = ["Accent", "Breathing", "AddStatus", "AddResult", "Symbol"]

# =============================================================================
# Data Classes
# =============================================================================


class Accent(Enum):
    """Accent of a symbol; values are the Betacode markers."""

    NONE = ""
    ACUTE = "/"
    GRAVE = "\\"
    CIRCUMFLEX = "="


class Breathing(Enum):
    """Breathing of a symbol; values are the Betacode markers."""

    NONE = ""
    SMOOTH = ")"
    ROUGH = "("


class AddStatus(Enum):
    """Outcome kind of Symbol.add()."""

    ACCEPTED = "accepted"
    BOUNDARY = "boundary"
    REJECTED = "rejected"


@dataclass(frozen=True)
class AddResult:
    """Result of offering one character to a Symbol."""

    status: AddStatus
    error: Optional[BetacodeError] = None

    @property
    def accepted(self) -> bool:
        return self.status is AddStatus.ACCEPTED

    @property
    def boundary(self) -> bool:
        """True if the character starts the next symbol (not an error)."""
        return self.status is AddStatus.BOUNDARY

    @property
    def rejected(self) -> bool:
        return self.status is AddStatus.REJECTED


_ACCEPTED = AddResult(AddStatus.ACCEPTED)
_BOUNDARY = AddResult(AddStatus.BOUNDARY)

# =============================================================================
# Letter Class Rules
# =============================================================================

_BREATHINGS = frozenset(")(")

_MARKER_NAMES = {
    "/": "accent",
    "\\": "accent",
    "=": "accent",
    ")": "breathing",
    "(": "breathing",
    "|": "iota subscript",
    "+": "diaeresis",
}


def _can_carry(base: Optional[str], marker: str) -> bool:
    """Check whether a base letter may carry a diacritic marker."""
    if base is None:
        return False
    letter = base.lower()
    if marker in _BREATHINGS:
        return letter in VOWELS or letter == RHO
    return letter in VOWELS


def _placement_error(base: Optional[str], marker: str) -> InvalidDiacriticPlacement:
    name = _MARKER_NAMES[marker]
    if base is None:
        message = f"{name} {marker!r} has no base letter"
    elif marker in _BREATHINGS:
        message = f"can't put {name} {marker!r} on non-vowel non-rho {base!r}"
    else:
        message = f"can't put {name} {marker!r} on non-vowel {base!r}"
    return InvalidDiacriticPlacement(message, marker)


# =============================================================================
# Symbol
# =============================================================================


@dataclass
class Symbol:
    """
    One Greek letter plus its diacritics, built from Betacode characters.

    A Symbol is reused: the Writer feeds it characters until add() reports
    a boundary, renders it, then calls reset().

    Attributes:
        base: Betacode base letter (A-Z, a-z) or None
        accent: Accent marker
        breathing: Breathing marker
        iota_subscript: Iota subscript present
        diaeresis: Diaeresis present
        asterisk_pending: Standard-mode asterisk read, base letter not yet
        allow_asterisk: Accept the standard-mode asterisk at all
    """

    base: Optional[str] = None
    accent: Accent = Accent.NONE
    breathing: Breathing = Breathing.NONE
    iota_subscript: bool = False
    diaeresis: bool = False
    asterisk_pending: bool = False
    allow_asterisk: bool = True
    _error: Optional[BetacodeError] = field(default=None, init=False, repr=False)

    @property
    def last_error(self) -> Optional[BetacodeError]:
        """Error recorded by the most recent rejected add(); cleared by reset()."""
        return self._error

    def is_empty(self) -> bool:
        """True if the symbol has neither a base letter nor a pending asterisk."""
        return self.base is None and not self.asterisk_pending

    def reset(self) -> None:
        """Clear the symbol so it can be reused."""
        self.base = None
        self.accent = Accent.NONE
        self.breathing = Breathing.NONE
        self.iota_subscript = False
        self.diaeresis = False
        self.asterisk_pending = False
        self._error = None

    def add(self, ch: str) -> AddResult:
        """
        Offer one Betacode character to the symbol.

        Args:
            ch: A single input character

        Returns:
            ACCEPTED if ch became part of the symbol, BOUNDARY if ch is a
            base letter that starts the next symbol (nothing is changed),
            REJECTED with the error otherwise (also stored in last_error)
        """
        if is_base(ch):
            return self._add_base(ch)
        if ch in DIACRITICS:
            return self._add_diacritic(ch)
        if ch == ASTERISK and self.allow_asterisk:
            if not self.is_empty():
                return self._reject(MisplacedAsterisk("asterisk not at start of symbol"))
            self.asterisk_pending = True
            return _ACCEPTED
        return self._reject(
            UnrecognizedCharacter(f"unrecognized symbol character {ch!r}", ch)
        )

    def mark_final(self) -> bool:
        """
        Rewrite a medial sigma base to the final-sigma code.

        Returns:
            True if the base was rewritten
        """
        if self.base == MEDIAL_SIGMA:
            self.base = FINAL_SIGMA
            return True
        return False

    def _add_base(self, ch: str) -> AddResult:
        if self.asterisk_pending:
            # Standard Betacode: the asterisk capitalizes, case of ch is ignored
            code = ch.upper()
            for marker in self._markers():
                if not _can_carry(code, marker):
                    return self._reject(_placement_error(code, marker))
            self.base = code
            self.asterisk_pending = False
            return _ACCEPTED

        if not self.is_empty():
            return _BOUNDARY
        self.base = ch
        return _ACCEPTED

    def _add_diacritic(self, marker: str) -> AddResult:
        if not self.asterisk_pending and not _can_carry(self.base, marker):
            return self._reject(_placement_error(self.base, marker))

        if marker in _BREATHINGS:
            self.breathing = Breathing(marker)
        elif marker == "|":
            self.iota_subscript = True
        elif marker == "+":
            self.diaeresis = True
        else:
            self.accent = Accent(marker)
        return _ACCEPTED

    def _reject(self, error: BetacodeError) -> AddResult:
        self._error = error
        return AddResult(AddStatus.REJECTED, error)

    def _markers(self) -> list[str]:
        """Recorded diacritic markers in canonical order."""
        markers = [self.breathing.value, self.accent.value]
        if self.iota_subscript:
            markers.append("|")
        if self.diaeresis:
            markers.append("+")
        return [m for m in markers if m]

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def canonical_text(self) -> str:
        """
        Render as relaxed Betacode: base, breathing, accent, iota, diaeresis.

        Diacritics always follow the base, whichever dialect built the
        symbol. A pending asterisk renders as a leading ``*``.
        """
        prefix = ASTERISK if self.asterisk_pending else ""
        return prefix + (self.base or "") + "".join(self._markers())

    def combining_text(self) -> str:
        """
        Render as a Greek base letter followed by combining marks.

        Marks come in the order breathing, accent, iota subscript,
        diaeresis, matching the canonical Betacode rendering.
        """
        if self.base is None:
            return ""
        return greek_letter(self.base) + "".join(
            combining_mark(m) for m in self._markers()
        )

    def precomposed_text(self) -> str:
        """Render as NFC Greek (precomposed codepoints). This is the usual form."""
        return compose(self.combining_text())

    def __str__(self) -> str:
        return self.canonical_text()
