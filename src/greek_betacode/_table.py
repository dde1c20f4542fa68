"""
Betacode code table and Unicode normalization helpers.

Maps Betacode base letters and diacritic markers to Greek codepoints and
combining marks. Uppercase entries are derived from the lowercase ones by
uppercasing the Greek letter, so both ``S`` and ``J`` map to capital sigma.

The table is built once at import and exposed read-only.
"""

from __future__ import annotations

import unicodedata
from types import MappingProxyType
from typing import Mapping

__all__ = [
    "ALPHABET",
    "ASTERISK",
    "CODE_TABLE",
    "DIACRITICS",
    "FINAL_SIGMA",
    "MEDIAL_SIGMA",
    "RHO",
    "VOWELS",
    "combining_mark",
    "compose",
    "greek_letter",
    "is_base",
]

# Betacode vowels (lowercase); breathing is also allowed on rho
VOWELS = frozenset("aehiouw")
RHO = "r"

MEDIAL_SIGMA = "s"
FINAL_SIGMA = "j"
ASTERISK = "*"

_LETTERS = {
    "a": "α",  # alpha
    "b": "β",  # beta
    "g": "γ",  # gamma
    "d": "δ",  # delta
    "e": "ε",  # epsilon
    "v": "ϝ",  # digamma (archaic)
    "z": "ζ",  # zeta
    "h": "η",  # eta
    "q": "θ",  # theta
    "i": "ι",  # iota
    "k": "κ",  # kappa
    "l": "λ",  # lambda
    "m": "μ",  # mu
    "n": "ν",  # nu
    "c": "ξ",  # xi
    "o": "ο",  # omicron
    "p": "π",  # pi
    "r": "ρ",  # rho
    "s": "σ",  # sigma
    "j": "ς",  # final sigma
    "t": "τ",  # tau
    "u": "υ",  # upsilon
    "f": "φ",  # phi
    "x": "χ",  # chi
    "y": "ψ",  # psi
    "w": "ω",  # omega
}

_MARKS = {
    "/": "\u0301",  # combining acute accent
    "\\": "\u0300",  # combining grave accent
    "=": "\u0342",  # combining Greek perispomeni (circumflex)
    ")": "\u0313",  # combining comma above (smooth breathing)
    "(": "\u0314",  # combining reversed comma above (rough breathing)
    "|": "\u0345",  # combining Greek ypogegrammeni (iota subscript)
    "+": "\u0308",  # combining diaeresis
}

CODE_TABLE: Mapping[str, str] = MappingProxyType(
    {
        **_LETTERS,
        **{code.upper(): letter.upper() for code, letter in _LETTERS.items()},
        **_MARKS,
    }
)

DIACRITICS = frozenset(_MARKS)

_BASES = frozenset(_LETTERS) | frozenset(c.upper() for c in _LETTERS)

# Every character a Symbol can consume
ALPHABET = _BASES | DIACRITICS | {ASTERISK}


def is_base(ch: str) -> bool:
    """Return True if ch is a Betacode base letter (either case)."""
    return ch in _BASES


def greek_letter(code: str) -> str:
    """
    Return the Greek letter for a Betacode base letter.

    Args:
        code: A Betacode letter, lower or upper case

    Returns:
        The Greek letter, uppercased when code is uppercase

    Raises:
        KeyError: If code is not a Betacode letter

    Example:
        >>> greek_letter("q")
        'θ'
        >>> greek_letter("S")
        'Σ'
    """
    if not is_base(code):
        raise KeyError(code)
    return CODE_TABLE[code]


def combining_mark(marker: str) -> str:
    """Return the combining mark for a Betacode diacritic marker."""
    if marker not in DIACRITICS:
        raise KeyError(marker)
    return CODE_TABLE[marker]


def compose(text: str) -> str:
    """Compose combining sequences into precomposed codepoints (NFC)."""
    return unicodedata.normalize("NFC", text)
