"""
greek-betacode: Betacode to polytonic Greek transliteration.

Reads relaxed (TypeGreek-style) and standard Betacode at the same time and
renders precomposed (NFC) or combining-mark Unicode Greek.

Basic usage:
    >>> from greek_betacode import transliterate
    >>> transliterate("mh=nin a)ei/de, qea/")
    'μῆνιν ἀείδε, θεά'
    >>> transliterate("*)axilleu/s")
    'Ἀχιλλεύς'

Streaming usage:
    >>> import io
    >>> from greek_betacode import Writer, WriterConfig
    >>> out = io.StringIO()
    >>> w = Writer(out, WriterConfig(combining=True))
    >>> w.write("qeo/s ")
    6

Symbol-level usage:
    >>> from greek_betacode import Symbol
    >>> sym = Symbol()
    >>> [sym.add(ch).status.value for ch in "ab"]
    ['accepted', 'boundary']
"""

import io

from greek_betacode._errors import (
    BetacodeError,
    InvalidDiacriticPlacement,
    MisplacedAsterisk,
    UnrecognizedCharacter,
    WriteError,
)
from greek_betacode._table import CODE_TABLE
from greek_betacode.symbol import Accent, AddResult, AddStatus, Breathing, Symbol
from greek_betacode.writer import DEFAULT_TERMINATORS, Writer, WriterConfig

__version__ = "0.1.0"
__all__ = [
    "transliterate",
    "CODE_TABLE",
    "DEFAULT_TERMINATORS",
    "Accent",
    "AddResult",
    "AddStatus",
    "Breathing",
    "Symbol",
    "Writer",
    "WriterConfig",
    "BetacodeError",
    "InvalidDiacriticPlacement",
    "MisplacedAsterisk",
    "UnrecognizedCharacter",
    "WriteError",
]


def transliterate(
    text: str,
    *,
    combining: bool = False,
    standard: bool = True,
    end_of_word: bool = True,
) -> str:
    """
    Transliterate a complete Betacode string to Greek.

    A whole string ends at a word boundary, so by default a trailing sigma
    becomes final sigma.

    Args:
        text: Betacode text
        combining: Return combining marks instead of precomposed letters
        standard: Accept the standard Betacode capital asterisk
        end_of_word: Apply the final-sigma rule at the end of text

    Returns:
        Greek text

    Raises:
        WriteError: If text holds invalid Betacode
    """
    out = io.StringIO()
    config = WriterConfig(combining=combining, standard_asterisk=standard)
    Writer(out, config).write(text, end_of_word=end_of_word)
    return out.getvalue()


# Lazy import for spaCy components (only when spacy is installed)
def __getattr__(name: str):
    if name == "BetacodeTransliteratorComponent":
        try:
            from greek_betacode.spacy import BetacodeTransliteratorComponent
            return BetacodeTransliteratorComponent
        except ImportError:
            raise ImportError(
                "spaCy integration requires spacy. "
                "Install with: pip install greek-betacode[spacy]"
            )
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
