"""
Streaming Betacode to Greek writer.

The Writer reads Betacode one character at a time and owns a single
in-flight Symbol. Symbol boundaries are only visible one character ahead:
a base letter arriving at a non-empty symbol closes it, so the symbol is
rendered and the same letter is offered again to the emptied symbol.

Terminator characters (punctuation, digits, brackets, whitespace) end the
current word. They pass through unchanged, and a lowercase sigma right
before one becomes final sigma.

Example:
    >>> import io
    >>> from greek_betacode.writer import Writer
    >>> out = io.StringIO()
    >>> Writer(out).write("qeos.")
    5
    >>> out.getvalue()
    'θεος.'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from greek_betacode._errors import BetacodeError, MisplacedAsterisk, WriteError
from greek_betacode._table import ALPHABET
from greek_betacode.symbol._rules import Symbol

__all__ = ["DEFAULT_TERMINATORS", "WriterConfig", "Writer"]

logger = logging.getLogger(__name__)

DEFAULT_TERMINATORS = frozenset(
    ",.';:"
    "\u00b7"  # middle dot
    "\u0387"  # Greek ano teleia
    "?-"
    "\u2013"  # en dash
    "\u2014"  # em dash
    "[]!"
    "0123456789"
    " \t\n\r"
)


class Sink(Protocol):
    def write(self, text: str) -> Optional[int]: ...


@dataclass(frozen=True)
class WriterConfig:
    """
    Writer configuration.

    Attributes:
        combining: Emit base letters with combining marks instead of NFC
        terminators: Characters that end a word and pass through unchanged
        standard_asterisk: Accept the standard Betacode capital asterisk
    """

    combining: bool = False
    terminators: frozenset[str] = DEFAULT_TERMINATORS
    standard_asterisk: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "terminators", frozenset(self.terminators))
        overlap = self.terminators & ALPHABET
        if overlap:
            logger.warning(
                "Terminators shadow Betacode characters: %s", "".join(sorted(overlap))
            )


class Writer:
    """
    Convert a Betacode character stream to Greek and write it to a sink.

    A Writer holds the in-flight symbol between feed() calls and is not
    safe for concurrent use.

    Example:
        >>> import io
        >>> out = io.StringIO()
        >>> w = Writer(out, WriterConfig(combining=True))
        >>> w.write("a)/")
        3
    """

    def __init__(self, sink: Sink, config: Optional[WriterConfig] = None) -> None:
        self.sink = sink
        self.config = config if config is not None else WriterConfig()
        self._symbol = Symbol(allow_asterisk=self.config.standard_asterisk)
        self._written = 0

    @property
    def pending(self) -> bool:
        """True while a partial symbol is held for the next call."""
        return not self._symbol.is_empty()

    def write(self, text: str, *, end_of_word: bool = False) -> int:
        """
        Convert all of text, emit the trailing symbol and flush the sink.

        Args:
            text: Betacode input
            end_of_word: Treat the end of text as a word boundary, so a
                trailing sigma becomes final

        Returns:
            Number of characters written to the sink

        Raises:
            WriteError: On invalid input or sink failure; ``written`` holds
                the characters emitted before the failure
        """
        self._written = 0
        self._consume(text)
        self._emit_symbol(None, end_of_word=end_of_word)
        self._flush_sink()
        return self._written

    def feed(self, text: str) -> int:
        """
        Convert text but keep the trailing symbol for the next call.

        Use this when more input follows, e.g. when reading in chunks that
        may split a symbol. Finish with flush() or write().
        """
        self._written = 0
        self._consume(text)
        return self._written

    def flush(self, *, end_of_word: bool = False) -> int:
        """Emit the in-flight symbol, if any, and flush the sink."""
        self._written = 0
        self._emit_symbol(None, end_of_word=end_of_word)
        self._flush_sink()
        return self._written

    def _consume(self, text: str) -> None:
        terminators = self.config.terminators
        for position, ch in enumerate(text):
            if ch in terminators:
                self._emit_symbol(position, end_of_word=True)
                self._emit(ch, position)
                continue

            result = self._symbol.add(ch)
            if result.boundary:
                # ch opens the next symbol; an empty symbol always takes it
                self._emit_symbol(position)
                result = self._symbol.add(ch)
            if result.rejected:
                self._fail(result.error, position)

    def _emit_symbol(self, position: Optional[int], *, end_of_word: bool = False) -> None:
        sym = self._symbol
        if sym.is_empty():
            return
        if sym.base is None:
            self._fail(MisplacedAsterisk("asterisk without base letter"), position)
        if end_of_word:
            sym.mark_final()
        text = sym.combining_text() if self.config.combining else sym.precomposed_text()
        sym.reset()
        self._emit(text, position)

    def _emit(self, text: str, position: Optional[int]) -> None:
        try:
            n = self.sink.write(text)
        except OSError as exc:
            raise WriteError(
                f"sink write failed: {exc}", written=self._written, position=position
            ) from exc
        if n is None:
            n = len(text)
        self._written += n
        if n < len(text):
            raise WriteError(
                f"short write: {n} of {len(text)} characters",
                written=self._written,
                position=position,
            )

    def _flush_sink(self) -> None:
        flush = getattr(self.sink, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except OSError as exc:
            raise WriteError(f"sink flush failed: {exc}", written=self._written) from exc

    def _fail(self, error: Optional[BetacodeError], position: Optional[int]) -> None:
        self._symbol.reset()
        where = "at end of input" if position is None else f"at position {position}"
        logger.debug("Rejected Betacode %s: %s", where, error)
        raise WriteError(
            f"{error} {where}", written=self._written, position=position
        ) from error
