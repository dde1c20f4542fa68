"""Shared fixtures for greek-betacode tests."""

import io

import pytest

from greek_betacode.symbol import Symbol
from greek_betacode.writer import Writer, WriterConfig


@pytest.fixture
def symbol() -> Symbol:
    """Return a fresh, empty symbol."""
    return Symbol()


@pytest.fixture
def sink() -> io.StringIO:
    """Return an in-memory text sink."""
    return io.StringIO()


@pytest.fixture
def writer(sink: io.StringIO) -> Writer:
    """Return a precomposed-output writer with default terminators."""
    return Writer(sink)


@pytest.fixture
def combining_writer(sink: io.StringIO) -> Writer:
    """Return a combining-output writer with default terminators."""
    return Writer(sink, WriterConfig(combining=True))


class ListSink:
    """Sink whose write() returns None, like many file-like adapters."""

    def __init__(self) -> None:
        self.chunks: list[str] = []
        self.flushes = 0

    def write(self, text: str) -> None:
        self.chunks.append(text)

    def flush(self) -> None:
        self.flushes += 1


@pytest.fixture
def list_sink() -> ListSink:
    return ListSink()
