"""
Writer submodule.

Re-exports the streaming Betacode writer and its configuration.
"""

from greek_betacode.writer._stream import DEFAULT_TERMINATORS, Writer, WriterConfig

__all__ = ["DEFAULT_TERMINATORS", "Writer", "WriterConfig"]
