"""CLI entrypoint for greek-betacode.

Usage:
  greek-betacode [--combining] [--relaxed] [FILE ...]
  echo "mh=nin a)ei/de" | python -m greek_betacode
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, List, TextIO

from ._errors import WriteError
from .writer import DEFAULT_TERMINATORS, Writer, WriterConfig

logger = logging.getLogger(__name__)


def convert_stream(
    lines: Iterable[str], writer: Writer, name: str, *, final_sigma: bool
) -> None:
    """Stream lines through writer; symbols may continue across line chunks.

    Raises WriteError with a ``file:line:column:`` prefix on bad input.
    """
    lineno = 0
    for lineno, line in enumerate(lines, start=1):
        try:
            writer.feed(line)
        except WriteError as e:
            column = "" if e.position is None else f"{e.position + 1}:"
            raise WriteError(
                f"{name}:{lineno}:{column} {e}", written=e.written, position=e.position
            ) from e
    try:
        writer.flush(end_of_word=final_sigma)
    except WriteError as e:
        raise WriteError(f"{name}:{lineno}: {e}", written=e.written) from e


def _open_inputs(paths: List[str]) -> Iterable[tuple[str, TextIO]]:
    if not paths:
        yield "<stdin>", sys.stdin
        return
    for p in paths:
        if p == "-":
            yield "<stdin>", sys.stdin
            continue
        with Path(p).open("r", encoding="utf-8") as f:
            yield p, f


def cmd_convert(args: argparse.Namespace) -> int:
    terminators = DEFAULT_TERMINATORS
    if args.terminators is not None:
        terminators = frozenset(args.terminators)
    config = WriterConfig(
        combining=args.combining,
        terminators=terminators,
        standard_asterisk=not args.relaxed,
    )
    writer = Writer(sys.stdout, config)

    try:
        for name, stream in _open_inputs(args.files):
            logger.debug("Converting %s", name)
            convert_stream(stream, writer, name, final_sigma=not args.keep_final_sigma)
    except (WriteError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="greek-betacode",
        description="Convert Betacode (relaxed or standard) to Unicode Greek",
    )
    p.add_argument("files", nargs="*", help="Input files (default: stdin; '-' reads stdin)")
    p.add_argument(
        "--combining",
        action="store_true",
        help="Emit base letters followed by combining diacritics instead of precomposed (NFC)",
    )
    p.add_argument(
        "--relaxed",
        action="store_true",
        help="Relaxed Betacode only: treat '*' as an invalid character",
    )
    p.add_argument(
        "--terminators",
        help="Characters that end a word and pass through unchanged (replaces the default set)",
    )
    p.add_argument(
        "--keep-final-sigma",
        action="store_true",
        help="Do not turn a sigma at the very end of input into final sigma",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug messages to stderr")
    p.set_defaults(func=cmd_convert)
    return p


def main(argv: List[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
