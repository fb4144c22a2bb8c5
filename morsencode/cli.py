"""Command-line interface: stream stdin through the encoder to stdout.

WHY: The typical use is a shell pipeline such as ``echo hello | morsencode``.
Input may be large or arrive slowly, so the CLI streams it through one
Encoder session instead of reading everything first.

HOW: Uses argparse for the flags, reads binary stdin in chunks, writes
each chunk to the Encoder and copies whatever output is ready to binary
stdout. At EOF the encoder is flushed so the last word is not lost, the
rest of the output is copied, and a newline is appended unless -n is
given.

RULES:
- -e/--extended (default on) and -p/--punctuation (default off); both
  defaults can be changed through MORSENCODE_* environment variables
- -n/--no-newline suppresses the trailing newline
- Only Morse output goes to stdout; status and logging go to stderr
- Exit codes: 0 = success, 1 = configuration error, 130 = interrupted
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, List, Optional

from morsencode import __version__
from morsencode.config import (
    load_chunk_size,
    load_extended,
    load_log_level,
    load_punctuation,
)
from morsencode.core.encoder import Encoder

logger = logging.getLogger(__name__)


def _copy_output(encoder: Encoder, stdout: BinaryIO) -> int:
    """Move every ready byte from the encoder to ``stdout``."""
    chunk = encoder.read()
    if chunk:
        stdout.write(chunk)
        stdout.flush()
    return len(chunk)


def stream(
    encoder: Encoder,
    stdin: BinaryIO,
    stdout: BinaryIO,
    chunk_size: int,
    newline: bool = True,
) -> int:
    """Encode ``stdin`` to ``stdout`` chunk by chunk.

    Returns:
        Number of encoded bytes written (excluding the newline).
    """
    total_in = 0
    total_out = 0
    while True:
        chunk = stdin.read(chunk_size)
        if not chunk:
            break
        total_in += encoder.write(chunk)
        total_out += _copy_output(encoder, stdout)

    encoder.flush()
    total_out += _copy_output(encoder, stdout)
    if encoder.pending:
        logger.warning("Dropped %d byte(s) of an incomplete trailing character", encoder.pending)

    if newline:
        stdout.write(b"\n")
        stdout.flush()

    logger.info("Encoded %d input byte(s) into %d output byte(s)", total_in, total_out)
    return total_out


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    RULES:
    - Defaults come from morsencode.config at call time
    - --extended/--punctuation accept --no-* forms
    """
    parser = argparse.ArgumentParser(
        prog="morsencode",
        description="Convert text from standard input to ITU Morse code. "
                    "Letters are separated by '/', words by '//'.",
    )

    parser.add_argument(
        "-e", "--extended",
        action=argparse.BooleanOptionalAction,
        default=load_extended(),
        help="Use extended Morse code for accented Latin letters.",
    )

    parser.add_argument(
        "-p", "--punctuation",
        action=argparse.BooleanOptionalAction,
        default=load_punctuation(),
        help="Convert punctuation characters.",
    )

    parser.add_argument(
        "-n", "--no-newline",
        action="store_true",
        help="Do not append a newline to the output.",
    )

    parser.add_argument(
        "--chunk-size",
        type=int,
        default=None,
        help="Bytes to read from stdin at a time (default: MORSENCODE_CHUNK_SIZE or 4096).",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``morsencode`` and ``python -m morsencode``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else load_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        chunk_size = args.chunk_size if args.chunk_size is not None else load_chunk_size()
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)
    if chunk_size < 1:
        print("Error: --chunk-size must be at least 1", file=sys.stderr)
        sys.exit(1)

    encoder = Encoder(punctuation=args.punctuation, extended=args.extended)
    logger.debug("Starting %r with chunk size %d", encoder, chunk_size)

    try:
        stream(
            encoder,
            sys.stdin.buffer,
            sys.stdout.buffer,
            chunk_size,
            newline=not args.no_newline,
        )
    except KeyboardInterrupt:
        print("\nCancelled by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
