"""One-shot conversion of an in-memory string.

WHY: Most callers that are not streaming just want a string in and a
string out, without managing an Encoder session.

HOW: Creates an Encoder, writes the whole UTF-8 encoded text once,
flushes, and drains the output.

RULES:
- The single write must report the full input length; anything else
  is a defect and raises IncompleteWriteError
- The result contains only ".", "-" and "/"
"""

from __future__ import annotations

from morsencode.core.encoder import Encoder


class IncompleteWriteError(Exception):
    """Raised when Encoder.write() reports fewer bytes than it was given.

    WHY: Encoder.write() accepts every byte by contract. A short count
    means the encoder is broken and the returned text would be truncated.

    RULES:
    - Carries the expected and reported byte counts
    - Never caught inside the package
    """

    def __init__(self, text: str, expected: int, written: int) -> None:
        self.expected = expected
        self.written = written
        super().__init__(
            "Couldn't encode whole string {!r}: wrote {} of {} bytes".format(
                text, written, expected,
            )
        )


def encode(text: str, punctuation: bool = False, extended: bool = True) -> str:
    """Return the Morse transcoding of ``text``.

    Args:
        text: Any text; unconvertible characters are dropped.
        punctuation: Also encode ITU punctuation marks.
        extended: Also encode extended Latin letters (Ä, Č, Ñ, ...).

    Returns:
        The encoded string, e.g. ``encode("aaa aaa") == ".-/.-/.-//.-/.-/.-"``.
    """
    data = text.encode("utf-8")
    encoder = Encoder(punctuation=punctuation, extended=extended)
    written = encoder.write(data)
    if written != len(data):
        raise IncompleteWriteError(text, len(data), written)
    encoder.flush()

    chunks = []
    while True:
        chunk = encoder.read(4096)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks).decode("ascii")
