"""Streaming text → ITU Morse transcoding engine.

WHY: Morse output depends on word boundaries: codes inside a word are
joined by "/", words by "//" (or "/" when no whitespace separated them).
When text is piped in arbitrary chunks, a chunk boundary says nothing
about a word boundary, so the encoder has to carry enough state across
write() calls to place every separator exactly as if the whole text had
arrived at once.

HOW: Encoder owns an input buffer, an output buffer, a
ConvertibilityPolicy and one EncoderState record. Every write() appends
to the input buffer and immediately drives scan_word() over it until no
complete word is left. Each word is cleaned (uppercased, unconvertible
characters dropped), then its codes and separators are appended to the
output buffer, which read() drains. flush() is the explicit end of a
segment: it forces out the trailing word that write() had to defer.

RULES:
- write() always accepts every byte and never raises
- A word is emitted only once whitespace follows it or flush() is called
- An empty clean word writes nothing and does not count as the first word
- Separator before a word: none for the first word, "//" after
  whitespace, "/" otherwise
- Codes within a word are joined by a single "/"
- An incomplete UTF-8 tail at flush() stays queued for the next write()
- read() never blocks; b"" means nothing is available right now
- Policy flags are fixed at construction
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import List, Optional

from morsencode.core.policy import ConvertibilityPolicy
from morsencode.core.table import (
    LETTER_SEPARATOR,
    SPACED_WORD_SEPARATOR,
    WORD_SEPARATOR,
    code_for,
)
from morsencode.core.tokenizer import scan_word

logger = logging.getLogger(__name__)


@dataclass
class EncoderState:
    """Cross-call state of one encoding session.

    RULES:
    - not_first_word: set once the first non-empty clean word is emitted
    - leading_space: the word being processed followed whitespace
    - trailing_space: the last scan ended on whitespace (provisional
      until more data arrives)
    - scanned: bytes of the deferred word already checked for whitespace,
      so the next write() resumes there instead of rescanning the word
    """

    not_first_word: bool = False
    leading_space: bool = False
    trailing_space: bool = False
    scanned: int = 0


class Encoder:
    """Incremental ITU Morse encoder with a file-like write/read interface.

    Example::

        enc = Encoder(punctuation=True)
        enc.write(b"hello wor")
        enc.write(b"ld")
        enc.flush()
        enc.read()  # b"...././.-../.-../---//.--/---/.-./.-../-.."
    """

    def __init__(self, punctuation: bool = False, extended: bool = True) -> None:
        self.policy = ConvertibilityPolicy(punctuation=punctuation, extended=extended)
        self.state = EncoderState()
        self._in = bytearray()
        self._out = bytearray()
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return "{}(punctuation={!r}, extended={!r})".format(
            type(self).__name__, self.policy.punctuation, self.policy.extended,
        )

    def __enter__(self) -> "Encoder":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def pending(self) -> int:
        """Bytes written but not yet resolved into words."""
        return len(self._in)

    @property
    def available(self) -> int:
        """Encoded bytes ready to be read."""
        return len(self._out)

    def write(self, data: bytes) -> int:
        """Queue ``data`` and encode every word it completes.

        Returns:
            ``len(data)``; the encoder always accepts the whole chunk.
        """
        with self._lock:
            self._in.extend(data)
            self._translate(at_end=False)
        return len(data)

    def flush(self) -> None:
        """Encode the trailing word even though no whitespace followed it.

        The encoder stays writable. Text written afterwards starts a new
        word joined with a single "/" unless it begins with whitespace.
        """
        with self._lock:
            self._translate(at_end=True)

    def close(self) -> None:
        self.flush()

    def read(self, size: Optional[int] = -1) -> bytes:
        """Drain up to ``size`` encoded bytes (all of them when negative or None)."""
        with self._lock:
            if size is None or size < 0 or size >= len(self._out):
                chunk = bytes(self._out)
                self._out.clear()
            else:
                chunk = bytes(self._out[:size])
                del self._out[:size]
        return chunk

    def _translate(self, at_end: bool) -> None:
        pos = 0
        held_back = b""
        while True:
            result = scan_word(
                self._in,
                at_end,
                self.state.trailing_space,
                pos,
                self.state.scanned,
            )
            pos += result.advance
            self.state.leading_space = result.leading_space
            self.state.trailing_space = result.trailing_space
            self.state.scanned = result.scanned
            if result.word is None:
                break
            self._emit(result.word)
            if result.held_back:
                held_back = result.held_back
                break

        del self._in[:pos]
        if held_back:
            logger.debug("Holding back %d byte(s) of an incomplete character", len(held_back))
            self._in[0:0] = held_back

    def _clean_word(self, word: bytes) -> List[str]:
        text = word.decode("utf-8", errors="replace")
        return [
            self.policy.normalize(char)
            for char in text
            if self.policy.is_convertible(char)
        ]

    def _emit(self, word: bytes) -> None:
        clean = self._clean_word(word)
        if not clean:
            logger.debug("Skipping word with no convertible characters: %r", word)
            return

        if self.state.not_first_word:
            if self.state.leading_space:
                self._out.extend(SPACED_WORD_SEPARATOR.encode("ascii"))
            else:
                self._out.extend(WORD_SEPARATOR.encode("ascii"))
        self.state.not_first_word = True

        codes = [code_for(char) for char in clean]
        self._out.extend(LETTER_SEPARATOR.join(codes).encode("ascii"))
        logger.debug("Encoded word %r (%d character(s))", "".join(clean), len(clean))
