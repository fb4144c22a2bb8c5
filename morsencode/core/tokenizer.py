"""Streaming word tokenizer over a growing UTF-8 byte buffer.

WHY: Text arrives in arbitrary chunks, so a chunk boundary can fall in
the middle of a word or even in the middle of a multi-byte character.
The encoder must not decide where a word ends, or which separator to
write before it, until the bytes that answer those questions exist.

HOW: scan_word() is a pure function. Given the buffer, a read offset,
whether this is the end of the segment, and whether the previous scan
ended on whitespace, it returns one ScanResult describing how many
bytes to consume, the word found (if any), and the updated whitespace
flags. The encoder owns the buffer and carries the flags between calls.

RULES:
- Whitespace is the Unicode White_Space set (str.isspace() without the
  U+001C..U+001F separators), decoded rune by rune
- Leading whitespace is consumed; it (or a carried trailing_space)
  makes leading_space True
- A word terminated by whitespace consumes the delimiter and sets
  trailing_space True
- An unterminated word is only returned when at_end is True; otherwise
  its bytes are left unconsumed for the next write
- At the end of a segment an incomplete trailing UTF-8 sequence is split
  off into held_back, never discarded
- When no word is returned, trailing_space becomes leading_space so the
  next call still knows the buffer ended on whitespace
- A deferred word reports how many of its bytes were already checked;
  passing that back as ``checked`` resumes the scan there, so a long
  word written in many chunks is decoded only once
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass
from typing import Optional, Tuple

REPLACEMENT_CHARACTER = "\ufffd"

# File/group/record/unit separators: str.isspace() accepts them, White_Space does not.
_NON_SPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


@dataclass(frozen=True)
class ScanResult:
    """Outcome of one scan_word() call.

    Attributes:
        advance: Number of bytes consumed, counted from the scan offset.
        word: Raw bytes of the word, or None when no word is ready yet.
        leading_space: The word (or pending word) follows whitespace.
        trailing_space: The scan ended on whitespace; carry into the next call.
        held_back: Incomplete UTF-8 tail split off the word; re-queue it.
        scanned: Bytes of a deferred word already known to hold no
                 whitespace, counted from the new scan position.
    """

    advance: int
    word: Optional[bytes]
    leading_space: bool
    trailing_space: bool
    held_back: bytes = b""
    scanned: int = 0


def is_space(char: str) -> bool:
    return char.isspace() and char not in _NON_SPACE_SEPARATORS


def _sequence_length(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC2 <= lead <= 0xDF:
        return 2
    if 0xE0 <= lead <= 0xEF:
        return 3
    if 0xF0 <= lead <= 0xF4:
        return 4
    return 0


def decode_rune(data: bytes, i: int = 0) -> Tuple[str, int]:
    """Decode the character starting at ``data[i]``.

    Invalid or truncated sequences decode as U+FFFD with width 1, so a
    scan always makes progress.
    """
    length = _sequence_length(data[i])
    if length == 0:
        return REPLACEMENT_CHARACTER, 1
    try:
        return data[i:i + length].decode("utf-8"), length
    except UnicodeDecodeError:
        return REPLACEMENT_CHARACTER, 1


def split_incomplete(data: bytes) -> Tuple[bytes, bytes]:
    """Split ``data`` into complete characters and an incomplete UTF-8 tail.

    Only a valid-but-truncated final sequence counts as incomplete;
    invalid bytes stay in the first part and decode as U+FFFD later.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    decoder.decode(data, final=False)
    broken = decoder.getstate()[0]
    if not broken:
        return data, b""
    cut = len(data) - len(broken)
    return data[:cut], data[cut:]


def scan_word(
    data: bytes,
    at_end: bool = False,
    trailing_space: bool = False,
    offset: int = 0,
    checked: int = 0,
) -> ScanResult:
    """Find the next word in ``data`` starting at ``offset``.

    Args:
        data: The buffered input bytes (bytes or bytearray).
        at_end: No more bytes are expected for this segment, so an
                unterminated word may be returned.
        trailing_space: The previous scan ended on whitespace.
        offset: Position in ``data`` to scan from.
        checked: Bytes after ``offset`` already known to be non-whitespace,
                 i.e. ``scanned`` from the previous deferred result.

    Returns:
        ScanResult; ``advance`` is relative to ``offset``.
    """
    end = len(data)

    start = offset
    while start < end:
        char, width = decode_rune(data, start)
        if not is_space(char):
            break
        start += width

    leading_space = start > offset or trailing_space

    i = max(start, offset + checked)
    while i < end:
        if i + _sequence_length(data[i]) > end:
            # Truncated character; recheck it once the rest arrives.
            break
        char, width = decode_rune(data, i)
        if is_space(char):
            return ScanResult(
                advance=i + width - offset,
                word=bytes(data[start:i]),
                leading_space=leading_space,
                trailing_space=True,
            )
        i += width

    if at_end and end > start:
        word, held_back = split_incomplete(bytes(data[start:]))
        return ScanResult(
            advance=end - offset,
            word=word,
            leading_space=leading_space,
            trailing_space=False,
            held_back=held_back,
        )

    # Nothing resolvable yet: keep the unterminated word for the next call.
    return ScanResult(
        advance=start - offset,
        word=None,
        leading_space=leading_space,
        trailing_space=leading_space,
        scanned=i - start,
    )
