"""ITU Morse code lookup table.

WHY: The encoder needs a fixed mapping from each convertible character to
its dot/dash sequence. Keeping the data in one module, separate from the
streaming logic, means the table can be reviewed against the ITU
recommendation without reading any state-machine code.

HOW: ITU_CODES is a read-only mapping (MappingProxyType) built from three
plain dicts (letters and digits, punctuation, extended Latin letters).
code_for() is the single lookup entry point used by the encoder.

RULES:
- Keys are single uppercase characters; values use only "." and "-"
- Every character the ConvertibilityPolicy can accept has an entry
- Extended letters that share a code (e.g. Ä/Æ/Ą) map to the same string
- code_for() on a missing key is a programming defect, not bad input
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping

DOT = "."
DASH = "-"

LETTER_SEPARATOR = "/"
"""Written between two codes of the same word."""

WORD_SEPARATOR = "/"
"""Written between words that were adjacent without whitespace."""

SPACED_WORD_SEPARATOR = "//"
"""Written between words separated by whitespace in the source text."""

_LETTERS_AND_DIGITS: Dict[str, str] = {
    "A": ".-",
    "B": "-...",
    "C": "-.-.",
    "D": "-..",
    "E": ".",
    "F": "..-.",
    "G": "--.",
    "H": "....",
    "I": "..",
    "J": ".---",
    "K": "-.-",
    "L": ".-..",
    "M": "--",
    "N": "-.",
    "O": "---",
    "P": ".--.",
    "Q": "--.-",
    "R": ".-.",
    "S": "...",
    "T": "-",
    "U": "..-",
    "V": "...-",
    "W": ".--",
    "X": "-..-",
    "Y": "-.--",
    "Z": "--..",
    "0": "-----",
    "1": ".----",
    "2": "..---",
    "3": "...--",
    "4": "....-",
    "5": ".....",
    "6": "-....",
    "7": "--...",
    "8": "---..",
    "9": "----.",
}

_PUNCTUATION: Dict[str, str] = {
    ".": ".-.-.-",
    ",": "--..--",
    "?": "..--..",
    "'": ".----.",
    "!": "-.-.--",
    "/": "-..-.",
    "(": "-.--.",
    ")": "-.--.-",
    "&": ".-...",
    ":": "---...",
    ";": "-.-.-.",
    "=": "-...-",
    "+": ".-.-.",
    "-": "-....-",
    "_": "..--.-",
    '"': ".-..-.",
    "$": "...-..-",
    "@": ".--.-.",
}

_EXTENDED: Dict[str, str] = {
    "À": ".--.-",
    "Å": ".--.-",
    "Ä": ".-.-",
    "Æ": ".-.-",
    "Ą": ".-.-",
    "Ć": "-.-..",
    "Ç": "-.-..",
    "Ĉ": "-.-..",
    "Č": "-.-..",
    "Ĥ": "----",
    "Š": "----",
    "Đ": "..-..",
    "É": "..-..",
    "Ę": "..-..",
    "Ĵ": ".---.",
    "Ł": ".-..-",
    "È": ".-..-",
    "Ń": "--.--",
    "Ñ": "--.--",
    "Ó": "---.",
    "Ö": "---.",
    "Ø": "---.",
    "Ś": "...-...",
    "Ŝ": "...-.",
    "Ü": "..--",
    "Ŭ": "..--",
    "Ź": "--..-.",
    "Ž": "--..-",
}

LETTERS_AND_DIGITS = "".join(_LETTERS_AND_DIGITS)
PUNCTUATION = "".join(_PUNCTUATION)
EXTENDED_LETTERS = "".join(_EXTENDED)

ITU_CODES: Mapping[str, str] = MappingProxyType(
    {**_LETTERS_AND_DIGITS, **_PUNCTUATION, **_EXTENDED}
)


class UnconvertibleCharacterError(Exception):
    """Raised when a code is requested for a character with no table entry.

    WHY: The encoder filters every character through the
    ConvertibilityPolicy before looking it up. Reaching a missing key
    means the policy and the table disagree, and silently emitting
    nothing would corrupt the output.

    HOW: Raised by code_for(); never caught inside the package.

    RULES:
    - Indicates a defect, never malformed user input
    - Message names the offending character
    """

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__("{!r} should be convertible".format(char))


def code_for(char: str) -> str:
    """Return the Morse code for an already-normalized character.

    Raises:
        UnconvertibleCharacterError: the character has no ITU entry.
    """
    try:
        return ITU_CODES[char]
    except KeyError:
        raise UnconvertibleCharacterError(char) from None
