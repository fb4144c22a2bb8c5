"""Convertibility policy: which characters the encoder transcodes.

WHY: Input text contains plenty of characters Morse has no code for.
Those are a normal input class, not an error, so the encoder needs a
cheap predicate to filter them out before lookup.

HOW: The set of eligible characters is composed from the table's
character groups according to two flags, computed on the first
membership test and cached on the instance.

RULES:
- Composition order: letters/digits always, then punctuation, then extended
- Characters are uppercased before the membership test
- An uppercase form longer than one character (e.g. "ß" → "SS") is rejected
- Flags are read-only; the set is computed once and never recomputed
"""

from __future__ import annotations

from typing import FrozenSet, Optional

from morsencode.core.table import EXTENDED_LETTERS, LETTERS_AND_DIGITS, PUNCTUATION


class ConvertibilityPolicy:
    """Membership test for characters eligible for Morse conversion."""

    def __init__(self, punctuation: bool = False, extended: bool = True) -> None:
        self._punctuation = punctuation
        self._extended = extended
        self._convertible: Optional[FrozenSet[str]] = None

    def __repr__(self) -> str:
        return "{}(punctuation={!r}, extended={!r})".format(
            type(self).__name__, self._punctuation, self._extended,
        )

    @property
    def punctuation(self) -> bool:
        return self._punctuation

    @property
    def extended(self) -> bool:
        return self._extended

    @property
    def convertible(self) -> FrozenSet[str]:
        """The eligible character set, computed on first access."""
        if self._convertible is None:
            self._convertible = self._build()
        return self._convertible

    def _build(self) -> FrozenSet[str]:
        chars = LETTERS_AND_DIGITS
        if self._punctuation:
            chars += PUNCTUATION
        if self._extended:
            chars += EXTENDED_LETTERS
        return frozenset(chars)

    @staticmethod
    def normalize(char: str) -> str:
        return char.upper()

    def is_convertible(self, char: str) -> bool:
        """Return True if ``char`` (in any case) has a Morse code under this policy."""
        return self.normalize(char) in self.convertible
