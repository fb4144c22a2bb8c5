"""morsencode: streaming text to ITU Morse code converter.

WHY: Piped text arrives in arbitrarily small chunks. Converting it to
Morse code needs word boundaries, and a chunk boundary is not a word
boundary. This package encodes incrementally while producing exactly the
output a single whole-text conversion would.

HOW: core.encoder.Encoder accepts bytes through write(), resolves
complete words with core.tokenizer, filters characters through
core.policy and looks codes up in core.table. encode() wraps one
session for in-memory strings; cli.py wires stdin to stdout.

RULES:
- Output alphabet: ".", "-", "/" (letter or joined-word separator), "//"
- Unconvertible characters are dropped silently
- Decoding Morse and generating audio are out of scope
"""

from morsencode.core.encoder import Encoder
from morsencode.encode import encode

__version__ = "0.1.0"

__all__ = ["Encoder", "encode", "__version__"]
