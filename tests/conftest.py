"""Shared test fixtures for the morsencode test suite.

WHY: Engine, one-shot and CLI tests all need to push text through a
fresh Encoder in arbitrary chunks and compare the result. Centralizing
that helper keeps every test module using the same write/flush/read
sequence.

HOW: The ``feed`` fixture writes a list of byte chunks to a new
Encoder, flushes it and returns the decoded output. The ``clean_env``
fixture removes MORSENCODE_* variables so config defaults are tested
in isolation.

RULES:
- Expected strings use "." for dot and "-" for dash
- ``feed`` asserts that every write accepts the whole chunk
"""

from typing import Callable, Iterable

import pytest

from morsencode.core.encoder import Encoder

_ENV_VARS = (
    "MORSENCODE_EXTENDED",
    "MORSENCODE_PUNCTUATION",
    "MORSENCODE_CHUNK_SIZE",
    "MORSENCODE_LOG_LEVEL",
)


@pytest.fixture
def feed() -> Callable[..., str]:
    """Write chunks to a fresh Encoder, flush, and return the output."""

    def _feed(chunks: Iterable[bytes], **policy) -> str:
        encoder = Encoder(**policy)
        for chunk in chunks:
            assert encoder.write(chunk) == len(chunk)
        encoder.flush()
        return encoder.read().decode("ascii")

    return _feed


@pytest.fixture
def clean_env(monkeypatch):
    """Unset every MORSENCODE_* variable for the duration of a test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
