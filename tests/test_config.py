"""Unit tests for environment-backed configuration defaults.

WHY: CLI defaults can be changed through MORSENCODE_* variables. A
malformed value must fail loudly and an unset one must fall back to the
documented default.

HOW: Uses the clean_env fixture (monkeypatch) to set and unset
variables, then calls the loader functions directly.
"""

import logging

import pytest

from morsencode.config import (
    DEFAULT_CHUNK_SIZE,
    load_chunk_size,
    load_extended,
    load_log_level,
    load_punctuation,
    parse_bool,
)


class TestParseBool:

    @pytest.mark.parametrize("value", ["1", "true", "TRUE", "yes", "On", " true "])
    def test_true_values(self, value):
        assert parse_bool(value, False) is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", "maybe"])
    def test_false_values(self, value):
        assert parse_bool(value, True) is False

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_unset_uses_default(self, value):
        assert parse_bool(value, True) is True
        assert parse_bool(value, False) is False


class TestPolicyDefaults:

    def test_defaults(self, clean_env):
        assert load_extended() is True
        assert load_punctuation() is False

    def test_overrides(self, clean_env):
        clean_env.setenv("MORSENCODE_EXTENDED", "false")
        clean_env.setenv("MORSENCODE_PUNCTUATION", "1")
        assert load_extended() is False
        assert load_punctuation() is True


class TestChunkSize:

    def test_default(self, clean_env):
        assert load_chunk_size() == DEFAULT_CHUNK_SIZE

    def test_override(self, clean_env):
        clean_env.setenv("MORSENCODE_CHUNK_SIZE", "16")
        assert load_chunk_size() == 16

    def test_not_an_integer(self, clean_env):
        clean_env.setenv("MORSENCODE_CHUNK_SIZE", "lots")
        with pytest.raises(ValueError, match="must be an integer"):
            load_chunk_size()

    def test_below_one(self, clean_env):
        clean_env.setenv("MORSENCODE_CHUNK_SIZE", "0")
        with pytest.raises(ValueError, match="at least 1"):
            load_chunk_size()


class TestLogLevel:

    def test_default(self, clean_env):
        assert load_log_level() == logging.WARNING

    def test_named_level(self, clean_env):
        clean_env.setenv("MORSENCODE_LOG_LEVEL", "debug")
        assert load_log_level() == logging.DEBUG

    def test_unknown_level_falls_back(self, clean_env):
        clean_env.setenv("MORSENCODE_LOG_LEVEL", "chatty")
        assert load_log_level() == logging.WARNING
