"""Tests for the command-line interface.

WHY: The CLI is how the encoder is used in shell pipelines. It must
stream stdin in chunks without changing the result, flush the last
word at EOF, and keep stdout free of anything but Morse output.

HOW: stream() is tested directly with BytesIO streams. main() is run
with sys.stdin/sys.stdout replaced by text wrappers around BytesIO so
the binary ``.buffer`` path is exercised end to end.

RULES:
- Environment defaults are isolated with the clean_env fixture
- Expected output always ends with "\\n" unless -n is passed
"""

import io
import sys

import pytest

from morsencode.cli import build_parser, main, stream
from morsencode.core.encoder import Encoder
from morsencode.encode import encode


def _run_main(monkeypatch, data: bytes, argv):
    stdin = io.TextIOWrapper(io.BytesIO(data))
    stdout = io.TextIOWrapper(io.BytesIO())
    monkeypatch.setattr(sys, "stdin", stdin)
    monkeypatch.setattr(sys, "stdout", stdout)
    main(argv)
    return stdout.buffer.getvalue()


class TestParser:

    def test_defaults(self, clean_env):
        args = build_parser().parse_args([])
        assert args.extended is True
        assert args.punctuation is False
        assert args.no_newline is False
        assert args.chunk_size is None
        assert args.verbose is False

    def test_short_flags(self, clean_env):
        args = build_parser().parse_args(["-p", "-n", "-v"])
        assert args.punctuation is True
        assert args.no_newline is True
        assert args.verbose is True

    def test_negated_flags(self, clean_env):
        args = build_parser().parse_args(["--no-extended", "--no-punctuation"])
        assert args.extended is False
        assert args.punctuation is False

    def test_environment_defaults(self, clean_env):
        clean_env.setenv("MORSENCODE_PUNCTUATION", "true")
        clean_env.setenv("MORSENCODE_EXTENDED", "false")
        args = build_parser().parse_args([])
        assert args.punctuation is True
        assert args.extended is False

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "morsencode" in capsys.readouterr().out


class TestStream:

    @pytest.mark.parametrize("chunk_size", [1, 2, 3, 7, 4096])
    def test_chunk_size_does_not_change_output(self, chunk_size):
        text = "čač bcčdef ghi"
        stdout = io.BytesIO()
        stream(Encoder(), io.BytesIO(text.encode("utf-8")), stdout, chunk_size)
        assert stdout.getvalue() == encode(text).encode("ascii") + b"\n"

    def test_without_newline(self):
        stdout = io.BytesIO()
        stream(Encoder(), io.BytesIO(b"sos"), stdout, 4096, newline=False)
        assert stdout.getvalue() == b".../---/..."

    def test_returns_encoded_byte_count(self):
        count = stream(Encoder(), io.BytesIO(b"e e"), io.BytesIO(), 1)
        assert count == len(b".//.")

    def test_empty_input(self):
        stdout = io.BytesIO()
        stream(Encoder(), io.BytesIO(b""), stdout, 4096)
        assert stdout.getvalue() == b"\n"

    def test_incomplete_trailing_character_is_logged(self, caplog):
        stream(Encoder(), io.BytesIO(b"a\xc4"), io.BytesIO(), 4096)
        assert "incomplete trailing character" in caplog.text


class TestMain:

    def test_default_run(self, monkeypatch, clean_env):
        assert _run_main(monkeypatch, b"sos\n", []) == b".../---/...\n"

    def test_success_returns_none(self, monkeypatch, clean_env):
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"e")))
        monkeypatch.setattr(sys, "stdout", io.TextIOWrapper(io.BytesIO()))
        assert main([]) is None

    def test_no_newline(self, monkeypatch, clean_env):
        assert _run_main(monkeypatch, b"sos", ["-n"]) == b".../---/..."

    def test_punctuation(self, monkeypatch, clean_env):
        assert _run_main(monkeypatch, b"Hi!", ["-p"]) == b"..../../-.-.--\n"

    def test_no_extended(self, monkeypatch, clean_env):
        assert _run_main(monkeypatch, "čač".encode("utf-8"), ["--no-extended"]) == b".-\n"

    def test_small_chunks(self, monkeypatch, clean_env):
        data = "Encode this into Morse code.".encode("utf-8")
        out = _run_main(monkeypatch, data, ["--chunk-size", "1"])
        assert out == encode("Encode this into Morse code.").encode("ascii") + b"\n"

    def test_invalid_chunk_size(self, monkeypatch, clean_env):
        with pytest.raises(SystemExit) as exc_info:
            _run_main(monkeypatch, b"sos", ["--chunk-size", "0"])
        assert exc_info.value.code == 1

    def test_invalid_chunk_size_from_env(self, monkeypatch, clean_env):
        clean_env.setenv("MORSENCODE_CHUNK_SIZE", "many")
        with pytest.raises(SystemExit) as exc_info:
            _run_main(monkeypatch, b"sos", [])
        assert exc_info.value.code == 1
