"""Tests for the token prompt."""

from __future__ import annotations

import io

import pytest

from movecli.auth.prompt import RETRY_MESSAGE, read_token
from movecli.exceptions import InputError
from movecli.exit_codes import EXIT_INPUT_ERROR


class _BrokenStream(io.StringIO):
    def readline(self, size: int = -1) -> str:  # type: ignore[override]
        raise OSError(5, "Input/output error")


class TestReadToken:
    def test_strips_newline(self) -> None:
        assert read_token(io.StringIO("test_token\n")) == "test_token"

    def test_strips_crlf(self) -> None:
        assert read_token(io.StringIO("test_token\r\n")) == "test_token"

    def test_accepts_last_line_without_newline(self) -> None:
        assert read_token(io.StringIO("test_token")) == "test_token"

    def test_strips_only_one_line_terminator(self) -> None:
        assert read_token(io.StringIO("  tok en \t\n")) == "  tok en \t"

    def test_crlf_only_line_is_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert read_token(io.StringIO("\r\nsecond\n")) == "second"
        assert capsys.readouterr().out == f"{RETRY_MESSAGE}\n"

    def test_retries_until_non_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        token = read_token(io.StringIO("\n\n\nfinally\n"))

        assert token == "finally"
        assert capsys.readouterr().out.count(RETRY_MESSAGE) == 3

    def test_reads_only_one_token_line(self) -> None:
        stream = io.StringIO("first\nsecond\n")

        assert read_token(stream) == "first"
        assert stream.readline() == "second\n"

    def test_defaults_to_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("from_stdin\n"))
        assert read_token() == "from_stdin"

    def test_end_of_input(self) -> None:
        with pytest.raises(InputError) as exc_info:
            read_token(io.StringIO(""))

        assert str(exc_info.value) == "Error reading file: unexpected end of input"
        assert exc_info.value.exit_code == EXIT_INPUT_ERROR

    def test_end_of_input_after_blank_lines(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(InputError, match="Error reading file"):
            read_token(io.StringIO("\n\n"))
        assert capsys.readouterr().out.count(RETRY_MESSAGE) == 2

    def test_read_error_is_not_retried(self) -> None:
        with pytest.raises(InputError) as exc_info:
            read_token(_BrokenStream())

        assert str(exc_info.value).startswith("Error reading file: ")
        assert "Input/output error" in str(exc_info.value)
