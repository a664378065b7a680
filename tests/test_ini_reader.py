"""Tests for the INI key/value reader (infra/ini_reader.py).

Coverage:
* Comments, blank lines and whitespace handling.
* Separator position rules and syntax errors.
* Key overflow.
* Continuation lines: joining, termination and capacity.
* Unread values are skipped, continuation lines included.
* ``pairs`` iteration and stream ownership.
"""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest

from tinyflags.exceptions import IniOverflowError, IniSyntaxError
from tinyflags.infra.ini_reader import IniReader


def _reader(text: str) -> IniReader:
    return IniReader.from_stream(io.StringIO(text), name="test.ini")


def _pairs(text: str) -> list[tuple[str, str | None]]:
    return [(pair.key, pair.value) for pair in _reader(text).pairs()]


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------

class TestReadKey:
    def test_simple_pair(self) -> None:
        assert _pairs("port = 8080\n") == [("port", "8080")]

    def test_only_comments_and_blanks_yield_nothing(self) -> None:
        text = "; comment\n# another\n\n   \n    ; indented comment\n"
        assert _pairs(text) == []

    def test_key_right_trimmed_value_left_trimmed(self) -> None:
        assert _pairs("  name\t =   hello world   \n") == [("name", "hello world")]

    def test_value_may_contain_separator(self) -> None:
        assert _pairs("url = a=b\n") == [("url", "a=b")]

    def test_separator_at_index_two(self) -> None:
        assert _pairs("ab=c\n") == [("ab", "c")]

    @pytest.mark.parametrize("line", ["a=b", "=value", "no separator"])
    def test_syntax_error(self, line: str) -> None:
        reader = _reader(f"# header\n{line}\n")
        with pytest.raises(IniSyntaxError) as exc_info:
            reader.read_key()
        assert exc_info.value.lineno == 2

    def test_key_overflow(self) -> None:
        reader = _reader("toolong = 1\nok = 2\n")
        with pytest.raises(IniOverflowError) as exc_info:
            reader.read_key(capacity=4)
        assert exc_info.value.key == "tool"
        assert reader.read_key(capacity=4) == "ok"
        assert reader.read_value() == "2"

    def test_key_at_capacity_is_accepted(self) -> None:
        assert _reader("abcd = 1\n").read_key(capacity=4) == "abcd"

    def test_eof_returns_none(self) -> None:
        reader = _reader("")
        assert reader.read_key() is None


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------

class TestReadValue:
    def test_missing_value(self) -> None:
        assert _pairs("name =\n") == [("name", None)]

    def test_whitespace_only_value_is_missing(self) -> None:
        assert _pairs("name =    \n") == [("name", None)]

    def test_value_capped_to_capacity(self) -> None:
        reader = _reader("name = abcdef\n")
        reader.read_key()
        assert reader.read_value(capacity=3) == "abc"

    def test_continuation_joined_with_one_space(self) -> None:
        assert _pairs("key = part1 \\\npart2\n") == [("key", "part1 part2")]

    def test_continuation_over_several_lines(self) -> None:
        text = "key = a \\\n   b\\\n\tc\nnext = 1\n"
        assert _pairs(text) == [("key", "a b c"), ("next", "1")]

    def test_continuation_ended_by_blank_line(self) -> None:
        text = "key = a \\\n\nnext = 1\n"
        assert _pairs(text) == [("key", "a"), ("next", "1")]

    def test_continuation_at_end_of_file(self) -> None:
        assert _pairs("key = a \\") == [("key", "a")]

    def test_continuation_capacity_exhausted(self) -> None:
        reader = _reader("key = aaaa \\\nbbbb \\\ncccc\nnext = 1\n")
        reader.read_key()
        assert reader.read_value(capacity=8) == "aaaa bbb"
        assert reader.read_key() == "next"

    def test_unread_value_skipped(self) -> None:
        reader = _reader("first = x \\\ny\nsecond = 2\n")
        assert reader.read_key() == "first"
        assert reader.read_key() == "second"
        assert reader.read_value() == "2"


# ---------------------------------------------------------------------------
# Iteration and ownership
# ---------------------------------------------------------------------------

class TestPairs:
    def test_line_numbers(self) -> None:
        text = "# c\none = 1\n\ntwo = a \\\nb\nthree = 3\n"
        pairs = list(_reader(text).pairs())
        assert [(p.key, p.lineno) for p in pairs] == [("one", 2), ("two", 4), ("three", 6)]

    def test_name(self) -> None:
        assert _reader("").name == "test.ini"


class TestOwnership:
    def test_opened_file_closed_on_exit(self, write_ini: Callable[..., str]) -> None:
        path = write_ini("a1 = 1\n")
        with IniReader.open(path) as reader:
            assert [p.key for p in reader.pairs()] == ["a1"]
        assert reader._scanner._stream.closed

    def test_opened_file_closed_after_error(self, write_ini: Callable[..., str]) -> None:
        path = write_ini("broken\n")
        with pytest.raises(IniSyntaxError):
            with IniReader.open(path) as reader:
                reader.read_key()
        assert reader._scanner._stream.closed

    def test_stream_never_closed(self) -> None:
        stream = io.StringIO("a1 = 1\n")
        with IniReader.from_stream(stream) as reader:
            list(reader.pairs())
        assert not stream.closed
