"""
Tests for pyinireader.ini.cursor module.

Covers the text position bookkeeping:
- consume/tell/available/eof
- CRLF-aware line counting
- literal and regex lookahead
- lookahead tokens for error messages
"""

from __future__ import annotations

import re

import pytest

from pyinireader.ini.consts import END_OF_FILE, UNKNOWN_SOURCE
from pyinireader.ini.cursor import CursorBuffer


class TestConstruction:
    """Tests for building a cursor."""

    def test_rejects_non_string(self):
        with pytest.raises(TypeError):
            CursorBuffer(b"[section]")

    def test_starts_at_beginning(self):
        buf = CursorBuffer("abc")
        assert buf.tell() == 0
        assert buf.available() == 3
        assert buf.line == 1
        assert not buf.eof()
        assert str(buf) == "abc"

    def test_empty_buffer_is_eof(self):
        assert CursorBuffer("").eof()

    def test_source_defaults_to_unknown(self):
        assert CursorBuffer("").source == UNKNOWN_SOURCE

    def test_source_resets_on_empty_name(self):
        buf = CursorBuffer("", "app.ini")
        assert buf.source == "app.ini"
        buf.source = ""
        assert buf.source == UNKNOWN_SOURCE
        buf.source = None
        assert buf.source == UNKNOWN_SOURCE


class TestConsume:
    """Tests for moving text from remaining to consumed."""

    def test_consume_moves_text(self):
        buf = CursorBuffer("hello world")
        buf.consume(6)
        assert buf.consumed == "hello "
        assert buf.remaining == "world"
        assert buf.tell() == 6
        assert buf.available() == 5

    def test_consume_clamps_to_remaining(self):
        buf = CursorBuffer("abc")
        buf.consume(100)
        assert buf.tell() == 3
        assert buf.available() == 0
        assert buf.eof()

    def test_consume_zero_is_noop(self):
        buf = CursorBuffer("a\nb")
        buf.consume(0)
        assert buf.tell() == 0
        assert buf.line == 1

    def test_consume_at_end_is_noop(self):
        buf = CursorBuffer("x")
        buf.consume(1)
        buf.consume(5)
        assert buf.tell() == 1

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            CursorBuffer("abc").consume(-1)

    @pytest.mark.parametrize("count", ["1", 1.0, None, True])
    def test_non_int_count_rejected(self, count):
        with pytest.raises(TypeError):
            CursorBuffer("abc").consume(count)

    def test_halves_always_rebuild_document(self):
        text = "[a]\r\nk = v\n"
        buf = CursorBuffer(text)
        for step in (2, 0, 3, 4, 50):
            buf.consume(step)
            assert buf.consumed + buf.remaining == text


class TestLineCounting:
    """Tests for CRLF-aware line tracking."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("a\nb", 2),
            ("a\rb", 2),
            ("a\r\nb", 2),
            ("a\r\n\r\nb", 3),
            ("a\n\rb", 3),
            ("\r\r\n\n", 4),
            ("no newline", 1),
        ],
    )
    def test_line_after_full_consume(self, text, expected):
        buf = CursorBuffer(text)
        buf.consume(len(text))
        assert buf.line == expected

    def test_crlf_split_across_calls_counts_once(self):
        buf = CursorBuffer("a\r\nb")
        buf.consume(2)
        buf.consume(1)
        buf.consume(1)
        assert buf.line == 2

    def test_char_by_char_matches_bulk(self):
        text = "x\r\ny\rz\n\r\n"
        bulk = CursorBuffer(text)
        bulk.consume(len(text))
        stepped = CursorBuffer(text)
        while not stepped.eof():
            stepped.consume(1)
        assert stepped.line == bulk.line == 5


class TestLookahead:
    """Tests for literal/regex lookahead."""

    def test_can_read_string(self):
        buf = CursorBuffer("[section]")
        assert buf.can_read_string("[")
        assert buf.can_read_string("[sec")
        assert not buf.can_read_string("]")

    def test_can_read_string_non_string(self):
        assert not CursorBuffer("1").can_read_string(1)

    def test_can_read_expression_is_anchored_at_cursor(self):
        buf = CursorBuffer("key = value")
        assert buf.can_read_expression(r"value") is None
        buf.consume(6)
        m = buf.can_read_expression(r"val(ue)")
        assert m is not None
        assert m.group(0) == "value"
        assert m.group(1) == "ue"

    def test_can_read_expression_accepts_compiled(self):
        buf = CursorBuffer("123abc")
        m = buf.can_read_expression(re.compile(r"[0-9]+"))
        assert m.group(0) == "123"

    def test_lookahead_does_not_move(self):
        buf = CursorBuffer("abc")
        buf.can_read_string("a")
        buf.can_read_expression(r"ab")
        assert buf.tell() == 0


class TestNextToken:
    """Tests for the diagnostic lookahead token."""

    def test_end_of_file(self):
        assert CursorBuffer("").next_token() == END_OF_FILE

    def test_token_with_leading_whitespace(self):
        assert CursorBuffer("  foo bar").next_token() == "  foo"

    def test_plain_token(self):
        assert CursorBuffer("]rest more").next_token() == "]rest"

    def test_whitespace_only(self):
        assert CursorBuffer(" \n ").next_token() == ""
