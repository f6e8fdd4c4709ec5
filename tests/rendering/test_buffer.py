# topmark:header:start
#
#   project      : svfmt
#   file         : test_buffer.py
#   file_relpath : tests/rendering/test_buffer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the render buffer: columns, lazy indentation and blank lines."""

from __future__ import annotations

import pytest

from svfmt.rendering.buffer import RenderBuffer
from tests.conftest import mark_rendering


@mark_rendering
def test_column_tracks_characters_since_last_break() -> None:
    buf = RenderBuffer()
    buf.append_text("abc")
    assert buf.column == 3
    buf.append_text("\nde")
    assert buf.column == 2
    assert buf.getvalue() == "abc\nde"


@mark_rendering
def test_indentation_is_emitted_lazily_before_first_character() -> None:
    buf = RenderBuffer()
    buf.append_text("a\n")
    buf.push_indent()
    assert buf.getvalue() == "a\n"
    buf.append_char("\n")
    buf.append_text("b")
    # The empty line carries no trailing whitespace
    assert buf.getvalue() == "a\n\n    b"
    assert buf.column == 5


@mark_rendering
def test_current_column_at_line_start_is_the_indent_level() -> None:
    buf = RenderBuffer(indent_width=2)
    with buf.indented():
        with buf.indented():
            assert buf.current_column() == 4
            buf.append_text("xy")
            assert buf.current_column() == 6


@mark_rendering
def test_blank_line_request_before_any_content_is_ignored() -> None:
    buf = RenderBuffer()
    buf.request_blank_line()
    assert buf.pending_blank_line is False
    buf.append_text("a")
    assert buf.getvalue() == "a"


@mark_rendering
def test_repeated_blank_line_requests_emit_one_blank_line() -> None:
    buf = RenderBuffer()
    buf.append_text("a\n")
    buf.request_blank_line()
    buf.request_blank_line()
    buf.append_text("b\n")
    assert buf.getvalue() == "a\n\nb\n"
    assert buf.pending_blank_line is False


@mark_rendering
def test_blank_line_goes_before_the_indentation() -> None:
    buf = RenderBuffer()
    buf.append_text("a\n")
    buf.request_blank_line()
    with buf.indented():
        buf.append_text("b")
    assert buf.getvalue() == "a\n\n    b"


@mark_rendering
def test_closing_a_scope_discards_the_pending_blank_line() -> None:
    buf = RenderBuffer()
    buf.append_text("a\n")
    buf.push_indent()
    buf.append_text("b\n")
    buf.request_blank_line()
    buf.pop_indent()
    buf.append_text("c\n")
    assert buf.getvalue() == "a\n    b\nc\n"


@mark_rendering
def test_pending_blank_line_is_not_part_of_the_output() -> None:
    buf = RenderBuffer()
    buf.append_text("a\n")
    buf.request_blank_line()
    assert buf.getvalue() == "a\n"


@mark_rendering
def test_pop_without_push_raises() -> None:
    buf = RenderBuffer()
    with pytest.raises(ValueError, match="push_indent"):
        buf.pop_indent()


@mark_rendering
def test_indented_restores_level_on_error() -> None:
    buf = RenderBuffer()
    with pytest.raises(RuntimeError):
        with buf.indented():
            raise RuntimeError("boom")
    assert buf.indent_level == 0


@mark_rendering
def test_ensure_line_break_only_breaks_open_lines() -> None:
    buf = RenderBuffer()
    buf.ensure_line_break()
    assert buf.getvalue() == ""
    buf.append_text("a")
    buf.ensure_line_break()
    buf.ensure_line_break()
    assert buf.getvalue() == "a\n"


@mark_rendering
def test_indent_width_must_be_positive() -> None:
    with pytest.raises(ValueError, match="indent width"):
        RenderBuffer(indent_width=0)
