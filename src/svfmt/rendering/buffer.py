# topmark:header:start
#
#   project      : svfmt
#   file         : buffer.py
#   file_relpath : src/svfmt/rendering/buffer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render buffer: the only mutable state of a render pass.

The buffer accumulates output text and tracks:

- ``column``: characters written since the last line break (indentation included),
- ``indent_level``: current indentation in spaces, changed only by balanced
  `RenderBuffer.push_indent` / `RenderBuffer.pop_indent` calls,
- ``pending_blank_line``: a requested blank line not yet written.

Indentation is written lazily, just before the first non-break character of a
line, so blank lines never carry trailing spaces. A pending blank line is
written immediately before that indentation; it is dropped when the enclosing
scope closes or when nothing follows, so output never starts or ends a scope
with a blank line.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from svfmt.constants import DEFAULT_INDENT_WIDTH

if TYPE_CHECKING:
    from collections.abc import Iterator


class RenderBuffer:
    """Append-only text accumulator with column, indentation and blank-line tracking.

    Args:
        indent_width (int): Spaces added by each `push_indent`.
    """

    def __init__(self, indent_width: int = DEFAULT_INDENT_WIDTH) -> None:
        if indent_width <= 0:
            raise ValueError(f"indent width must be positive, got {indent_width}")
        self.indent_width: int = indent_width
        self.column: int = 0
        self.indent_level: int = 0
        self.pending_blank_line: bool = False
        self._parts: list[str] = []
        self._at_line_start: bool = True
        self._has_content: bool = False

    def __str__(self) -> str:
        return self.getvalue()

    def getvalue(self) -> str:
        """Return everything written so far (a pending blank line is not included)."""
        return "".join(self._parts)

    def append_text(self, text: str) -> None:
        """Append ``text`` character by character."""
        for char in text:
            self.append_char(char)

    def append_char(self, char: str) -> None:
        """Append a single character, emitting deferred indentation and blank lines first."""
        if char == "\n":
            self._parts.append(char)
            self.column = 0
            self._at_line_start = True
            return

        if self._at_line_start:
            if self.pending_blank_line:
                self._parts.append("\n")
                self.pending_blank_line = False
            if self.indent_level:
                self._parts.append(" " * self.indent_level)
                self.column += self.indent_level
            self._at_line_start = False

        self._parts.append(char)
        self.column += 1
        self._has_content = True

    def push_indent(self) -> None:
        """Open an indented scope."""
        self.indent_level += self.indent_width

    def pop_indent(self) -> None:
        """Close the innermost indented scope, discarding any pending blank line.

        Raises:
            ValueError: If there is no open scope.
        """
        if self.indent_level < self.indent_width:
            raise ValueError("pop_indent() without a matching push_indent()")
        self.indent_level -= self.indent_width
        self.pending_blank_line = False

    @contextmanager
    def indented(self) -> Iterator[RenderBuffer]:
        """Context manager form of a `push_indent` / `pop_indent` pair."""
        self.push_indent()
        try:
            yield self
        finally:
            self.pop_indent()

    def request_blank_line(self) -> None:
        """Ask for one blank line before the next content.

        Idempotent: repeated requests still produce at most one blank line.
        Ignored while the buffer holds no content.
        """
        if self._has_content:
            self.pending_blank_line = True

    def ensure_line_break(self) -> None:
        """End the current line unless the buffer is already at the start of one."""
        if not self._at_line_start:
            self.append_char("\n")

    def last_char(self) -> str:
        """Return the last character written ("" while the buffer is empty)."""
        return self._parts[-1][-1] if self._parts else ""

    def current_column(self) -> int:
        """Return the column the next non-break character will be written at."""
        if self._at_line_start:
            return self.indent_level
        return self.column
