# topmark:header:start
#
#   project      : svfmt
#   file         : diff.py
#   file_relpath : src/svfmt/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unified diff generation and colorized rendering.

Used by ``svfmt format --diff`` to show what formatting would change without
touching the file.
"""

from __future__ import annotations

import difflib
from typing import Sequence

from yachalk import chalk

from svfmt.config.logging import get_logger

logger = get_logger(__name__)


def make_patch(current: str, updated: str, *, name: str) -> list[str]:
    """Return the unified diff lines between ``current`` and ``updated``.

    An empty list means the texts are identical.
    """
    patch_lines: list[str] = list(
        difflib.unified_diff(
            current.splitlines(keepends=True),
            updated.splitlines(keepends=True),
            fromfile=f"{name} (current)",
            tofile=f"{name} (formatted)",
            n=3,
        )
    )
    logger.trace("Patch for %s: %d lines", name, len(patch_lines))
    return patch_lines


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a list/sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    if isinstance(patch, str):
        lines: list[str] = patch.splitlines(keepends=False)
    else:
        lines = [line.rstrip("\n") for line in patch]

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        if not line:
            return content
        match line[0]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return content

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
