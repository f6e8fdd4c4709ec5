# topmark:header:start
#
#   project      : svfmt
#   file         : wrap.py
#   file_relpath : src/svfmt/rendering/wrap.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Wrap planner for bracketed, comma-separated lists.

Protocol: *measure, then commit*. The caller renders every list element into
its own throwaway buffer (see `NodeRenderer.render_fragment`) and hands the
resulting fragments to `WrapPlanner.commit`. The planner then writes either the
single-line candidate or the one-element-per-line form to the real buffer.
Measuring never touches the real buffer, its indentation, or its pending blank
line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svfmt.config.logging import get_logger
from svfmt.constants import DEFAULT_LINE_WIDTH

if TYPE_CHECKING:
    from collections.abc import Sequence

    from svfmt.config.logging import SvfmtLogger
    from svfmt.rendering.buffer import RenderBuffer

logger: SvfmtLogger = get_logger(__name__)


class WrapPlanner:
    """Chooses between the single-line and the multi-line form of a list.

    Args:
        width (int): Width budget in columns; a candidate ending exactly at this
            column still fits.
    """

    def __init__(self, width: int = DEFAULT_LINE_WIDTH) -> None:
        self.width = width

    @staticmethod
    def single_line(fragments: Sequence[str], *, suffix: str = "") -> str:
        """Return the single-line candidate ``(a, b, c)`` followed by ``suffix``."""
        return f"({', '.join(fragments)}){suffix}"

    def fits(self, buffer: RenderBuffer, candidate: str) -> bool:
        """Return True if ``candidate`` fits on the current line of ``buffer``."""
        if "\n" in candidate:
            return False
        return buffer.current_column() + len(candidate) <= self.width

    def commit(self, buffer: RenderBuffer, fragments: Sequence[str], *, suffix: str = "") -> bool:
        """Write the list to ``buffer`` in the form that fits.

        Args:
            buffer (RenderBuffer): The real output buffer.
            fragments (Sequence[str]): Pre-rendered list elements.
            suffix (str): Punctuation written right after the closing parenthesis.

        Returns:
            bool: True if the multi-line form was written.
        """
        candidate: str = self.single_line(fragments, suffix=suffix)
        if self.fits(buffer, candidate):
            logger.debug(
                "List fits at column %d (%d chars)", buffer.current_column(), len(candidate)
            )
            buffer.append_text(candidate)
            return False

        logger.debug(
            "Wrapping list at column %d: %d chars exceed width %d",
            buffer.current_column(),
            len(candidate),
            self.width,
        )
        buffer.append_text("(\n")
        with buffer.indented():
            last: int = len(fragments) - 1
            for index, fragment in enumerate(fragments):
                buffer.append_text(fragment)
                if index != last:
                    buffer.append_char(",")
                buffer.append_char("\n")
        buffer.append_text(f"){suffix}")
        return True
