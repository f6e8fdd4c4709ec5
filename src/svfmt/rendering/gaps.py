# topmark:header:start
#
#   project      : svfmt
#   file         : gaps.py
#   file_relpath : src/svfmt/rendering/gaps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Gap policy: blank lines between sibling statements and comments.

Author blank lines are kept but normalized: any number of fully blank source
lines between two items becomes exactly one blank output line, and none stays
none. Only statement-like siblings count as the "previous" item, so the first
item after a header never gets a blank line in front of it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from svfmt.grammar.kinds import Kind

if TYPE_CHECKING:
    from collections.abc import Sequence

    from svfmt.grammar.classifier import SymbolClassifier
    from svfmt.syntax.node import SyntaxNode

#: Kinds that take part in blank-line normalization.
GAP_KINDS: frozenset[Kind] = frozenset({Kind.STATEMENT, Kind.DECLARATION, Kind.COMMENT})


def source_blank_lines(previous: SyntaxNode, node: SyntaxNode) -> int:
    """Return the number of fully blank source lines between ``previous`` and ``node``."""
    row_gap: int = node.start_point[0] - previous.end_point[0]
    if row_gap <= 0:
        return 0
    return row_gap - 1


def blank_lines_between(previous: SyntaxNode | None, node: SyntaxNode) -> int:
    """Return how many blank output lines (0 or 1) separate ``node`` from ``previous``."""
    if previous is None:
        return 0
    return 1 if source_blank_lines(previous, node) > 0 else 0


class GapPolicy:
    """Sibling-aware gap computation bound to a classifier."""

    def __init__(self, classifier: SymbolClassifier) -> None:
        self._classifier = classifier

    def previous_item(self, siblings: Sequence[SyntaxNode], index: int) -> SyntaxNode | None:
        """Return the nearest sibling before ``index`` whose kind is in `GAP_KINDS`."""
        for candidate in reversed(siblings[:index]):
            if self._classifier.kind_of(candidate.kind_id) in GAP_KINDS:
                return candidate
        return None

    def blank_lines_before(self, siblings: Sequence[SyntaxNode], index: int) -> int:
        """Return the blank output lines (0 or 1) to place before ``siblings[index]``."""
        return blank_lines_between(self.previous_item(siblings, index), siblings[index])
