# topmark:header:start
#
#   project      : svfmt
#   file         : dump.py
#   file_relpath : src/svfmt/rendering/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic dump of a syntax tree, one line per node."""

from __future__ import annotations

from typing import TYPE_CHECKING

from svfmt.syntax.node import walk

if TYPE_CHECKING:
    from collections.abc import Iterator

    from svfmt.syntax.node import SyntaxNode

DUMP_INDENT: str = "    "


def dump_lines(root: SyntaxNode) -> Iterator[str]:
    """Yield the dump lines of ``root`` in pre-order.

    Each line is indented four spaces per depth and holds the node kind (or
    ``anonymous`` for unnamed tokens), the field name in parentheses when the
    parent names one, and ``: text`` for leaves.
    """
    for depth, node in walk(root):
        label: str = node.kind if node.is_named else "anonymous"
        line: str = f"{DUMP_INDENT * depth}{label}"
        if node.field_name:
            line += f"({node.field_name})"
        if not node.children:
            line += f": {node.text}"
        yield line
