# topmark:header:start
#
#   project      : svfmt
#   file         : node.py
#   file_relpath : src/svfmt/syntax/node.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Read-only syntax node protocol consumed by the renderer.

The renderer never touches parser objects directly. Anything that exposes the
attributes below can be formatted: the tree-sitter adapter in
``svfmt.syntax.treesitter`` for real input, and small in-memory trees in tests.

Traversal helpers in this module are iterative so that they do not depend on
the interpreter recursion limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


class NodeKindInfo(NamedTuple):
    """Grammar metadata for one raw node-kind id."""

    kind_id: int
    name: str
    is_named: bool


@runtime_checkable
class SyntaxNode(Protocol):
    """One node of a concrete syntax tree.

    Attributes:
        kind_id: Raw numeric node-kind id assigned by the grammar.
        kind: Grammar name of the node kind (e.g. ``"function_declaration"``).
        is_named: False for anonymous tokens such as keywords and punctuation.
        field_name: Relation to the parent (``None`` when the grammar names none).
        start_point: Zero-based ``(row, column)`` of the first character.
        end_point: Zero-based ``(row, column)`` just past the last character.
        children: Ordered children, anonymous tokens included.
        text: Source text covered by the node.
        is_error: True for parser error-recovery nodes.
        is_missing: True for tokens the parser inserted to recover.
    """

    @property
    def kind_id(self) -> int: ...

    @property
    def kind(self) -> str: ...

    @property
    def is_named(self) -> bool: ...

    @property
    def field_name(self) -> str | None: ...

    @property
    def start_point(self) -> tuple[int, int]: ...

    @property
    def end_point(self) -> tuple[int, int]: ...

    @property
    def children(self) -> Sequence[SyntaxNode]: ...

    @property
    def text(self) -> str: ...

    @property
    def is_error(self) -> bool: ...

    @property
    def is_missing(self) -> bool: ...


def named_children(node: SyntaxNode) -> list[SyntaxNode]:
    """Return the named children of ``node`` in source order."""
    return [child for child in node.children if child.is_named]


def walk(node: SyntaxNode) -> Iterator[tuple[int, SyntaxNode]]:
    """Yield ``(depth, node)`` pairs depth-first, pre-order, using an explicit stack."""
    stack: list[tuple[int, SyntaxNode]] = [(0, node)]
    while stack:
        depth, current = stack.pop()
        yield depth, current
        # Push in reverse so the first child is visited first
        stack.extend((depth + 1, child) for child in reversed(current.children))


def terminals(node: SyntaxNode) -> list[SyntaxNode]:
    """Return every leaf of ``node`` (anonymous tokens included), in source order.

    A node without children is its own single terminal.
    """
    return [leaf for _, leaf in walk(node) if not leaf.children]
