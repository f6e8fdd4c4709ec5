# topmark:header:start
#
#   project      : svfmt
#   file         : treesitter.py
#   file_relpath : src/svfmt/syntax/treesitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""tree-sitter adapter.

Loads compiled grammars from their binding wheels, parses source text, and wraps
``tree_sitter.Node`` objects so they satisfy the `SyntaxNode` protocol. The
parser is error tolerant: malformed input still yields a tree, with ``ERROR``
and missing nodes marking the recovery points.
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from functools import cache, cached_property
from typing import TYPE_CHECKING

import tree_sitter

from svfmt.config.logging import get_logger
from svfmt.core.errors import LanguageConfigurationError
from svfmt.syntax.node import NodeKindInfo

if TYPE_CHECKING:
    from collections.abc import Iterator

    from svfmt.config.logging import SvfmtLogger
    from svfmt.syntax.languages import LanguageSpec

logger: SvfmtLogger = get_logger(__name__)


class TreeSitterNode:
    """`SyntaxNode` view over a ``tree_sitter.Node`` and the source bytes it indexes."""

    def __init__(
        self, node: tree_sitter.Node, source: bytes, field_name: str | None = None
    ) -> None:
        self._node = node
        self._source = source
        self._field_name = field_name

    def __repr__(self) -> str:
        return f"TreeSitterNode({self.kind!r}, {self.start_point}-{self.end_point})"

    @property
    def kind_id(self) -> int:
        return self._node.kind_id

    @property
    def kind(self) -> str:
        return self._node.type

    @property
    def is_named(self) -> bool:
        return self._node.is_named

    @property
    def field_name(self) -> str | None:
        return self._field_name

    @property
    def start_point(self) -> tuple[int, int]:
        row, column = self._node.start_point
        return (row, column)

    @property
    def end_point(self) -> tuple[int, int]:
        row, column = self._node.end_point
        return (row, column)

    @cached_property
    def children(self) -> list[TreeSitterNode]:
        return [
            TreeSitterNode(child, self._source, self._node.field_name_for_child(index))
            for index, child in enumerate(self._node.children)
        ]

    @property
    def text(self) -> str:
        return self._source[self._node.start_byte : self._node.end_byte].decode("utf-8")

    @property
    def is_error(self) -> bool:
        return self._node.is_error

    @property
    def is_missing(self) -> bool:
        return self._node.is_missing


@dataclass(frozen=True)
class ParsedTree:
    """Result of one parse: the wrapped root plus what produced it."""

    root: TreeSitterNode
    language: LanguageSpec
    sexp: str


@cache
def load_language(spec: LanguageSpec) -> tree_sitter.Language:
    """Load and cache the compiled grammar for ``spec``.

    Raises:
        LanguageConfigurationError: If the binding module is missing or the grammar
            is incompatible with the installed tree-sitter runtime.
    """
    try:
        module = importlib.import_module(spec.module)
    except ImportError as exc:
        raise LanguageConfigurationError(
            spec.name, f"Grammar module '{spec.module}' is not installed ({exc})."
        ) from exc
    try:
        language = tree_sitter.Language(module.language())
    except (AttributeError, TypeError, ValueError) as exc:
        raise LanguageConfigurationError(spec.name, str(exc)) from exc
    logger.debug("Loaded grammar '%s' from %s", spec.name, spec.module)
    return language


def grammar_metadata(language: tree_sitter.Language) -> Iterator[NodeKindInfo]:
    """Yield id, name and named flag for every node kind the grammar declares."""
    for kind_id in range(language.node_kind_count):
        name: str | None = language.node_kind_for_id(kind_id)
        if name is None:
            continue
        yield NodeKindInfo(kind_id, name, language.node_kind_is_named(kind_id))


def parse(source: str, spec: LanguageSpec) -> ParsedTree:
    """Parse ``source`` with the grammar of ``spec``.

    Raises:
        LanguageConfigurationError: If the grammar cannot be loaded or set.
    """
    language: tree_sitter.Language = load_language(spec)
    try:
        parser = tree_sitter.Parser(language)
    except ValueError as exc:
        raise LanguageConfigurationError(spec.name, str(exc)) from exc

    source_bytes: bytes = source.encode("utf-8")
    tree: tree_sitter.Tree = parser.parse(source_bytes)
    root: tree_sitter.Node = tree.root_node
    logger.debug(
        "Parsed %d bytes as %s (has_error=%s)", len(source_bytes), spec.name, root.has_error
    )
    return ParsedTree(root=TreeSitterNode(root, source_bytes), language=spec, sexp=str(root))
