# topmark:header:start
#
#   project      : svfmt
#   file         : api.py
#   file_relpath : src/svfmt/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry points of the formatter.

Each call owns exactly one `RenderBuffer`. The formatted text is written to the
sink in a single write after the whole tree has rendered, so a failing call
leaves the sink untouched.

Examples:
    Formatting source text with the installed SystemVerilog grammar:

    >>> from svfmt import format_source
    >>> format_source("function int f ( ) ;\\nendfunction\\n")  # doctest: +SKIP
    'function int f();\\nendfunction\\n'
"""

from __future__ import annotations

import io
from functools import cache
from typing import TYPE_CHECKING, TextIO

from svfmt.config.logging import get_logger
from svfmt.config.model import MutableConfig
from svfmt.config.types import ErrorNodePolicy
from svfmt.core.errors import IoFailure
from svfmt.grammar.classifier import SymbolClassifier, load_kind_table
from svfmt.rendering.buffer import RenderBuffer
from svfmt.rendering.dump import dump_lines
from svfmt.rendering.renderer import NodeRenderer
from svfmt.syntax.languages import LanguageSpec, get_language
from svfmt.syntax.node import walk
from svfmt.syntax.treesitter import grammar_metadata, load_language, parse

if TYPE_CHECKING:
    from svfmt.config.logging import SvfmtLogger
    from svfmt.config.model import Config
    from svfmt.syntax.node import SyntaxNode
    from svfmt.syntax.treesitter import ParsedTree

logger: SvfmtLogger = get_logger(__name__)


@cache
def classifier_for(spec: LanguageSpec) -> SymbolClassifier:
    """Return the (cached) classifier generated for a language's grammar.

    Raises:
        LanguageConfigurationError: If the grammar or its kind table cannot be loaded.
    """
    language = load_language(spec)
    table = load_kind_table(spec.table_name)
    return SymbolClassifier.from_metadata(grammar_metadata(language), table)


def first_syntax_error(root: SyntaxNode) -> SyntaxNode | None:
    """Return the first error-recovery node of the tree in pre-order, if any."""
    for _, node in walk(root):
        if node.is_error or node.is_missing:
            return node
    return None


def render_to_string(root: SyntaxNode, classifier: SymbolClassifier, config: Config) -> str:
    """Render ``root`` into a fresh buffer and return the text.

    Raises:
        StructuralMismatch: If a rule rejects the tree, the tree holds a syntax
            error under `ErrorNodePolicy.FAIL`, or the tree is too deep to render.
    """
    if config.error_nodes is ErrorNodePolicy.FAIL:
        bad: SyntaxNode | None = first_syntax_error(root)
        if bad is not None:
            raise NodeRenderer.mismatch(bad, "is a syntax error in the source")

    renderer = NodeRenderer(
        classifier,
        line_width=config.line_width,
        indent_width=config.indent_width,
        error_nodes=config.error_nodes,
    )
    buffer = RenderBuffer(indent_width=config.indent_width)
    try:
        renderer.render(buffer, root)
    except RecursionError as exc:
        raise NodeRenderer.mismatch(root, "is nested too deeply to render") from exc
    return buffer.getvalue()


def format_tree(
    root: SyntaxNode,
    classifier: SymbolClassifier,
    sink: TextIO,
    *,
    config: Config | None = None,
) -> None:
    """Render ``root`` and write the formatted text to ``sink``.

    Args:
        root (SyntaxNode): Root of the syntax tree to format.
        classifier (SymbolClassifier): Id to Kind table of the tree's grammar.
        sink (TextIO): Output stream; receives exactly one write on success.
        config (Config | None): Layout settings (defaults when None).

    Raises:
        StructuralMismatch: If the tree cannot be rendered (nothing is written).
        IoFailure: If the sink rejects the write.
    """
    if config is None:
        config = MutableConfig.from_defaults().freeze()
    text: str = render_to_string(root, classifier, config)
    try:
        sink.write(text)
    except OSError as exc:
        raise IoFailure(f"Could not write formatted output: {exc}", cause=exc) from exc


def format_source(
    source: str,
    language: str | LanguageSpec = "verilog",
    *,
    config: Config | None = None,
) -> str:
    """Parse and format ``source``, returning the formatted text.

    Raises:
        LanguageConfigurationError: If the grammar cannot be loaded.
        StructuralMismatch: If the tree cannot be rendered.
    """
    spec: LanguageSpec = (
        language if isinstance(language, LanguageSpec) else get_language(language)
    )
    tree: ParsedTree = parse(source, spec)
    sink = io.StringIO()
    format_tree(tree.root, classifier_for(spec), sink, config=config)
    return sink.getvalue()


def dump_tree(root: SyntaxNode, sink: TextIO) -> None:
    """Write the diagnostic dump of ``root`` to ``sink``.

    Raises:
        IoFailure: If the sink rejects the write.
    """
    text: str = "".join(f"{line}\n" for line in dump_lines(root))
    try:
        sink.write(text)
    except OSError as exc:
        raise IoFailure(f"Could not write tree dump: {exc}", cause=exc) from exc


__all__ = [
    "classifier_for",
    "dump_tree",
    "first_syntax_error",
    "format_source",
    "format_tree",
    "render_to_string",
]
