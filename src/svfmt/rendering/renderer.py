# topmark:header:start
#
#   project      : svfmt
#   file         : renderer.py
#   file_relpath : src/svfmt/rendering/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Node renderer: dispatch plus the per-construct rendering rules.

`NodeRenderer.render` classifies a node and calls the rule registered for its
`Kind` with the `renders` decorator. Kinds without a rule (`Kind.UNKNOWN`
included) go through the structural fallback, which renders every child in
order (named children through their rules, anonymous tokens verbatim) and adds
no text of its own; a node without named children is written verbatim, so no
source content is ever dropped. Only whitespace between tokens is normalized.

Rules that claim authority over a construct validate its shape and raise
`StructuralMismatch` instead of guessing when the shape is not the expected
one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from svfmt.config.logging import get_logger
from svfmt.config.types import ErrorNodePolicy
from svfmt.constants import DEFAULT_INDENT_WIDTH, DEFAULT_LINE_WIDTH
from svfmt.core.errors import StructuralMismatch
from svfmt.grammar.kinds import Kind
from svfmt.rendering.buffer import RenderBuffer
from svfmt.rendering.gaps import GapPolicy
from svfmt.rendering.wrap import WrapPlanner
from svfmt.syntax.node import named_children, terminals

if TYPE_CHECKING:
    from collections.abc import Sequence

    from svfmt.config.logging import SvfmtLogger
    from svfmt.grammar.classifier import SymbolClassifier
    from svfmt.syntax.node import SyntaxNode

logger: SvfmtLogger = get_logger(__name__)

RenderRule = Callable[["NodeRenderer", RenderBuffer, "SyntaxNode"], None]

_RULES: dict[Kind, RenderRule] = {}

# Items of a function body that are written on their own indented line.
_BODY_ITEM_KINDS: frozenset[Kind] = frozenset({Kind.STATEMENT, Kind.DECLARATION, Kind.COMMENT})

# Tokens written without the separating space the source may have had before them.
_ATTACHED_TOKENS: frozenset[str] = frozenset({";", ","})

# Anonymous tokens an argument list may hold and still be written in canonical form.
_ARGUMENT_LIST_TOKENS: frozenset[str] = frozenset({"(", ")", ","})


def renders(*kinds: Kind) -> Callable[[RenderRule], RenderRule]:
    """Register the decorated method as the rendering rule for ``kinds``.

    Raises:
        ValueError: If a kind already has a rule, or if `Kind.UNKNOWN` is named
            (it always uses the structural fallback).
    """

    def decorator(rule: RenderRule) -> RenderRule:
        for kind in kinds:
            if kind is Kind.UNKNOWN:
                raise ValueError("Kind.UNKNOWN always uses the structural fallback")
            if kind in _RULES:
                raise ValueError(f"Kind {kind.name} already has a rendering rule")
            _RULES[kind] = rule
        return rule

    return decorator


def registered_rules() -> dict[Kind, RenderRule]:
    """Return a copy of the Kind to rule registry."""
    return dict(_RULES)


def _is_token(node: SyntaxNode, text: str) -> bool:
    return not node.is_named and node.text == text


def unwrap_parentheses(node: SyntaxNode) -> SyntaxNode:
    """Return the node inside the outermost redundant parentheses of ``node``.

    Single-child wrappers are looked through, so ``(a + b)`` parsed as
    ``expression > primary > ( mintypmax_expression )`` yields the
    ``mintypmax_expression``. Without enclosing parentheses ``node`` is returned.
    """
    result: SyntaxNode = node
    current: SyntaxNode = node
    while current.children:
        children: Sequence[SyntaxNode] = current.children
        if len(children) == 1:
            current = children[0]
        elif (
            len(children) == 3
            and _is_token(children[0], "(")
            and _is_token(children[2], ")")
            and children[1].is_named
        ):
            current = result = children[1]
        else:
            break
    return result


class NodeRenderer:
    """Renders syntax nodes into a `RenderBuffer`.

    Args:
        classifier (SymbolClassifier): Raw id to Kind lookup for the tree's grammar.
        line_width (int): Width budget for list wrapping.
        indent_width (int): Spaces per indentation level (also used by fragments).
        error_nodes (ErrorNodePolicy): Treatment of parser error-recovery nodes.
    """

    def __init__(
        self,
        classifier: SymbolClassifier,
        *,
        line_width: int = DEFAULT_LINE_WIDTH,
        indent_width: int = DEFAULT_INDENT_WIDTH,
        error_nodes: ErrorNodePolicy = ErrorNodePolicy.FAIL,
    ) -> None:
        self.classifier = classifier
        self.indent_width = indent_width
        self.error_nodes = error_nodes
        self.gaps = GapPolicy(classifier)
        self.planner = WrapPlanner(line_width)

    # --- dispatch ---

    def kind_of(self, node: SyntaxNode) -> Kind:
        """Return the semantic Kind of ``node``."""
        return self.classifier.kind_of(node.kind_id)

    def render(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        """Render ``node`` (and its subtree) into ``buffer``."""
        if node.is_error or node.is_missing:
            self.render_error_node(buffer, node)
            return

        kind: Kind = self.kind_of(node)
        logger.trace("render %s -> %s at %s", node.kind, kind.name, node.start_point)
        rule: RenderRule | None = _RULES.get(kind)
        if rule is None:
            self.render_fallback(buffer, node)
        else:
            rule(self, buffer, node)

    def render_fallback(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        """Structural pass-through: every child in order, or the node's own text."""
        if not any(child.is_named for child in node.children):
            buffer.append_text(node.text)
            return
        logger.trace("fallback for '%s' with %d children", node.kind, len(node.children))
        self.render_children(buffer, node)

    def render_children(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        """Render every child of ``node`` in order, anonymous tokens included.

        Two children that were apart in the source are separated by one space,
        except before ``;`` and ``,`` and where the output already ends in
        whitespace. Children that touched in the source stay together.
        """
        previous: SyntaxNode | None = None
        for child in node.children:
            if previous is not None and previous.end_point != child.start_point:
                self.write_separator(buffer, child)
            self.render(buffer, child)
            previous = child

    @staticmethod
    def write_separator(buffer: RenderBuffer, child: SyntaxNode) -> None:
        """Write the single space that stands for source whitespace before ``child``."""
        if not child.is_named and child.text in _ATTACHED_TOKENS:
            return
        if buffer.last_char() in ("", " ", "\n"):
            return
        buffer.append_char(" ")

    def render_error_node(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        """Apply the configured error-node policy.

        Raises:
            StructuralMismatch: Under `ErrorNodePolicy.FAIL`.
        """
        if self.error_nodes is ErrorNodePolicy.VERBATIM:
            logger.debug("Passing syntax error through verbatim at %s", node.start_point)
            buffer.append_text(node.text)
            return
        raise self.mismatch(node, "is a syntax error in the source")

    def render_fragment(self, node: SyntaxNode) -> str:
        """Render ``node`` into an isolated, throwaway buffer and return the text."""
        fragment = RenderBuffer(indent_width=self.indent_width)
        self.render(fragment, node)
        return fragment.getvalue()

    # --- helpers ---

    def terminals_text(self, node: SyntaxNode, sep: str = " ") -> str:
        """Join the text of every terminal below ``node`` with ``sep``."""
        return sep.join(leaf.text for leaf in terminals(node))

    @staticmethod
    def mismatch(node: SyntaxNode, reason: str) -> StructuralMismatch:
        """Build the error raised when ``node`` does not have the expected shape."""
        return StructuralMismatch(node.kind, node.start_point, reason)

    def expect_child_count(self, node: SyntaxNode, *counts: int) -> Sequence[SyntaxNode]:
        """Return the children of ``node`` if their count is one of ``counts``.

        Raises:
            StructuralMismatch: If the child count is not allowed.
        """
        children: Sequence[SyntaxNode] = node.children
        if len(children) not in counts:
            expected: str = " or ".join(str(c) for c in counts)
            raise self.mismatch(node, f"has {len(children)} children, expected {expected}")
        return children

    # --- leaves ---

    @renders(Kind.IDENTIFIER, Kind.LITERAL)
    def render_verbatim(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        buffer.append_text(node.text)

    @renders(Kind.DATA_TYPE)
    def render_data_type(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        buffer.append_text(self.terminals_text(node))

    @renders(Kind.COMMENT)
    def render_comment(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        self.write_comment(buffer, node)
        buffer.ensure_line_break()

    def write_comment(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        """Write a comment, re-indenting continuation lines of block comments.

        Continuation lines keep their offset relative to the comment's own start
        column, so formatting a formatted file leaves them where they are.
        """
        lines: list[str] = node.text.rstrip().split("\n")
        start_column: int = node.start_point[1]
        buffer.append_text(lines[0].rstrip())
        for line in lines[1:]:
            buffer.append_char("\n")
            stripped: str = line.rstrip()
            leading: int = len(stripped) - len(stripped.lstrip(" \t"))
            buffer.append_text(stripped[min(leading, start_column) :])

    # --- expressions and statements ---

    @renders(Kind.EXPRESSION)
    def render_expression(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        children = self.expect_child_count(node, 3, 1)
        if len(children) == 1:
            self.render(buffer, children[0])
            return
        # Binary expression
        left, operator, right = children
        self.render(buffer, left)
        buffer.append_char(" ")
        buffer.append_text(operator.text)
        buffer.append_char(" ")
        self.render(buffer, right)

    @renders(Kind.JUMP_STATEMENT)
    def render_jump_statement(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        if not node.children:
            raise self.mismatch(node, "has no keyword")
        children = self.expect_child_count(node, 1, 2, 3)
        buffer.append_text(children[0].text)
        if len(children) == 3:
            buffer.append_char(" ")
            self.render(buffer, unwrap_parentheses(children[1]))
        if len(children) > 1:
            # Terminating ';'
            self.render(buffer, children[-1])

    @renders(Kind.OPERATOR_ASSIGNMENT)
    def render_operator_assignment(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        lvalue, operator, expression = self.expect_child_count(node, 3)
        buffer.append_text(lvalue.text)
        buffer.append_char(" ")
        buffer.append_text(operator.text)
        buffer.append_char(" ")
        self.render(buffer, expression)

    @renders(Kind.STATEMENT)
    def render_statement(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        self.expect_child_count(node, 1)
        self.render_fallback(buffer, node)

    # --- lists ---

    @renders(Kind.ARGUMENT_LIST)
    def render_argument_list(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        tokens: list[str] = [child.text for child in node.children if not child.is_named]
        arguments: int = len(node.children) - len(tokens)
        if not set(tokens) <= _ARGUMENT_LIST_TOKENS or tokens.count(",") != max(arguments - 1, 0):
            # Named or empty arguments, e.g. ".a(x)" or "f(a,,b)"
            self.render_children(buffer, node)
            return
        buffer.append_char("(")
        for index, child in enumerate(named_children(node)):
            if index:
                buffer.append_text(", ")
            self.render(buffer, child)
        buffer.append_char(")")

    @renders(Kind.PORT_LIST)
    def render_port_list(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        self.write_port_list(buffer, node, suffix="")

    def write_port_list(self, buffer: RenderBuffer, node: SyntaxNode, *, suffix: str) -> None:
        """Measure every port in isolation, then commit the form that fits."""
        fragments: list[str] = [self.render_fragment(child) for child in named_children(node)]
        self.planner.commit(buffer, fragments, suffix=suffix)

    @renders(Kind.PORT_ITEM)
    def render_port_item(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        # Every token of the port is kept (direction, dimensions, "= default")
        self.render_fallback(buffer, node)

    # --- declarations ---

    @renders(Kind.FUNCTION_DECLARATION)
    def render_function_declaration(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        children = self.expect_child_count(node, 2, 3)
        keyword, body = children[0], children[-1]
        if self.kind_of(keyword) is not Kind.KEYWORD:
            raise self.mismatch(node, "does not start with the 'function' keyword")
        if len(children) == 3 and not children[1].is_named:
            raise self.mismatch(node, f"has '{children[1].text}' where a lifetime was expected")
        if self.kind_of(body) is not Kind.FUNCTION_BODY:
            raise self.mismatch(node, f"has '{body.kind}' where a function body was expected")

        siblings: Sequence[SyntaxNode] = body.children
        closing: int = max(
            (index for index, child in enumerate(siblings) if _is_token(child, "endfunction")),
            default=-1,
        )
        if closing < 0:
            raise self.mismatch(body, "has no closing 'endfunction'")

        buffer.append_text("function ")
        if len(children) == 3:
            # Lifetime, e.g. "automatic"
            buffer.append_text(self.terminals_text(children[1]))
            buffer.append_char(" ")

        header_open = True
        saw_open_paren = False
        for index, child in enumerate(siblings[:closing]):
            kind: Kind = self.kind_of(child)
            logger.trace("function body child %s -> %s", child.kind, kind.name)

            if kind in _BODY_ITEM_KINDS or (child.is_named and not header_open):
                if header_open:
                    self._close_function_header(buffer, saw_open_paren)
                    header_open = False
                self._render_body_item(buffer, siblings, index, kind)
            elif not header_open:
                continue
            elif kind is Kind.DATA_TYPE:
                buffer.append_text(self.terminals_text(child))
                buffer.append_char(" ")
            elif kind is Kind.IDENTIFIER:
                buffer.append_text(self.terminals_text(child))
            elif kind is Kind.PORT_LIST:
                self.write_port_list(buffer, child, suffix=";")
                buffer.append_char("\n")
                header_open = False
            elif child.is_named:
                # Scope prefix, e.g. "pkg::" or an interface name before "."
                self.render(buffer, child)
            elif child.text == "(":
                saw_open_paren = True
            elif child.text not in (")", ";"):
                buffer.append_text(child.text)

        if header_open:
            self._close_function_header(buffer, saw_open_paren)
        buffer.ensure_line_break()
        buffer.append_text("endfunction")
        for child in siblings[closing + 1 :]:
            # End label, e.g. "endfunction : f"
            buffer.append_char(" ")
            self.render(buffer, child)
        buffer.append_char("\n")
        buffer.request_blank_line()

    @staticmethod
    def _close_function_header(buffer: RenderBuffer, saw_open_paren: bool) -> None:
        buffer.append_text("();\n" if saw_open_paren else ";\n")

    def _render_body_item(
        self,
        buffer: RenderBuffer,
        siblings: Sequence[SyntaxNode],
        index: int,
        kind: Kind,
    ) -> None:
        item: SyntaxNode = siblings[index]
        if self.gaps.blank_lines_before(siblings, index):
            buffer.request_blank_line()
        with buffer.indented():
            if kind is Kind.COMMENT:
                self.write_comment(buffer, item)
            else:
                self.render(buffer, item)
            buffer.append_char("\n")

    @renders(Kind.CLASS_DECLARATION)
    def render_class_declaration(self, buffer: RenderBuffer, node: SyntaxNode) -> None:
        children: Sequence[SyntaxNode] = node.children
        kinds: list[Kind] = [self.kind_of(child) for child in children]
        if Kind.IDENTIFIER not in kinds:
            raise self.mismatch(node, "has no class name")
        closing: int = max(
            (index for index, child in enumerate(children) if _is_token(child, "endclass")),
            default=-1,
        )
        if closing < kinds.index(Kind.IDENTIFIER):
            raise self.mismatch(node, "has no closing 'endclass'")

        named_seen = False
        header_closed = False
        items_open = False
        for index, (child, kind) in enumerate(zip(children, kinds)):
            if index == closing:
                if items_open:
                    buffer.pop_indent()
                else:
                    buffer.append_text(";\n")
                buffer.ensure_line_break()
                buffer.append_text("endclass")
            elif index > closing:
                # End label, e.g. "endclass : name"
                if kind is Kind.PUNCTUATION:
                    buffer.append_text(f" {child.text}")
                elif child.is_named:
                    buffer.append_char(" ")
                    self.render(buffer, child)
            elif not named_seen:
                if kind is Kind.IDENTIFIER:
                    buffer.append_text(child.text)
                    named_seen = True
                else:
                    buffer.append_text(self.terminals_text(child))
                    buffer.append_char(" ")
            elif kind is Kind.CLASS_ITEM or (header_closed and child.is_named):
                if not items_open:
                    buffer.append_text(";\n")
                    buffer.push_indent()
                    items_open = True
                self.render(buffer, child)
                buffer.ensure_line_break()
            elif _is_token(child, ";"):
                header_closed = True
            elif kind is Kind.KEYWORD:
                buffer.append_text(f" {child.text}")
            elif child.is_named:
                # Header extras such as the base class after "extends"
                buffer.append_char(" ")
                self.render(buffer, child)
            else:
                # Separators between header extras, e.g. "implements a, b"
                buffer.append_text(child.text)

        buffer.append_char("\n")
        buffer.request_blank_line()
