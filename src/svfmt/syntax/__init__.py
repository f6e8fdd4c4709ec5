# topmark:header:start
#
#   project      : svfmt
#   file         : __init__.py
#   file_relpath : src/svfmt/syntax/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Syntax tree access: the node protocol the renderer consumes and the tree-sitter adapter."""

from __future__ import annotations

from svfmt.syntax.languages import (
    LanguageSpec,
    get_language,
    language_for_path,
    registered_languages,
)
from svfmt.syntax.node import NodeKindInfo, SyntaxNode, named_children, terminals, walk

__all__ = [
    "LanguageSpec",
    "NodeKindInfo",
    "SyntaxNode",
    "get_language",
    "language_for_path",
    "named_children",
    "registered_languages",
    "terminals",
    "walk",
]
