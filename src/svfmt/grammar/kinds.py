# topmark:header:start
#
#   project      : svfmt
#   file         : kinds.py
#   file_relpath : src/svfmt/grammar/kinds.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Closed set of semantic node kinds understood by the renderer."""

from __future__ import annotations

from enum import Enum


class Kind(Enum):
    """Semantic tag of a syntax node.

    Raw grammar node kinds are mapped onto these members by the classifier; kinds
    the table does not mention become `UNKNOWN` and use the structural fallback.
    """

    UNKNOWN = "unknown"

    # Declarations
    FUNCTION_DECLARATION = "function_declaration"
    FUNCTION_BODY = "function_body"
    CLASS_DECLARATION = "class_declaration"
    CLASS_ITEM = "class_item"
    DECLARATION = "declaration"

    # Statements and expressions
    STATEMENT = "statement"
    JUMP_STATEMENT = "jump_statement"
    OPERATOR_ASSIGNMENT = "operator_assignment"
    EXPRESSION = "expression"

    # Lists
    ARGUMENT_LIST = "argument_list"
    PORT_LIST = "port_list"
    PORT_ITEM = "port_item"

    # Leaves
    DATA_TYPE = "data_type"
    IDENTIFIER = "identifier"
    LITERAL = "literal"
    COMMENT = "comment"
    KEYWORD = "keyword"
    PUNCTUATION = "punctuation"
