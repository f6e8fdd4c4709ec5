# topmark:header:start
#
#   project      : svfmt
#   file         : test_classes.py
#   file_relpath : tests/rendering/test_classes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of class declarations."""

from __future__ import annotations

import pytest

from svfmt.core.errors import StructuralMismatch
from tests.conftest import mark_rendering, render
from tests.trees import (
    TreeBuilder,
    class_decl,
    function_decl,
    ident,
    jump,
    name_expr,
    node,
    ports,
    source_file,
    statement,
    tok,
)


@mark_rendering
def test_class_with_method(builder: TreeBuilder) -> None:
    method = function_decl(
        "f", ports("a"), statement(jump("return", name_expr("a"), "\n")), sep="\n"
    )
    spec = source_file(class_decl("myclass", method))
    assert render(builder, spec) == (
        "class myclass;\n"
        "    function int f(int a);\n"
        "        return a;\n"
        "    endfunction\n"
        "endclass\n"
    )


@mark_rendering
def test_methods_are_separated_by_one_blank_line(builder: TreeBuilder) -> None:
    spec = source_file(
        class_decl(
            "c",
            function_decl("f", ports("a"), sep="\n"),
            function_decl("g", ports("b"), sep="\n"),
        )
    )
    assert render(builder, spec) == (
        "class c;\n"
        "    function int f(int a);\n"
        "    endfunction\n"
        "\n"
        "    function int g(int b);\n"
        "    endfunction\n"
        "endclass\n"
    )


@mark_rendering
def test_empty_class(builder: TreeBuilder) -> None:
    spec = source_file(class_decl("c", end_sep=" "))
    assert render(builder, spec) == "class c;\nendclass\n"


@mark_rendering
def test_class_header_keeps_qualifiers_and_base_class(builder: TreeBuilder) -> None:
    # virtual   class c  extends   base ; endclass : c
    spec = source_file(
        node(
            "class_declaration",
            tok("virtual"),
            tok("class", "   "),
            node("class_identifier", ident("c")),
            tok("extends", "  "),
            node("class_type", ident("base", "   ")),
            tok(";", " "),
            tok("endclass"),
            tok(":"),
            node("class_identifier", ident("c")),
        )
    )
    assert render(builder, spec) == "virtual class c extends base;\nendclass : c\n"


@mark_rendering
def test_class_followed_by_function_gets_a_blank_line(builder: TreeBuilder) -> None:
    spec = source_file(class_decl("c"), function_decl("f", ports("a"), sep="\n"))
    assert render(builder, spec) == (
        "class c;\nendclass\n\nfunction int f(int a);\nendfunction\n"
    )


@mark_rendering
def test_class_without_endclass_is_a_mismatch(builder: TreeBuilder) -> None:
    spec = source_file(
        node("class_declaration", tok("class"), node("class_identifier", ident("c")), tok(";", ""))
    )
    with pytest.raises(StructuralMismatch) as excinfo:
        render(builder, spec)
    assert excinfo.value.kind == "class_declaration"
    assert "endclass" in excinfo.value.reason


@mark_rendering
def test_class_without_name_is_a_mismatch(builder: TreeBuilder) -> None:
    spec = source_file(node("class_declaration", tok("class"), tok(";", ""), tok("endclass")))
    with pytest.raises(StructuralMismatch, match="has no class name"):
        render(builder, spec)
