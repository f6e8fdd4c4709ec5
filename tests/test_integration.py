# topmark:header:start
#
#   project      : svfmt
#   file         : test_integration.py
#   file_relpath : tests/test_integration.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end tests against the installed tree-sitter grammars.

These only check properties that hold for any grammar revision: the kind table
matches the grammar, the parse and dump work, and formatting is deterministic.
Exact layouts are covered by the in-memory tree tests under ``tests/rendering``.
"""

from __future__ import annotations

import io

import pytest

from svfmt import StructuralMismatch, dump_tree, format_source
from svfmt.grammar.kinds import Kind
from svfmt.rendering.api import classifier_for
from svfmt.syntax.languages import C, VERILOG
from svfmt.syntax.node import walk
from svfmt.syntax.treesitter import parse
from tests.conftest import make_config, mark_integration

SOURCE = """\
class myclass;
function int f(int a);
  return a;
endfunction
endclass
"""


def _format_outcome(source: str) -> str:
    try:
        return format_source(source, config=make_config())
    except StructuralMismatch as exc:
        return f"mismatch: {exc}"


@mark_integration
def test_verilog_kind_table_matches_grammar() -> None:
    pytest.importorskip("tree_sitter_verilog")
    classifier = classifier_for(VERILOG)
    assert len(classifier) > 0


@mark_integration
def test_c_kind_table_matches_grammar() -> None:
    pytest.importorskip("tree_sitter_c")
    assert len(classifier_for(C)) > 0


@mark_integration
def test_parse_and_dump() -> None:
    pytest.importorskip("tree_sitter_verilog")
    tree = parse(SOURCE, VERILOG)
    assert tree.root.kind == "source_file"
    assert tree.sexp.startswith("(source_file")
    sink = io.StringIO()
    dump_tree(tree.root, sink)
    assert sink.getvalue().splitlines()[0] == "source_file"


@mark_integration
def test_keywords_are_classified() -> None:
    pytest.importorskip("tree_sitter_verilog")
    tree = parse(SOURCE, VERILOG)
    classifier = classifier_for(VERILOG)
    kinds = {classifier.kind_of(n.kind_id) for _, n in walk(tree.root) if not n.is_named}
    assert Kind.PUNCTUATION in kinds


@mark_integration
def test_formatting_is_deterministic() -> None:
    pytest.importorskip("tree_sitter_verilog")
    assert _format_outcome(SOURCE) == _format_outcome(SOURCE)


@mark_integration
def test_syntax_error_fails_by_default() -> None:
    pytest.importorskip("tree_sitter_verilog")
    with pytest.raises(StructuralMismatch, match="syntax error"):
        format_source("function int f(int a;\n", config=make_config())


# Layouts produced from the real grammar: (source, expected output).
LAYOUT_CASES: dict[str, tuple[str, str]] = {
    "operator_assignment": (
        "function int f(a);\n    a  *=  2 ;\n    a <<= 3;\nendfunction\n",
        "function int f(a);\n    a *= 2;\n    a <<= 3;\nendfunction\n",
    ),
    "class_basic": (
        "class myclass;\n\nfunction int f(int a);\n\nreturn a;\n\nendfunction\n\nendclass\n",
        "class myclass;\n"
        "    function int f(int a);\n"
        "        return a;\n"
        "    endfunction\n"
        "endclass\n",
    ),
    "binary_expression": (
        "function int  f ( int a , int b ) ;\n    return(a+b* 2);\nendfunction\n",
        "function int f(int a, int b);\n    return a + b * 2;\nendfunction\n",
    ),
    "wrap_at_81": (
        "function int wrap_at_81(int long_parameter_name_a, int long_parameter_name_b___);\n"
        "endfunction\n",
        "function int wrap_at_81(\n"
        "    int long_parameter_name_a,\n"
        "    int long_parameter_name_b___\n"
        ");\n"
        "endfunction\n",
    ),
    "dont_wrap_at_80": (
        "function int dont_wrap_at_80(int parameter_a, int parameter_b, int parameter_c);\n"
        "endfunction\n",
        "function int dont_wrap_at_80(int parameter_a, int parameter_b, int parameter_c);\n"
        "endfunction\n",
    ),
    "blank_line_separation": (
        "function int f(int a);\nendfunction\nfunction int g(int a);\nendfunction\n",
        "function int f(int a);\nendfunction\n\nfunction int g(int a);\nendfunction\n",
    ),
    "item_separation": (
        "function int f(a);\n"
        "\n"
        "    // Comment\n"
        "\n"
        "    a = 1;\n"
        "    a = 2;\n"
        "\n"
        "\n"
        "    // Comment\n"
        "    a = 3;\n"
        "\n"
        "    // Comment\n"
        "\n"
        "endfunction\n",
        "function int f(a);\n"
        "    // Comment\n"
        "\n"
        "    a = 1;\n"
        "    a = 2;\n"
        "\n"
        "    // Comment\n"
        "    a = 3;\n"
        "\n"
        "    // Comment\n"
        "endfunction\n",
    ),
}

# Inputs rendered partly by the structural fallback: every token must survive.
TOKEN_CASES: dict[str, str] = {
    "port_default": "function int f(int a  =  5);\nendfunction\n",
    "port_dimension": "function int f(logic  [7:0] a);\nendfunction\n",
    "bit_select": "function int f(a);\n  a = b[3] ;\nendfunction\n",
    "conditional": "function int f(a);\n  if(a)  return 1;\nendfunction\n",
    "class_property": "class c;\n  int x ;\nendclass\n",
}


def _tokens(text: str) -> str:
    return "".join(text.split())


@mark_integration
@pytest.mark.parametrize("case", sorted(LAYOUT_CASES))
def test_layout(case: str) -> None:
    pytest.importorskip("tree_sitter_verilog")
    source, expected = LAYOUT_CASES[case]
    formatted: str = format_source(source, config=make_config())
    assert formatted == expected
    assert format_source(formatted, config=make_config()) == formatted


@mark_integration
@pytest.mark.parametrize("case", sorted(TOKEN_CASES))
def test_tokens_are_kept(case: str) -> None:
    pytest.importorskip("tree_sitter_verilog")
    source: str = TOKEN_CASES[case]
    formatted: str = format_source(source, config=make_config())
    assert _tokens(formatted) == _tokens(source)
    assert format_source(formatted, config=make_config()) == formatted
