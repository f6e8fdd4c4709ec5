# topmark:header:start
#
#   project      : svfmt
#   file         : test_languages.py
#   file_relpath : tests/grammar/test_languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Language registry and grammar loading failures."""

from __future__ import annotations

from pathlib import Path

import pytest

from svfmt.core.errors import LanguageConfigurationError
from svfmt.syntax.languages import (
    C,
    VERILOG,
    LanguageSpec,
    get_language,
    language_for_path,
    registered_languages,
)
from svfmt.syntax.treesitter import load_language
from tests.conftest import mark_grammar, parametrize


@mark_grammar
def test_registry() -> None:
    assert set(registered_languages()) == {"verilog", "c"}
    assert VERILOG.table_name == "verilog.toml"


@mark_grammar
@parametrize("name", ["verilog", "VERILOG", " verilog "])
def test_get_language_is_case_insensitive(name: str) -> None:
    assert get_language(name) is VERILOG


@mark_grammar
def test_unknown_language() -> None:
    with pytest.raises(LanguageConfigurationError, match="expected one of: c, verilog"):
        get_language("vhdl")


@mark_grammar
@parametrize(
    "path, expected",
    [
        ("top.sv", VERILOG),
        ("pkg.SVH", VERILOG),
        ("legacy.v", VERILOG),
        ("main.c", C),
        ("api.h", C),
        ("notes.txt", VERILOG),
        ("Makefile", VERILOG),
    ],
)
def test_language_for_path(path: str, expected: LanguageSpec) -> None:
    assert language_for_path(Path(path)) is expected


@mark_grammar
def test_missing_grammar_module_is_a_language_error() -> None:
    spec = LanguageSpec(
        name="ghost",
        module="svfmt_tests_no_such_grammar",
        extensions=(".ghost",),
        description="Not installed",
    )
    with pytest.raises(LanguageConfigurationError) as excinfo:
        load_language(spec)
    assert excinfo.value.language == "ghost"
    assert "svfmt_tests_no_such_grammar" in str(excinfo.value)
