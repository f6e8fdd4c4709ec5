# topmark:header:start
#
#   project      : svfmt
#   file         : test_model.py
#   file_relpath : tests/config/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layering: defaults, TOML files and argument overrides."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from svfmt.config import Config, ErrorNodePolicy, MutableConfig
from svfmt.constants import DEFAULT_INDENT_WIDTH, DEFAULT_LINE_WIDTH
from tests.conftest import mark_config, parametrize

if TYPE_CHECKING:
    from pathlib import Path


@mark_config
def test_defaults() -> None:
    config: Config = MutableConfig.from_defaults().freeze()
    assert config.line_width == DEFAULT_LINE_WIDTH == 80
    assert config.indent_width == DEFAULT_INDENT_WIDTH == 4
    assert config.error_nodes is ErrorNodePolicy.FAIL
    assert config.language is None
    assert config.config_files == ()


@mark_config
def test_empty_builder_freezes_to_defaults() -> None:
    assert MutableConfig().freeze() == MutableConfig.from_defaults().freeze()


@mark_config
def test_apply_args_ignores_none() -> None:
    config = (
        MutableConfig.from_defaults()
        .apply_args({"line_width": 100, "indent_width": None, "unrelated": True})
        .freeze()
    )
    assert config.line_width == 100
    assert config.indent_width == 4


@mark_config
@parametrize("field", ["line_width", "indent_width"])
def test_freeze_rejects_non_positive_widths(field: str) -> None:
    with pytest.raises(ValueError, match="must be positive"):
        MutableConfig.from_defaults().apply_args({field: -1}).freeze()


@mark_config
def test_thaw_round_trip() -> None:
    config = MutableConfig.from_defaults().apply_args({"language": "c"}).freeze()
    assert config.thaw().freeze() == config


@mark_config
def test_to_toml_dict() -> None:
    config = MutableConfig.from_defaults().apply_args({"indent_width": 2}).freeze()
    assert config.to_toml_dict() == {
        "line-width": 80,
        "indent-width": 2,
        "error-nodes": "fail",
    }


@mark_config
def test_from_toml_dict_skips_invalid_values(caplog: pytest.LogCaptureFixture) -> None:
    layer = MutableConfig.from_toml_dict(
        {
            "line-width": 0,
            "indent-width": True,
            "error-nodes": "Verbatim",
            "language": 3,
            "colour": "always",
        }
    )
    assert layer.line_width is None
    assert layer.indent_width is None
    assert layer.error_nodes is ErrorNodePolicy.VERBATIM
    assert layer.language is None
    assert "Ignoring unknown config key 'colour'" in caplog.text


@mark_config
def test_svfmt_toml_file(tmp_path: Path) -> None:
    path = tmp_path / "svfmt.toml"
    path.write_text('line-width = 100\nerror-nodes = "verbatim"\n', encoding="utf-8")
    layer = MutableConfig.from_toml_file(path)
    assert layer is not None
    assert layer.line_width == 100
    assert layer.error_nodes is ErrorNodePolicy.VERBATIM
    assert layer.config_files == [path]


@mark_config
def test_pyproject_without_tool_table(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert MutableConfig.from_toml_file(path) is None


@mark_config
def test_invalid_toml_is_a_value_error(tmp_path: Path) -> None:
    path = tmp_path / "svfmt.toml"
    path.write_text("line-width = = 3\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid TOML"):
        MutableConfig.from_toml_file(path)


@mark_config
def test_load_merged_precedence(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.svfmt]\nline-width = 90\nindent-width = 2\n", encoding="utf-8"
    )
    extra = tmp_path / "extra.toml"
    extra.write_text("line-width = 120\n", encoding="utf-8")

    config = MutableConfig.load_merged(
        start=tmp_path, extra_files=[extra], args={"indent_width": 8}
    ).freeze()
    assert config.line_width == 120
    assert config.indent_width == 8
    assert config.config_files == (tmp_path.resolve() / "pyproject.toml", extra)


@mark_config
def test_load_merged_discovers_upwards(tmp_path: Path) -> None:
    (tmp_path / "svfmt.toml").write_text("indent-width = 3\n", encoding="utf-8")
    nested = tmp_path / "rtl" / "core"
    nested.mkdir(parents=True)
    assert MutableConfig.load_merged(start=nested).freeze().indent_width == 3


@mark_config
def test_svfmt_toml_wins_over_pyproject(tmp_path: Path) -> None:
    (tmp_path / "svfmt.toml").write_text("indent-width = 3\n", encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text(
        "[tool.svfmt]\nindent-width = 5\n", encoding="utf-8"
    )
    assert MutableConfig.load_merged(start=tmp_path).freeze().indent_width == 3


@mark_config
def test_no_config_skips_discovery(tmp_path: Path) -> None:
    (tmp_path / "svfmt.toml").write_text("indent-width = 3\n", encoding="utf-8")
    config = MutableConfig.load_merged(start=tmp_path, no_config=True).freeze()
    assert config.indent_width == DEFAULT_INDENT_WIDTH


@mark_config
def test_missing_extra_file_is_an_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        MutableConfig.load_merged(
            start=tmp_path, no_config=True, extra_files=[tmp_path / "absent.toml"]
        )
