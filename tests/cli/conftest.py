# topmark:header:start
#
#   project      : svfmt
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running svfmt in a controlled working directory.

`run_cli_in()` changes the process working directory to the given `tmp_path`
before invoking the Click CLI, so relative PATHS and config discovery resolve
against the temporary test directory.

The formatter itself is replaced by `FakeFormatter` in most CLI tests: it
collapses runs of whitespace and records the language and config it was called
with, which keeps these tests independent of the grammar wheels.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from svfmt.cli.exit_codes import ExitCode
from svfmt.cli.main import cli

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence
    from pathlib import Path

    from svfmt.config.model import Config
    from svfmt.core.errors import SvfmtError
    from svfmt.syntax.languages import LanguageSpec


def run_cli_in(
    tmp_path: Path,
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["format", "--check", "a.sv"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, input_text=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: Sequence[str],
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["version"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    return runner.invoke(cli, ["--no-color", *argv], input=input_text, obj={})


def assert_exit(result: Result, expected: ExitCode) -> None:
    """Assert the exit code, showing the output on failure."""
    assert result.exit_code == expected, result.output


@dataclass
class FakeFormatter:
    """Stand-in for `format_source` that collapses whitespace."""

    calls: list[tuple[str, Config]] = field(default_factory=list)
    error: SvfmtError | None = None

    def __call__(self, source: str, language: LanguageSpec, *, config: Config) -> str:
        self.calls.append((language.name, config))
        if self.error is not None:
            raise self.error
        return "\n".join(" ".join(line.split()) for line in source.splitlines()) + "\n"


@pytest.fixture
def fake_formatter(monkeypatch: pytest.MonkeyPatch) -> FakeFormatter:
    """Install a `FakeFormatter` in the ``format`` command."""
    fake = FakeFormatter()
    monkeypatch.setattr("svfmt.cli.commands.format.format_source", fake)
    return fake


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo the logging setup every CLI invocation performs."""
    root = logging.getLogger()
    level: int = root.level
    handlers = root.handlers[:]
    yield
    root.setLevel(level)
    root.handlers[:] = handlers
