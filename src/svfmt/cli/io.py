# topmark:header:start
#
#   project      : svfmt
#   file         : io.py
#   file_relpath : src/svfmt/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input helpers for CLI commands: reading sources and writing results back."""

from __future__ import annotations

import io
import sys
from pathlib import Path

from svfmt.cli.errors import (
    SvfmtEncodingError,
    SvfmtFileNotFoundError,
    SvfmtIOError,
    SvfmtUsageError,
)
from svfmt.config.logging import get_logger
from svfmt.syntax.languages import LanguageSpec, get_language, language_for_path

logger = get_logger(__name__)

STDIN_SENTINEL = "-"


def check_input_paths(paths: tuple[str, ...], *, stdin_filename: str | None) -> None:
    """Validate the positional PATHS of a command.

    Raises:
        SvfmtUsageError: If no path is given, or '-' is mixed with other paths.
    """
    if not paths:
        raise SvfmtUsageError("No input. Pass one or more PATHS, or '-' to read from STDIN.")
    if STDIN_SENTINEL in paths and len(paths) > 1:
        raise SvfmtUsageError("'-' (STDIN) cannot be combined with other PATHS.")
    if stdin_filename and STDIN_SENTINEL not in paths:
        logger.warning("--stdin-filename is ignored unless '-' is given as PATH")


def display_name(path_arg: str, *, stdin_filename: str | None) -> str:
    """Return the name used for ``path_arg`` in messages and diffs."""
    if path_arg == STDIN_SENTINEL:
        return stdin_filename or "<stdin>"
    return path_arg


def read_source(path_arg: str) -> str:
    """Read UTF-8 source text from a file, or from STDIN for '-'.

    Raises:
        SvfmtFileNotFoundError: If the file does not exist.
        SvfmtEncodingError: If the content is not valid UTF-8.
        SvfmtIOError: For any other read failure.
    """
    if path_arg == STDIN_SENTINEL:
        stream = sys.stdin
        if isinstance(stream, io.TextIOWrapper):
            stream.reconfigure(encoding="utf-8")
        try:
            return stream.read()
        except UnicodeDecodeError as exc:
            raise SvfmtEncodingError(f"<stdin>: not valid UTF-8 ({exc.reason})") from exc

    path = Path(path_arg)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise SvfmtFileNotFoundError(f"No such file: {path_arg}") from exc
    except UnicodeDecodeError as exc:
        raise SvfmtEncodingError(f"{path_arg}: not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise SvfmtIOError(f"Could not read {path_arg}: {exc.strerror or exc}") from exc


def write_source(path_arg: str, text: str) -> None:
    """Overwrite a file with formatted text.

    Raises:
        SvfmtIOError: If the file cannot be written.
    """
    try:
        Path(path_arg).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise SvfmtIOError(f"Could not write {path_arg}: {exc.strerror or exc}") from exc
    logger.info("Wrote %s", path_arg)


def select_language(
    path_arg: str, *, language: str | None, stdin_filename: str | None
) -> LanguageSpec:
    """Return the language for an input: the explicit name, else the file extension."""
    if language:
        return get_language(language)
    return language_for_path(Path(display_name(path_arg, stdin_filename=stdin_filename)))
