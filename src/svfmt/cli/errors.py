# topmark:header:start
#
#   project      : svfmt
#   file         : errors.py
#   file_relpath : src/svfmt/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the svfmt CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. `from_core_error` translates the typed errors of
    ``svfmt.core.errors``.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from svfmt.cli.exit_codes import ExitCode
from svfmt.core.errors import (
    IoFailure,
    LanguageConfigurationError,
    StructuralMismatch,
    SvfmtError,
)


class SvfmtCliError(click.ClickException):
    """Base class for all svfmt CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class SvfmtUsageError(SvfmtCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class SvfmtConfigError(SvfmtCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class SvfmtFileNotFoundError(SvfmtCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SvfmtIOError(SvfmtCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class SvfmtEncodingError(SvfmtCliError):
    """Error for text decoding errors (input must be UTF-8)."""

    exit_code = ExitCode.ENCODING_ERROR


class SvfmtLanguageError(SvfmtCliError):
    """Error when the grammar for the source language cannot be loaded."""

    exit_code = ExitCode.LANGUAGE_ERROR


class SvfmtFormatError(SvfmtCliError):
    """Error when a syntax tree cannot be rendered."""

    exit_code = ExitCode.FORMAT_ERROR


def from_core_error(exc: SvfmtError, *, source: str | None = None) -> SvfmtCliError:
    """Map a core error onto the CLI exception carrying its exit code.

    Args:
        exc (SvfmtError): The error raised by the formatter core.
        source (str | None): Input name to prefix the message with.

    Returns:
        SvfmtCliError: The exception to raise from the command.
    """
    prefix: str = f"{source}: " if source else ""
    message: str = f"{prefix}{exc}"
    if isinstance(exc, StructuralMismatch):
        return SvfmtFormatError(message)
    if isinstance(exc, LanguageConfigurationError):
        return SvfmtLanguageError(message)
    if isinstance(exc, IoFailure):
        return SvfmtIOError(message)
    return SvfmtCliError(message)
