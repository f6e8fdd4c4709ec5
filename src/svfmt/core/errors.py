# topmark:header:start
#
#   project      : svfmt
#   file         : errors.py
#   file_relpath : src/svfmt/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed errors raised by the svfmt core.

The core never prints and never swallows: every failure of a render call is
surfaced to the caller as one of the exceptions below. The CLI translates them
into ``click`` exceptions with stable exit codes (see ``svfmt.cli.errors``).

Taxonomy:
    - `IoFailure`: the output sink rejected a write.
    - `LanguageConfigurationError`: a grammar could not be loaded or initialized.
    - `StructuralMismatch`: a construct rule met a child count or child kind it
      does not recognize. Aborts the whole render call.
"""

from __future__ import annotations


class SvfmtError(Exception):
    """Base class for all svfmt core errors."""


class IoFailure(SvfmtError):
    """The output sink rejected a write."""

    def __init__(self, message: str, *, cause: OSError | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class LanguageConfigurationError(SvfmtError):
    """The requested grammar could not be initialized."""

    def __init__(self, language: str, message: str) -> None:
        super().__init__(f"Could not set source language '{language}'. {message}")
        self.language = language


class StructuralMismatch(SvfmtError):
    """A construct rule saw a syntax tree shape it does not recognize.

    Attributes:
        kind (str): Grammar name of the offending node.
        position (tuple[int, int]): Zero-based ``(row, column)`` of the node start.
        reason (str): Short description of what was expected.
    """

    def __init__(self, kind: str, position: tuple[int, int], reason: str) -> None:
        row, column = position
        super().__init__(
            f"Unexpected syntax tree at line {row + 1}, column {column + 1}: "
            f"'{kind}' {reason}"
        )
        self.kind = kind
        self.position = position
        self.reason = reason
