# topmark:header:start
#
#   project      : svfmt
#   file         : __init__.py
#   file_relpath : src/svfmt/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""svfmt package.

svfmt is a deterministic source formatter for SystemVerilog. It renders a
concrete syntax tree back to canonically formatted text and exposes both a CLI
and a small typed API for automation.
"""

from __future__ import annotations

from svfmt.core.errors import (
    IoFailure,
    LanguageConfigurationError,
    StructuralMismatch,
    SvfmtError,
)
from svfmt.rendering.api import dump_tree, format_source, format_tree

__all__ = [
    "IoFailure",
    "LanguageConfigurationError",
    "StructuralMismatch",
    "SvfmtError",
    "dump_tree",
    "format_source",
    "format_tree",
]
