# topmark:header:start
#
#   project      : svfmt
#   file         : constants.py
#   file_relpath : src/svfmt/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""svfmt Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    SVFMT_VERSION: str = get_version("svfmt")
except PackageNotFoundError:  # running from a source checkout
    SVFMT_VERSION = "0.0.0"

# Width budget driving port list wrapping.
DEFAULT_LINE_WIDTH: int = 80

# Spaces per indentation level.
DEFAULT_INDENT_WIDTH: int = 4

# Package holding the versioned node-kind tables (one TOML file per language).
KIND_TABLE_PACKAGE: str = "svfmt.grammar.tables"

# Configuration discovery.
SVFMT_TOML_NAME: str = "svfmt.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

ENV_LOG_LEVEL: str = "SVFMT_LOG_LEVEL"
