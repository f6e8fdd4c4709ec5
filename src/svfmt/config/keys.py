# topmark:header:start
#
#   project      : svfmt
#   file         : keys.py
#   file_relpath : src/svfmt/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML section and key names used by svfmt configuration files."""

from __future__ import annotations

from typing import Final


class Toml:
    """Keys of the ``svfmt.toml`` document and the ``[tool.svfmt]`` table."""

    SECTION_TOOL: Final[str] = "tool"
    SECTION_SVFMT: Final[str] = "svfmt"

    KEY_LINE_WIDTH: Final[str] = "line-width"
    KEY_INDENT_WIDTH: Final[str] = "indent-width"
    KEY_ERROR_NODES: Final[str] = "error-nodes"
    KEY_LANGUAGE: Final[str] = "language"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_LINE_WIDTH, KEY_INDENT_WIDTH, KEY_ERROR_NODES, KEY_LANGUAGE}
    )
