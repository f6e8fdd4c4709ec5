# topmark:header:start
#
#   project      : svfmt
#   file         : loaders.py
#   file_relpath : src/svfmt/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading svfmt configuration from
``svfmt.toml`` (the whole document is the svfmt table) and from the
``[tool.svfmt]`` table of ``pyproject.toml``, plus the upward discovery of
those files from a starting directory.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from svfmt.config.keys import Toml
from svfmt.config.logging import get_logger
from svfmt.constants import PYPROJECT_TOML_NAME, SVFMT_TOML_NAME

if TYPE_CHECKING:
    from enum import Enum

    from svfmt.config.logging import SvfmtLogger
    from svfmt.config.types import TomlTable

logger: SvfmtLogger = get_logger(__name__)

E = TypeVar("E", bound="Enum")


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed document as plain Python containers.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not valid TOML.
    """
    text: str = path.read_text(encoding="utf-8")
    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ValueError(f"Invalid TOML in {path}: {exc}") from exc
    data: TomlTable = doc.unwrap()
    logger.trace("Loaded TOML from %s: %s", path, data)
    return data


def extract_svfmt_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the svfmt settings table contained in a parsed config document.

    ``pyproject.toml`` contributes its ``[tool.svfmt]`` table (or nothing when
    the table is absent); any other file is taken to be an ``svfmt.toml``
    document whose top level is the settings table.

    Args:
        path (Path): Path the document was read from.
        data (TomlTable): Parsed document.

    Returns:
        TomlTable | None: The settings table, or ``None`` if the file holds none.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return None
    table = tool.get(Toml.SECTION_SVFMT)
    return table if isinstance(table, dict) else None


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest configuration file at or above ``start``.

    In each directory ``svfmt.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it carries a ``[tool.svfmt]`` table.

    Args:
        start (Path): Directory (or file) where the upward search begins.

    Returns:
        Path | None: The discovered file, or ``None`` if none was found.
    """
    current: Path = start.resolve()
    if current.is_file():
        current = current.parent
    for directory in (current, *current.parents):
        candidate = directory / SVFMT_TOML_NAME
        if candidate.is_file():
            logger.debug("Discovered config file %s", candidate)
            return candidate
        pyproject = directory / PYPROJECT_TOML_NAME
        if pyproject.is_file():
            try:
                data = load_toml_dict(pyproject)
            except (OSError, ValueError) as exc:
                logger.warning("Ignoring unreadable %s: %s", pyproject, exc)
                continue
            if extract_svfmt_table(pyproject, data) is not None:
                logger.debug("Discovered [tool.svfmt] in %s", pyproject)
                return pyproject
    return None


def get_positive_int_or_none(table: TomlTable, key: str) -> int | None:
    """Extract a positive integer from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        int | None: The value, or ``None`` when the key is missing or invalid.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    # bool is a subclass of int; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        logger.warning(
            "Ignoring invalid value for '%s': %r (expected a positive integer)", key, value
        )
        return None
    return value


def get_enum_value_or_none(table: TomlTable, key: str, enum_cls: type[E]) -> E | None:
    """Extract an Enum member from a TOML table by its string value.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        enum_cls (type[E]): Enum whose members carry string values.

    Returns:
        E | None: The matching member, or ``None`` when missing or invalid.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        for member in enum_cls:
            if member.value == value.strip().lower():
                return member
    logger.warning(
        "Ignoring invalid value for '%s': %r (expected one of: %s)",
        key,
        value,
        ", ".join(str(m.value) for m in enum_cls),
    )
    return None


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string, or ``None`` when missing or not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Ignoring invalid value for '%s': %r (expected a string)", key, value)
    return None
