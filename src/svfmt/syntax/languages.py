# topmark:header:start
#
#   project      : svfmt
#   file         : languages.py
#   file_relpath : src/svfmt/syntax/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of languages svfmt can parse.

Each `LanguageSpec` names the Python module that ships the compiled grammar
(a ``tree-sitter-<name>`` wheel exposing ``language()``), the file extensions
that select it, and the node-kind table packaged under ``svfmt.grammar.tables``.
Files with an unregistered extension are treated as SystemVerilog.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from svfmt.config.logging import get_logger
from svfmt.core.errors import LanguageConfigurationError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from svfmt.config.logging import SvfmtLogger

logger: SvfmtLogger = get_logger(__name__)


@dataclass(frozen=True)
class LanguageSpec:
    """Description of one parseable language.

    Attributes:
        name (str): Stable language key (also the kind table file stem).
        module (str): Import name of the grammar binding module.
        extensions (tuple[str, ...]): Lower-case file suffixes, dot included.
        description (str): Human-readable label.
    """

    name: str
    module: str
    extensions: tuple[str, ...]
    description: str

    @property
    def table_name(self) -> str:
        """File name of the node-kind table for this language."""
        return f"{self.name}.toml"

    def matches(self, path: Path) -> bool:
        """Return True if ``path`` has one of this language's extensions."""
        return path.suffix.lower() in self.extensions


VERILOG = LanguageSpec(
    name="verilog",
    module="tree_sitter_verilog",
    extensions=(".sv", ".svh", ".v", ".vh"),
    description="SystemVerilog / Verilog",
)

C = LanguageSpec(
    name="c",
    module="tree_sitter_c",
    extensions=(".c", ".h"),
    description="C",
)

DEFAULT_LANGUAGE: LanguageSpec = VERILOG

_registry: Mapping[str, LanguageSpec] = MappingProxyType({spec.name: spec for spec in (VERILOG, C)})


def registered_languages() -> Mapping[str, LanguageSpec]:
    """Return the read-only mapping of language names to specs."""
    return _registry


def get_language(name: str) -> LanguageSpec:
    """Look up a language by name (case-insensitive).

    Raises:
        LanguageConfigurationError: If no language with that name is registered.
    """
    spec: LanguageSpec | None = _registry.get(name.strip().lower())
    if spec is None:
        raise LanguageConfigurationError(
            name, f"Unknown language; expected one of: {', '.join(sorted(_registry))}."
        )
    return spec


def language_for_path(path: Path) -> LanguageSpec:
    """Select the language for a file from its extension (SystemVerilog by default)."""
    for spec in _registry.values():
        if spec.matches(path):
            logger.debug("Language '%s' selected for %s", spec.name, path)
            return spec
    logger.debug("No language registered for %s; using '%s'", path, DEFAULT_LANGUAGE.name)
    return DEFAULT_LANGUAGE
