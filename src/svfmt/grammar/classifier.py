# topmark:header:start
#
#   project      : svfmt
#   file         : classifier.py
#   file_relpath : src/svfmt/grammar/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Symbol classifier: raw node-kind id to `Kind`.

The mapping is assembled once per grammar, when a language is configured, from
two inputs:

- the grammar's own node-kind metadata (id, name, named flag), and
- a versioned kind table packaged as ``svfmt/grammar/tables/<language>.toml``
  that assigns a `Kind` to node-kind names (``[named]`` and ``[anonymous]``
  sections, since a keyword token and a rule may share a name).

The result is frozen; the renderer only ever calls `SymbolClassifier.kind_of`.
When the vendored grammar is upgraded, regenerate the table skeleton with
``tools/gen_kind_table.py``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib.resources import files
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from svfmt.config.logging import get_logger
from svfmt.constants import KIND_TABLE_PACKAGE
from svfmt.core.errors import LanguageConfigurationError
from svfmt.grammar.kinds import Kind

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from svfmt.config.logging import SvfmtLogger
    from svfmt.config.types import TomlTable
    from svfmt.syntax.node import NodeKindInfo

logger: SvfmtLogger = get_logger(__name__)

SECTION_GRAMMAR = "grammar"
SECTION_NAMED = "named"
SECTION_ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class KindTable:
    """Name-level kind assignments for one grammar version.

    Attributes:
        grammar (str): Grammar name the table was written for.
        version (str): Grammar package version the table was generated from.
        named (Mapping[str, Kind]): Assignments for named node kinds.
        anonymous (Mapping[str, Kind]): Assignments for anonymous tokens.
    """

    grammar: str
    version: str
    named: Mapping[str, Kind] = field(default_factory=dict)
    anonymous: Mapping[str, Kind] = field(default_factory=dict)

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> KindTable:
        """Build a table from a parsed TOML document; bad entries are logged and skipped."""
        header: Any = data.get(SECTION_GRAMMAR, {})
        if not isinstance(header, dict):
            header = {}
        return cls(
            grammar=str(header.get("name", "")),
            version=str(header.get("version", "")),
            named=MappingProxyType(_read_section(data, SECTION_NAMED)),
            anonymous=MappingProxyType(_read_section(data, SECTION_ANONYMOUS)),
        )

    def lookup(self, name: str, *, is_named: bool) -> Kind:
        """Return the assigned Kind for a node-kind name, or `Kind.UNKNOWN`."""
        section: Mapping[str, Kind] = self.named if is_named else self.anonymous
        return section.get(name, Kind.UNKNOWN)


def _read_section(data: TomlTable, section: str) -> dict[str, Kind]:
    raw: Any = data.get(section, {})
    if not isinstance(raw, dict):
        logger.warning("Kind table section [%s] is not a table; ignoring it", section)
        return {}
    out: dict[str, Kind] = {}
    for name, value in raw.items():
        kind: Kind | None = Kind.__members__.get(str(value))
        if kind is None:
            logger.warning("Unknown Kind %r for node kind '%s' in [%s]", value, name, section)
            continue
        out[str(name)] = kind
    return out


def load_kind_table(table_name: str) -> KindTable:
    """Read a packaged kind table (e.g. ``"verilog.toml"``).

    Raises:
        LanguageConfigurationError: If the table is missing or not valid TOML.
    """
    language: str = table_name.removesuffix(".toml")
    resource = files(KIND_TABLE_PACKAGE).joinpath(table_name)
    try:
        text: str = resource.read_text(encoding="utf-8")
        data: TomlTable = tomlkit.parse(text).unwrap()
    except OSError as exc:
        raise LanguageConfigurationError(language, f"Kind table unavailable: {exc}") from exc
    except TomlkitParseError as exc:
        raise LanguageConfigurationError(language, f"Kind table is not valid TOML: {exc}") from exc
    table = KindTable.from_toml_dict(data)
    logger.debug(
        "Loaded kind table %s (grammar %s %s): %d named, %d anonymous",
        table_name,
        table.grammar,
        table.version,
        len(table.named),
        len(table.anonymous),
    )
    return table


class SymbolClassifier:
    """Pure, read-only lookup from raw node-kind id to `Kind`."""

    def __init__(self, kinds_by_id: Mapping[int, Kind]) -> None:
        self._kinds: Mapping[int, Kind] = MappingProxyType(dict(kinds_by_id))

    def __len__(self) -> int:
        return len(self._kinds)

    @classmethod
    def from_metadata(cls, metadata: Iterable[NodeKindInfo], table: KindTable) -> SymbolClassifier:
        """Generate the id table from grammar metadata and a name-level kind table.

        Args:
            metadata (Iterable[NodeKindInfo]): Every node kind the grammar declares.
            table (KindTable): Kind assignments by node-kind name.

        Returns:
            SymbolClassifier: Classifier covering every assigned id; other ids are `UNKNOWN`.
        """
        kinds_by_id: dict[int, Kind] = {}
        for info in metadata:
            kind: Kind = table.lookup(info.name, is_named=info.is_named)
            if kind is not Kind.UNKNOWN:
                kinds_by_id[info.kind_id] = kind
        logger.debug("Generated classifier with %d classified node kinds", len(kinds_by_id))
        return cls(kinds_by_id)

    def kind_of(self, kind_id: int) -> Kind:
        """Return the Kind for a raw node-kind id (`Kind.UNKNOWN` when unclassified)."""
        return self._kinds.get(kind_id, Kind.UNKNOWN)
