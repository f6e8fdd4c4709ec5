# topmark:header:start
#
#   project      : svfmt
#   file         : model.py
#   file_relpath : src/svfmt/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable, runtime snapshot handed to the renderer.
    - `MutableConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `Config` and thawed back for edits.

Layering (lowest to highest precedence):
    1. built-in defaults,
    2. the discovered ``svfmt.toml`` / ``[tool.svfmt]`` table,
    3. files given explicitly with ``--config``,
    4. CLI flags.

A ``None`` field on `MutableConfig` means "inherit"; `MutableConfig.freeze`
resolves every remaining ``None`` to its built-in default.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from svfmt.config.keys import Toml
from svfmt.config.loaders import (
    discover_config_file,
    extract_svfmt_table,
    get_enum_value_or_none,
    get_positive_int_or_none,
    get_string_value_or_none,
    load_toml_dict,
)
from svfmt.config.logging import get_logger
from svfmt.config.types import ErrorNodePolicy
from svfmt.constants import DEFAULT_INDENT_WIDTH, DEFAULT_LINE_WIDTH

if TYPE_CHECKING:
    from svfmt.config.logging import SvfmtLogger
    from svfmt.config.types import TomlTable

# ArgsLike: generic mapping accepted by config loaders (works for CLI kwargs and API dicts).
ArgsLike = Mapping[str, Any]

logger: SvfmtLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for svfmt.

    Attributes:
        line_width (int): Width budget (in columns) for port list wrapping.
        indent_width (int): Number of spaces per indentation level.
        error_nodes (ErrorNodePolicy): Treatment of parser error-recovery nodes.
        language (str | None): Forced language name; ``None`` selects by file extension.
        config_files (tuple[Path, ...]): Config sources that contributed, in merge order.
    """

    line_width: int
    indent_width: int
    error_nodes: ErrorNodePolicy
    language: str | None
    config_files: tuple[Path, ...]

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            line_width=self.line_width,
            indent_width=self.indent_width,
            error_nodes=self.error_nodes,
            language=self.language,
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable ``svfmt.toml`` table."""
        table: TomlTable = {
            Toml.KEY_LINE_WIDTH: self.line_width,
            Toml.KEY_INDENT_WIDTH: self.indent_width,
            Toml.KEY_ERROR_NODES: self.error_nodes.value,
        }
        if self.language is not None:
            table[Toml.KEY_LANGUAGE] = self.language
        return table


@dataclass
class MutableConfig:
    """Mutable configuration builder; ``None`` fields inherit from lower layers."""

    line_width: int | None = None
    indent_width: int | None = None
    error_nodes: ErrorNodePolicy | None = None
    language: str | None = None
    config_files: list[Path] = field(default_factory=list)

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls(
            line_width=DEFAULT_LINE_WIDTH,
            indent_width=DEFAULT_INDENT_WIDTH,
            error_nodes=ErrorNodePolicy.FAIL,
        )

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a (partial) config layer from an svfmt settings table.

        Unknown keys and invalid values are logged and ignored.

        Args:
            table (TomlTable): The ``svfmt.toml`` document or ``[tool.svfmt]`` table.
            config_file (Path | None): Provenance recorded in ``config_files``.

        Returns:
            MutableConfig: A layer with only the keys present in ``table`` set.
        """
        for key in sorted(set(table) - Toml.ALL_KEYS):
            logger.warning("Ignoring unknown config key '%s'%s", key, _where(config_file))

        return cls(
            line_width=get_positive_int_or_none(table, Toml.KEY_LINE_WIDTH),
            indent_width=get_positive_int_or_none(table, Toml.KEY_INDENT_WIDTH),
            error_nodes=get_enum_value_or_none(table, Toml.KEY_ERROR_NODES, ErrorNodePolicy),
            language=get_string_value_or_none(table, Toml.KEY_LANGUAGE),
            config_files=[config_file] if config_file is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a config layer from ``svfmt.toml`` or ``pyproject.toml``.

        Args:
            path (Path): File to read.

        Returns:
            MutableConfig | None: The layer, or ``None`` if a ``pyproject.toml``
                carries no ``[tool.svfmt]`` table.

        Raises:
            OSError: If the file cannot be read.
            ValueError: If the file is not valid TOML.
        """
        data: TomlTable = load_toml_dict(path)
        table: TomlTable | None = extract_svfmt_table(path, data)
        if table is None:
            logger.debug("No svfmt settings in %s", path)
            return None
        return cls.from_toml_dict(table, config_file=path)

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay ``other`` on top of this builder (``other`` wins where set).

        Args:
            other (MutableConfig): Higher-precedence layer.

        Returns:
            MutableConfig: ``self``, updated in place.
        """
        if other.line_width is not None:
            self.line_width = other.line_width
        if other.indent_width is not None:
            self.indent_width = other.indent_width
        if other.error_nodes is not None:
            self.error_nodes = other.error_nodes
        if other.language is not None:
            self.language = other.language
        self.config_files.extend(other.config_files)
        return self

    def apply_args(self, args: ArgsLike) -> MutableConfig:
        """Overlay CLI/API arguments; keys that are absent or ``None`` are left alone.

        Recognized keys: ``line_width``, ``indent_width``, ``error_nodes``, ``language``.
        """
        return self.merge_with(
            MutableConfig(
                line_width=args.get("line_width"),
                indent_width=args.get("indent_width"),
                error_nodes=args.get("error_nodes"),
                language=args.get("language"),
            )
        )

    def freeze(self) -> Config:
        """Resolve defaults and return an immutable `Config`.

        Raises:
            ValueError: If a width is not a positive integer.
        """
        line_width: int = DEFAULT_LINE_WIDTH if self.line_width is None else self.line_width
        indent_width: int = (
            DEFAULT_INDENT_WIDTH if self.indent_width is None else self.indent_width
        )
        if line_width <= 0:
            raise ValueError(f"line width must be positive, got {line_width}")
        if indent_width <= 0:
            raise ValueError(f"indent width must be positive, got {indent_width}")
        return Config(
            line_width=line_width,
            indent_width=indent_width,
            error_nodes=self.error_nodes or ErrorNodePolicy.FAIL,
            language=self.language,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_files: Iterable[Path] = (),
        no_config: bool = False,
        args: ArgsLike | None = None,
    ) -> MutableConfig:
        """Build the layered configuration: defaults, discovered file, extra files, args.

        Args:
            start (Path | None): Where discovery starts (defaults to the CWD).
            extra_files (Iterable[Path]): Explicit config files, applied in order.
            no_config (bool): Skip discovery (explicit files and args still apply).
            args (ArgsLike | None): CLI/API overrides.

        Returns:
            MutableConfig: The merged builder, ready to `freeze`.

        Raises:
            OSError: If an explicit config file cannot be read.
            ValueError: If a config file is not valid TOML.
        """
        merged: MutableConfig = cls.from_defaults()

        if not no_config:
            discovered: Path | None = discover_config_file(start or Path.cwd())
            if discovered is not None:
                layer = cls.from_toml_file(discovered)
                if layer is not None:
                    merged.merge_with(layer)

        for path in extra_files:
            layer = cls.from_toml_file(path)
            if layer is None:
                logger.warning("No svfmt settings found in %s", path)
                continue
            merged.merge_with(layer)

        if args:
            merged.apply_args(args)

        logger.debug("Merged config: %s", merged)
        return merged


def _where(config_file: Path | None) -> str:
    return f" in {config_file}" if config_file is not None else ""
