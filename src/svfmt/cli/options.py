# topmark:header:start
#
#   project      : svfmt
#   file         : options.py
#   file_relpath : src/svfmt/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for svfmt.

This module centralizes reusable options (verbosity, color, configuration and
layout overrides) and their resolution logic, so commands and groups can stay
thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Any, Callable, ParamSpec, TypeVar

import click

from svfmt.cli.errors import SvfmtUsageError
from svfmt.config.types import ErrorNodePolicy
from svfmt.syntax.languages import registered_languages

P = ParamSpec("P")
R = TypeVar("R")


class EnumChoice(click.Choice):
    """Case-insensitive choice over the values of a string-valued Enum.

    Converts the chosen value to the Enum member.
    """

    def __init__(self, enum_cls: type[Enum]) -> None:
        super().__init__([str(member.value) for member in enum_cls], case_sensitive=False)
        self.enum_cls = enum_cls

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, self.enum_cls):
            return value
        return self.enum_cls(super().convert(value, param, ctx))


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the ``-v`` and ``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        Positive for verbose output, negative for quiet output, 0 by default.

    Raises:
        SvfmtUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SvfmtUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count:
        return min(verbose_count, 2)
    return -min(quiet_count, 2)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the verbosity stored on the context by the group (0 if unset)."""
    obj = ctx.find_root().obj
    if isinstance(obj, dict):
        return int(obj.get("verbosity_level", 0))
    return 0


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        isatty = getattr(sys.stdout, "isatty", None)
        stdout_isatty = bool(isatty()) if callable(isatty) else False
    return stdout_isatty


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoice(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --config and --no-config options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--config",
        "config_paths",
        type=click.Path(dir_okay=False, path_type=str),
        multiple=True,
        help="Extra svfmt.toml / pyproject.toml file(s) applied over the discovered one.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not discover svfmt.toml / [tool.svfmt] upwards from the working directory.",
    )(f)
    return f


def common_layout_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the layout overrides (language, widths, error-node policy) to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--language",
        "language",
        type=click.Choice(sorted(registered_languages()), case_sensitive=False),
        default=None,
        help="Source language (default: chosen from the file extension).",
    )(f)
    f = click.option(
        "--line-width",
        "line_width",
        type=click.IntRange(min=1),
        default=None,
        help="Width budget for port-list wrapping (default: 80).",
    )(f)
    f = click.option(
        "--indent-width",
        "indent_width",
        type=click.IntRange(min=1),
        default=None,
        help="Spaces per indentation level (default: 4).",
    )(f)
    f = click.option(
        "--error-nodes",
        "error_nodes",
        type=EnumChoice(ErrorNodePolicy),
        default=None,
        help="Syntax errors in the input: fail (default) or pass through verbatim.",
    )(f)
    return f
