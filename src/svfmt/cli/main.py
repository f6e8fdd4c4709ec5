# topmark:header:start
#
#   project      : svfmt
#   file         : main.py
#   file_relpath : src/svfmt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""svfmt Click group and subcommand registration.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console and verbosity from there.
"""

from __future__ import annotations

import click

from svfmt.cli.commands.dump import dump_command
from svfmt.cli.commands.format import format_command
from svfmt.cli.commands.languages import languages_command
from svfmt.cli.commands.version import version_command
from svfmt.cli.console import ClickConsole
from svfmt.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from svfmt.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging via env
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="svfmt: deterministic SystemVerilog formatter.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the svfmt CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'svfmt format [PATHS...]' to format files.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(format_command)

cli.add_command(dump_command)

cli.add_command(languages_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
