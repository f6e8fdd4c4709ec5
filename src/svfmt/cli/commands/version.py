# topmark:header:start
#
#   project      : svfmt
#   file         : version.py
#   file_relpath : src/svfmt/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""svfmt `version` command.

Prints the svfmt version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from svfmt.cli.options import get_effective_verbosity
from svfmt.constants import SVFMT_VERSION

if TYPE_CHECKING:
    from svfmt.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of svfmt.",
)
def version_command() -> None:
    """Show the current version of svfmt."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("svfmt version:", bold=True, underline=True))
        console.print(f"    {console.styled(SVFMT_VERSION, bold=True)}")
    else:
        console.print(console.styled(SVFMT_VERSION, bold=True))
