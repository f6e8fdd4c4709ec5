# topmark:header:start
#
#   project      : svfmt
#   file         : languages.py
#   file_relpath : src/svfmt/cli/commands/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""svfmt `languages` command.

Lists the registered source languages with the file extensions that select
them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from svfmt.cli.options import get_effective_verbosity
from svfmt.syntax.languages import DEFAULT_LANGUAGE, registered_languages

if TYPE_CHECKING:
    from svfmt.cli.console import ClickConsole


@click.command(
    name="languages",
    help="List the supported source languages and their file extensions.",
)
def languages_command() -> None:
    """List the supported source languages."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)

    for name, spec in sorted(registered_languages().items()):
        marker: str = " (default)" if spec is DEFAULT_LANGUAGE else ""
        line: str = f"{console.styled(name, bold=True)}{marker}: {' '.join(spec.extensions)}"
        console.print(line)
        if vlevel > 0:
            console.print(f"    {spec.description} [{spec.module}]")
