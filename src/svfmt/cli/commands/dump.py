# topmark:header:start
#
#   project      : svfmt
#   file         : dump.py
#   file_relpath : src/svfmt/cli/commands/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""svfmt `dump` command.

Prints the S-expression of the parse tree followed by the one-line-per-node
diagnostic dump. Useful when extending the node-kind tables.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

import click

from svfmt.cli.errors import from_core_error
from svfmt.cli.io import check_input_paths, display_name, read_source, select_language
from svfmt.core.errors import SvfmtError
from svfmt.rendering.api import dump_tree
from svfmt.syntax.languages import registered_languages
from svfmt.syntax.treesitter import parse

if TYPE_CHECKING:
    from svfmt.cli.console import ClickConsole
    from svfmt.syntax.treesitter import ParsedTree


@click.command(
    name="dump",
    help="Print the syntax tree of a file (S-expression, then one line per node).",
)
@click.argument("path", type=str)
@click.option(
    "--language",
    "language",
    type=click.Choice(sorted(registered_languages()), case_sensitive=False),
    default=None,
    help="Source language (default: chosen from the file extension).",
)
@click.option(
    "--stdin-filename",
    "stdin_filename",
    type=str,
    default=None,
    help="Assumed filename when reading content from STDIN via '-'.",
)
def dump_command(*, path: str, language: str | None, stdin_filename: str | None) -> None:
    """Dump the syntax tree of ``path`` ('-' for STDIN)."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    check_input_paths((path,), stdin_filename=stdin_filename)
    name: str = display_name(path, stdin_filename=stdin_filename)
    source: str = read_source(path)
    sink = io.StringIO()
    try:
        spec = select_language(path, language=language, stdin_filename=stdin_filename)
        tree: ParsedTree = parse(source, spec)
        dump_tree(tree.root, sink)
    except SvfmtError as exc:
        raise from_core_error(exc, source=name) from exc

    console.print(tree.sexp)
    console.print(sink.getvalue(), nl=False)
