# topmark:header:start
#
#   project      : svfmt
#   file         : format.py
#   file_relpath : src/svfmt/cli/commands/format.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""svfmt `format` command.

Formats SystemVerilog sources. By default the formatted text of every input is
written to stdout; ``--check`` only reports, ``--diff`` shows a unified diff,
and ``--apply`` rewrites the files in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from svfmt.cli.errors import SvfmtConfigError, SvfmtUsageError, from_core_error
from svfmt.cli.exit_codes import ExitCode
from svfmt.cli.io import (
    STDIN_SENTINEL,
    check_input_paths,
    display_name,
    read_source,
    select_language,
    write_source,
)
from svfmt.cli.options import (
    common_config_options,
    common_layout_options,
    get_effective_verbosity,
)
from svfmt.config.logging import get_logger
from svfmt.config.model import MutableConfig
from svfmt.core.errors import SvfmtError
from svfmt.rendering.api import format_source
from svfmt.utils.diff import make_patch, render_patch

if TYPE_CHECKING:
    from svfmt.cli.console import ClickConsole
    from svfmt.config.model import Config
    from svfmt.config.types import ErrorNodePolicy
    from svfmt.syntax.languages import LanguageSpec

logger = get_logger(__name__)


def build_config(
    *,
    no_config: bool,
    config_paths: tuple[str, ...],
    language: str | None,
    line_width: int | None,
    indent_width: int | None,
    error_nodes: ErrorNodePolicy | None,
) -> Config:
    """Merge discovered config, explicit ``--config`` files and CLI flags.

    Raises:
        SvfmtConfigError: If a config file cannot be read or holds invalid values.
    """
    args = {
        "language": language,
        "line_width": line_width,
        "indent_width": indent_width,
        "error_nodes": error_nodes,
    }
    try:
        draft = MutableConfig.load_merged(
            start=Path.cwd(),
            extra_files=[Path(p) for p in config_paths],
            no_config=no_config,
            args=args,
        )
        return draft.freeze()
    except (OSError, ValueError) as exc:
        raise SvfmtConfigError(str(exc)) from exc


@click.command(
    name="format",
    help="Format SystemVerilog files (formatted text goes to stdout unless --apply).",
    epilog="""\
Examples:

  # Print the formatted file
  svfmt format rtl/alu.sv

  # Fail (exit 2) if any file is not formatted
  svfmt format --check rtl/*.sv

  # Rewrite files in place
  svfmt format --apply rtl/*.sv

  # Format STDIN
  cat alu.sv | svfmt format - --stdin-filename alu.sv
""",
)
@click.argument("paths", nargs=-1, type=str)
@common_config_options
@common_layout_options
@click.option(
    "--stdin-filename",
    "stdin_filename",
    type=str,
    default=None,
    help="Assumed filename when reading content from STDIN via '-' (selects the language).",
)
@click.option("--check", "check", is_flag=True, help="Report unformatted files; write nothing.")
@click.option("--diff", "diff", is_flag=True, help="Show unified diffs instead of full output.")
@click.option(
    "--apply", "apply_changes", is_flag=True, help="Rewrite files in place (off by default)."
)
def format_command(
    *,
    paths: tuple[str, ...],
    no_config: bool,
    config_paths: tuple[str, ...],
    language: str | None,
    line_width: int | None,
    indent_width: int | None,
    error_nodes: ErrorNodePolicy | None,
    stdin_filename: str | None,
    check: bool,
    diff: bool,
    apply_changes: bool,
) -> None:
    """Format the given files.

    Args:
        paths (tuple[str, ...]): Files to format, or a single '-' for STDIN.
        no_config (bool): Skip config discovery.
        config_paths (tuple[str, ...]): Extra config files.
        language (str | None): Language override.
        line_width (int | None): Width budget override.
        indent_width (int | None): Indentation override.
        error_nodes (ErrorNodePolicy | None): Error-node policy override.
        stdin_filename (str | None): Name assumed for STDIN content.
        check (bool): Report only; exit 2 if a file would change.
        diff (bool): Print unified diffs.
        apply_changes (bool): Rewrite files in place.

    Raises:
        SvfmtUsageError: For conflicting flags or missing input.

    Exit Status:
        SUCCESS (0): Every input was formatted (or already formatted with ``--check``).
        WOULD_CHANGE (2): ``--check`` found at least one unformatted input.
        USAGE_ERROR (64): Invalid invocation.
        ENCODING_ERROR (65): An input is not valid UTF-8.
        FILE_NOT_FOUND (66): An input file does not exist.
        LANGUAGE_ERROR (69): The grammar could not be loaded.
        FORMAT_ERROR (70): A syntax tree could not be rendered.
        IO_ERROR (74): A file could not be read or written.
        CONFIG_ERROR (78): Invalid configuration.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = get_effective_verbosity(ctx)

    if check and apply_changes:
        raise SvfmtUsageError(f"{ctx.command.name}: --check and --apply are mutually exclusive.")
    check_input_paths(paths, stdin_filename=stdin_filename)

    config: Config = build_config(
        no_config=no_config,
        config_paths=config_paths,
        language=language,
        line_width=line_width,
        indent_width=indent_width,
        error_nodes=error_nodes,
    )
    logger.debug("Effective config: %s", config)

    changed: list[str] = []
    for path_arg in paths:
        name: str = display_name(path_arg, stdin_filename=stdin_filename)
        source: str = read_source(path_arg)
        try:
            spec: LanguageSpec = select_language(
                path_arg, language=config.language, stdin_filename=stdin_filename
            )
            formatted: str = format_source(source, spec, config=config)
        except SvfmtError as exc:
            raise from_core_error(exc, source=name) from exc

        is_changed: bool = formatted != source
        if is_changed:
            changed.append(name)
        logger.info("%s: %s", name, "reformatted" if is_changed else "unchanged")

        if diff:
            patch: list[str] = make_patch(source, formatted, name=name)
            if patch:
                rendered: str = render_patch(patch) if ctx.color else "".join(patch)
                console.print(rendered, nl=not rendered.endswith("\n"))
        if check:
            if is_changed and vlevel >= 0:
                console.warn(f"would reformat {name}")
            continue
        if apply_changes and path_arg != STDIN_SENTINEL:
            if is_changed:
                write_source(path_arg, formatted)
            continue
        if not diff:
            console.print(formatted, nl=False)

    if vlevel > 0:
        verb: str = "would be reformatted" if check else "reformatted"
        console.warn(f"{len(changed)} of {len(paths)} file(s) {verb}.")

    if check and changed:
        ctx.exit(ExitCode.WOULD_CHANGE)
