# topmark:header:start
#
#   project      : svfmt
#   file         : gen_kind_table.py
#   file_relpath : tools/gen_kind_table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end
"""Refresh a packaged node-kind table after a grammar upgrade.

Reads ``src/svfmt/grammar/tables/<language>.toml`` with tomlkit (comments and
ordering are preserved), records the installed grammar package version,
reports assignments whose node kind no longer exists in the grammar, and with
``--list-new`` appends every unassigned node kind as a commented-out entry so
it can be classified by hand.

Usage:
    python tools/gen_kind_table.py verilog
    python tools/gen_kind_table.py c --list-new
"""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

import tomlkit
from tomlkit.items import Table

from svfmt.syntax.languages import get_language
from svfmt.syntax.treesitter import grammar_metadata, load_language

TABLES_DIR = Path(__file__).resolve().parents[1] / "src" / "svfmt" / "grammar" / "tables"


def _section(doc: tomlkit.TOMLDocument, name: str) -> Table:
    section = doc.get(name)
    if not isinstance(section, Table):
        section = tomlkit.table()
        doc[name] = section
    return section


def refresh(language_name: str, *, list_new: bool) -> int:
    """Refresh the table of ``language_name`` in place.

    Returns:
        int: Number of stale assignments found.
    """
    spec = get_language(language_name)
    path: Path = TABLES_DIR / spec.table_name
    doc: tomlkit.TOMLDocument = tomlkit.parse(path.read_text(encoding="utf-8"))

    grammar = _section(doc, "grammar")
    package = str(grammar.get("package", spec.module.replace("_", "-")))
    try:
        grammar["version"] = version(package)
    except PackageNotFoundError:
        print(f"warning: {package} is not installed; version left unchanged", file=sys.stderr)

    named = _section(doc, "named")
    anonymous = _section(doc, "anonymous")
    declared: dict[bool, set[str]] = {True: set(), False: set()}
    for info in grammar_metadata(load_language(spec)):
        declared[info.is_named].add(info.name)

    stale = 0
    for is_named, section in ((True, named), (False, anonymous)):
        for key in section:
            if key not in declared[is_named]:
                stale += 1
                kind = "named" if is_named else "anonymous"
                print(f"stale: [{kind}] {key} is not a node kind of {spec.name}")
        if list_new:
            new = sorted(declared[is_named] - set(section))
            if new:
                section.add(tomlkit.nl())
                section.add(tomlkit.comment("Unassigned node kinds"))
                for name in new:
                    entry = f"{tomlkit.string(name).as_string()} = \"UNKNOWN\""
                    section.add(tomlkit.comment(entry))

    path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    print(f"Updated {path}")
    return stale


def main(argv: list[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("language", help="Registered language name (e.g. verilog, c).")
    parser.add_argument(
        "--list-new",
        action="store_true",
        help="Append unassigned node kinds as commented-out entries.",
    )
    args = parser.parse_args(argv)
    return 1 if refresh(args.language, list_new=args.list_new) else 0


if __name__ == "__main__":
    raise SystemExit(main())
