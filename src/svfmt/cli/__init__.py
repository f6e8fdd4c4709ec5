# topmark:header:start
#
#   project      : svfmt
#   file         : __init__.py
#   file_relpath : src/svfmt/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface for svfmt.

The group and its subcommands live in ``svfmt.cli.main`` and
``svfmt.cli.commands``; errors raised by the core are translated to the
exceptions in ``svfmt.cli.errors`` so that every failure has a stable exit code.
"""
