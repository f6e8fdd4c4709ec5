# topmark:header:start
#
#   project      : svfmt
#   file         : __main__.py
#   file_relpath : src/svfmt/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running svfmt via ``python -m svfmt``.

It delegates directly to :func:`svfmt.cli.main.cli`, so there is a single,
authoritative CLI entry point regardless of how svfmt is launched.

Examples:
    Format a file to stdout::

        python -m svfmt format rtl/alu.sv
"""

from __future__ import annotations

from svfmt.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
