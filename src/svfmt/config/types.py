# topmark:header:start
#
#   project      : svfmt
#   file         : types.py
#   file_relpath : src/svfmt/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration value types shared by the config layer, the renderer and the CLI."""

from __future__ import annotations

from enum import Enum
from typing import Any

TomlTable = dict[str, Any]


class ErrorNodePolicy(str, Enum):
    """How the renderer treats parser error-recovery nodes (``ERROR`` / missing tokens).

    Attributes:
        FAIL: Abort the render call with a ``StructuralMismatch`` pointing at the
            first error node. Nothing is written to the sink.
        VERBATIM: Emit the error node's source text unchanged and keep going.
    """

    FAIL = "fail"
    VERBATIM = "verbatim"
