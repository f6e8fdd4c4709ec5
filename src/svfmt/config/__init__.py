# topmark:header:start
#
#   project      : svfmt
#   file         : __init__.py
#   file_relpath : src/svfmt/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public configuration API for svfmt.

Re-exports the configuration model and the value types so callers can write
``from svfmt.config import Config, MutableConfig``.
"""

from __future__ import annotations

from svfmt.config.model import ArgsLike, Config, MutableConfig
from svfmt.config.types import ErrorNodePolicy, TomlTable

__all__ = [
    "ArgsLike",
    "Config",
    "ErrorNodePolicy",
    "MutableConfig",
    "TomlTable",
]
