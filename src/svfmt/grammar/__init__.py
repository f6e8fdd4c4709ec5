# topmark:header:start
#
#   project      : svfmt
#   file         : __init__.py
#   file_relpath : src/svfmt/grammar/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Grammar knowledge: the closed `Kind` set and the node-kind classifier."""

from __future__ import annotations

from svfmt.grammar.classifier import KindTable, SymbolClassifier, load_kind_table
from svfmt.grammar.kinds import Kind

__all__ = [
    "Kind",
    "KindTable",
    "SymbolClassifier",
    "load_kind_table",
]
