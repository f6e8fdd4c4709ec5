# topmark:header:start
#
#   project      : svfmt
#   file         : __init__.py
#   file_relpath : src/svfmt/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering of syntax trees into formatted text.

- ``buffer``: the render buffer (sole mutable state of a render call)
- ``gaps``: blank-line normalization between sibling items
- ``wrap``: measure-then-commit wrapping of port lists
- ``renderer``: Kind-keyed rule registry with a structural fallback
- ``api``: ``format_tree`` / ``format_source`` / ``dump_tree``
"""

from __future__ import annotations

from svfmt.rendering.buffer import RenderBuffer
from svfmt.rendering.gaps import GapPolicy, blank_lines_between
from svfmt.rendering.renderer import NodeRenderer, renders
from svfmt.rendering.wrap import WrapPlanner

__all__ = [
    "GapPolicy",
    "NodeRenderer",
    "RenderBuffer",
    "WrapPlanner",
    "blank_lines_between",
    "renders",
]
