# topmark:header:start
#
#   project      : svfmt
#   file         : __init__.py
#   file_relpath : src/svfmt/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, framework-agnostic building blocks shared by the renderer, the API and the CLI."""
