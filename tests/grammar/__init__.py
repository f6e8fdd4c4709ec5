# topmark:header:start
#
#   project      : svfmt
#   file         : __init__.py
#   file_relpath : tests/grammar/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Grammar and language tests."""
