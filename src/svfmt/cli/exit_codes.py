# topmark:header:start
#
#   project      : svfmt
#   file         : exit_codes.py
#   file_relpath : src/svfmt/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the svfmt CLI.

svfmt aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. The one deliberate divergence is
`WOULD_CHANGE=2`, returned by ``svfmt format --check`` when a file is not
formatted. Tests must assert `result.exception is None` to disambiguate it from
Click's own usage errors (which also exit with 2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the svfmt CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: Check mode: at least one file is not formatted.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Input is not valid UTF-8. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        LANGUAGE_ERROR: The grammar could not be loaded. Mirrors BSD
            ``EX_UNAVAILABLE (69)``.
        FORMAT_ERROR: The syntax tree could not be rendered. Mirrors BSD
            ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see class docstring

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    LANGUAGE_ERROR = 69  # EX_UNAVAILABLE
    FORMAT_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
