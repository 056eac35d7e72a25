# topmark:header:start
#
#   project      : DialScript
#   file         : exit_codes.py
#   file_relpath : src/dialscript/cli/exit_codes.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 Arsenii Motorin
#
# topmark:header:end

"""Exit codes for the DialScript CLI.

The CLI follows the BSD `sysexits` convention for operational failures, so that
other tooling can interpret them consistently. Below that range, ``check``
reports the number of diagnostics found (capped at `MAX_DIAGNOSTIC_EXIT`), and
``fix`` uses ``WOULD_CHANGE = 2`` to signal a dry run that would rewrite files.
Click's own usage errors also exit with 2; tests check the output as well as the
status to tell them apart.
"""

from enum import IntEnum

MAX_DIAGNOSTIC_EXIT: int = 63


class ExitCode(IntEnum):
    """Standardized exit codes for the DialScript CLI.

    Attributes:
        SUCCESS: Successful execution; no diagnostics.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: Dry-run: ``fix --apply`` would rewrite files.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Text decoding error. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions. Mirrors BSD ``EX_NOPERM (77)``.
        CONFIG_ERROR: Invalid or unreadable config. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255


def diagnostic_exit_code(count: int) -> int:
    """Return the exit status for a run that found ``count`` diagnostics."""
    return min(max(count, 0), MAX_DIAGNOSTIC_EXIT)
