# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : exit_codes.py
#   file_relpath : src/licensetemplate/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the LicenseTemplate CLI.

LicenseTemplate aligns with the BSD `sysexits` convention where practical, so
that other tooling can interpret failures consistently. ``CONFLICT = 1`` is the
ordinary "check failed" status, the same value a linter uses for findings.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the LicenseTemplate CLI.

    Attributes:
        SUCCESS: Every checked file contains the license header.
        CONFLICT: At least one file does not contain the license header.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        DATA_ERROR: The template text is malformed (placeholder syntax). Mirrors
            BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: The template file does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        SOFTWARE_ERROR: The compiled template is not a valid pattern (internal
            defect). Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: A template or source file could not be read. Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (no template, missing manifest).
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    CONFLICT = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    SOFTWARE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
