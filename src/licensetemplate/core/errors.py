# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : errors.py
#   file_relpath : src/licensetemplate/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed errors raised by the LicenseTemplate core.

The core never prints or exits. It raises (or, for per-file read failures,
returns) the exceptions below and leaves presentation and exit-status policy
to the caller. The CLI maps each type onto a Click exception with a
sysexits-aligned exit code (see `licensetemplate.cli.errors`).

Hierarchy:
    LicenseTemplateError
      ├── TemplateError
      │     ├── TemplateReadError
      │     ├── TemplateParseError
      │     └── PatternCompileError
      ├── FileReadError
      ├── ProjectError
      └── ConfigError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class LicenseTemplateError(Exception):
    """Base class for all LicenseTemplate core errors."""


class TemplateError(LicenseTemplateError):
    """Base class for errors that make a template unusable (fatal to a run)."""


class TemplateReadError(TemplateError):
    """The template file could not be read.

    Attributes:
        path (Path): Template file path.
        reason (str): Human-readable cause (not found, permission denied, ...).
        not_found (bool): True when the file does not exist.
    """

    def __init__(self, path: Path, reason: str, *, not_found: bool = False) -> None:
        super().__init__(f"Cannot read license template '{path}': {reason}")
        self.path = path
        self.reason = reason
        self.not_found = not_found


class TemplateParseError(TemplateError):
    """The template text uses the placeholder syntax incorrectly.

    Raised for an opening delimiter without a matching closing delimiter and
    for unknown (or empty) placeholder kinds.

    Attributes:
        reason (str): What went wrong.
        line (int): 1-based line of the offending placeholder.
        column (int): 1-based column of the offending placeholder.
    """

    def __init__(self, reason: str, *, line: int, column: int) -> None:
        super().__init__(f"parsing failed, {reason} (line {line}, column {column})")
        self.reason = reason
        self.line = line
        self.column = column


class PatternCompileError(TemplateError):
    """The assembled pattern is not a valid regular expression.

    Escaping and substitution should always yield a valid pattern; this error
    signals a defect and is never swallowed.

    Attributes:
        pattern (str): The pattern that failed to compile.
    """

    def __init__(self, pattern: str, cause: Exception) -> None:
        super().__init__(f"Compiled license template is not a valid pattern: {cause}")
        self.pattern = pattern


class FileReadError(LicenseTemplateError):
    """A candidate source file could not be read as UTF-8 text.

    This is a per-file failure. The checker reports it on the file's result
    instead of raising, so one unreadable file never affects the others.

    Attributes:
        path (Path): The offending file.
        reason (str): Human-readable cause.
    """

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to read file '{path}': {reason}")
        self.path = path
        self.reason = reason


class ProjectError(LicenseTemplateError):
    """The explicitly requested project manifest does not exist."""


class ConfigError(LicenseTemplateError):
    """The effective configuration cannot drive a run (e.g. no template configured)."""
