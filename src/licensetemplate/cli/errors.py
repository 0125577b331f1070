# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : errors.py
#   file_relpath : src/licensetemplate/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the LicenseTemplate CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Core errors are translated with `from_core_error`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from licensetemplate.cli.exit_codes import ExitCode
from licensetemplate.core.errors import (
    ConfigError,
    LicenseTemplateError,
    PatternCompileError,
    ProjectError,
    TemplateParseError,
    TemplateReadError,
)


class LicenseTemplateCliError(click.ClickException):
    """Base class for all LicenseTemplate CLI errors."""

    exit_code = ExitCode.UNEXPECTED_ERROR

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class LicenseTemplateUsageError(LicenseTemplateCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class LicenseTemplateDataError(LicenseTemplateCliError):
    """Error for malformed template text."""

    exit_code = ExitCode.DATA_ERROR


class LicenseTemplateFileNotFoundError(LicenseTemplateCliError):
    """Error when the template file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class LicenseTemplateSoftwareError(LicenseTemplateCliError):
    """Error for internal defects (compiled pattern rejected by ``re``)."""

    exit_code = ExitCode.SOFTWARE_ERROR


class LicenseTemplateIOError(LicenseTemplateCliError):
    """Error for I/O errors reading files."""

    exit_code = ExitCode.IO_ERROR


class LicenseTemplateConfigError(LicenseTemplateCliError):
    """Error for configuration errors (missing template setting or manifest)."""

    exit_code = ExitCode.CONFIG_ERROR


def from_core_error(exc: LicenseTemplateError) -> LicenseTemplateCliError:
    """Translate a core error into the CLI error carrying its exit code.

    Args:
        exc (LicenseTemplateError): Error raised by the core or the API.

    Returns:
        LicenseTemplateCliError: The matching CLI error (same message).
    """
    message: str = str(exc)
    if isinstance(exc, TemplateReadError):
        if exc.not_found:
            return LicenseTemplateFileNotFoundError(message)
        return LicenseTemplateIOError(message)
    if isinstance(exc, TemplateParseError):
        return LicenseTemplateDataError(f"invalid license template: {message}")
    if isinstance(exc, PatternCompileError):
        return LicenseTemplateSoftwareError(message)
    if isinstance(exc, (ConfigError, ProjectError)):
        return LicenseTemplateConfigError(message)
    return LicenseTemplateCliError(message)
