# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : options.py
#   file_relpath : src/licensetemplate/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, configuration)
and their resolution logic, so commands and groups can stay thin. The helpers
here are Click-aware.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from licensetemplate.cli.errors import LicenseTemplateUsageError

P = ParamSpec("P")
R = TypeVar("R")


class OutputFormat(str, Enum):
    """Program-output format for reporting commands."""

    DEFAULT = "default"
    JSON = "json"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``0`` by default, ``1``/``2`` for ``-v``/``-vv`` and ``-1`` for ``-q``.

    Raises:
        LicenseTemplateUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise LicenseTemplateUsageError(
            "The '--verbose' and '--quiet' options are mutually exclusive."
        )
    if verbose_count > 0:
        return min(verbose_count, 2)
    if quiet_count > 0:
        return -1
    return 0


#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Behavior:
        Adds -v/--verbose and -q/--quiet options that count occurrences.
        These options are mutually exclusive and control program-output verbosity.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report failures; suppress the summary.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        output_format: Output format string, e.g. "json".
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Disables color for JSON output.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format and output_format.lower() == OutputFormat.JSON.value:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError, OSError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Behavior:
        Adds --color with choices (auto, always, never).
        Adds --no-color flag that disables color output.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--manifest-path``, ``--config`` and ``--no-config``.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore [tool.license-template] in pyproject.toml.",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    f = click.option(
        "--manifest-path",
        "manifest_path",
        metavar="FILE",
        type=click.Path(dir_okay=False),
        default=None,
        help="Path to the project's pyproject.toml (default: nearest one above CWD).",
    )(f)
    return f


def common_check_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the options that select the template and the files to check."""
    f = click.option(
        "--template",
        "template",
        metavar="FILE",
        type=click.Path(dir_okay=False),
        default=None,
        help="License template file (required unless configured).",
    )(f)
    f = click.option(
        "--extension",
        "extensions",
        multiple=True,
        metavar="EXT",
        help="File extension to check (repeatable; replaces the configured list).",
    )(f)
    f = click.option(
        "--exclude",
        "exclude_patterns",
        multiple=True,
        metavar="PATTERN",
        help="Gitignore-style pattern to exclude, relative to the project root (repeatable).",
    )(f)
    f = click.option(
        "--no-gitignore",
        "no_gitignore",
        is_flag=True,
        help="Do not honour the project's root .gitignore.",
    )(f)
    f = click.option(
        "--jobs",
        "-j",
        "jobs",
        type=click.IntRange(min=0),
        default=None,
        help="Number of worker threads (0 = one per CPU).",
    )(f)
    f = click.option(
        "--fail-fast",
        "fail_fast",
        is_flag=True,
        help="Stop at the first file that does not conform.",
    )(f)
    return f
