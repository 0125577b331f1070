# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : cmd_common.py
#   file_relpath : src/licensetemplate/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by LicenseTemplate CLI commands.

These helpers keep commands thin: configuration is resolved through the
public API, and core errors are turned into CLI errors with the right exit
code in one place.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from licensetemplate.api import resolve_config
from licensetemplate.cli.errors import from_core_error
from licensetemplate.config.logging import get_logger
from licensetemplate.core.errors import LicenseTemplateError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from licensetemplate.config import Config
    from licensetemplate.config.logging import LicenseTemplateLogger

logger: LicenseTemplateLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context, config: Config | None = None) -> int:
    """Return the effective program-output verbosity for this command.

    Resolution order (tri-state aware):
        1. Config.verbosity_level if set (not None)
        2. ctx.obj["verbosity_level"] if present
        3. 0 (terse)
    """
    cfg_level = config.verbosity_level if config is not None else None
    if cfg_level is not None:
        return int(cfg_level)
    return int(ctx.obj.get("verbosity_level", 0))


def build_config_common(
    ctx: click.Context,
    *,
    manifest_path: str | None,
    config_paths: Iterable[str],
    no_config: bool,
    overrides: dict[str, Any],
) -> Config:
    """Resolve the effective configuration for a command.

    Args:
        ctx (click.Context): Current Click context (provides the verbosity level).
        manifest_path (str | None): Value of ``--manifest-path``.
        config_paths (Iterable[str]): Values of ``--config``.
        no_config (bool): Value of ``--no-config``.
        overrides (dict[str, Any]): CLI overrides keyed as in `MutableConfig.apply_cli_args`.

    Returns:
        Config: The frozen configuration.

    Raises:
        LicenseTemplateConfigError: If the explicit manifest does not exist.
    """
    args: dict[str, Any] = {"verbosity_level": ctx.obj.get("verbosity_level"), **overrides}
    try:
        return resolve_config(
            manifest_path=manifest_path,
            config_files=[Path(p) for p in config_paths],
            no_config=no_config,
            overrides=args,
        )
    except LicenseTemplateError as exc:
        raise from_core_error(exc) from exc


def display_path(path: Path, base: Path | None = None) -> str:
    """Return ``path`` relative to ``base`` (default: CWD) when possible."""
    anchor: Path = (base or Path.cwd()).resolve()
    try:
        return path.relative_to(anchor).as_posix()
    except ValueError:
        return str(path)
