# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : dump_config.py
#   file_relpath : src/licensetemplate/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseTemplate `dump-config` command.

Dumps the final merged configuration as TOML: built-in defaults, then
``[tool.license-template]`` from the project's ``pyproject.toml``, then any
``--config`` files, then CLI overrides. The TOML is printed between
``# === BEGIN ===`` and ``# === END ===`` markers for easy parsing in tests
or tooling. The output can be used as a standalone ``--config`` file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from licensetemplate.cli.cmd_common import build_config_common, get_effective_verbosity
from licensetemplate.cli.options import (
    CONTEXT_SETTINGS,
    common_check_options,
    common_config_options,
)
from licensetemplate.config.logging import get_logger

if TYPE_CHECKING:
    from licensetemplate.cli.console_api import ConsoleLike
    from licensetemplate.config import Config
    from licensetemplate.config.logging import LicenseTemplateLogger

logger: LicenseTemplateLogger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the final merged LicenseTemplate configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_check_options
def dump_config_command(
    *,
    manifest_path: str | None,
    config_paths: tuple[str, ...],
    no_config: bool,
    template: str | None,
    extensions: tuple[str, ...],
    exclude_patterns: tuple[str, ...],
    no_gitignore: bool,
    jobs: int | None,
    fail_fast: bool,
) -> None:
    """Dump the final merged configuration as TOML.

    Accepts the same configuration options as ``check`` so that the effect
    of an invocation can be inspected without checking any file.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: Config = build_config_common(
        ctx,
        manifest_path=manifest_path,
        config_paths=config_paths,
        no_config=no_config,
        overrides={
            "template": template,
            "extensions": extensions,
            "exclude_patterns": exclude_patterns,
            "use_gitignore": False if no_gitignore else None,
            "jobs": jobs,
            "fail_fast": True if fail_fast else None,
        },
    )
    logger.trace("Config after merging CLI and discovered config: %s", config)

    if get_effective_verbosity(ctx, config) > 0:
        for source in config.config_files:
            console.print(console.styled(f"# source: {source}", dim=True))
    console.print("# === BEGIN ===")
    console.print(config.to_toml(), nl=False)
    console.print("# === END ===")
