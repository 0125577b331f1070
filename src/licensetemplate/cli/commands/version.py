# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : version.py
#   file_relpath : src/licensetemplate/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseTemplate `version` command.

Prints the LicenseTemplate version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from licensetemplate.cli.options import CONTEXT_SETTINGS, OutputFormat
from licensetemplate.constants import LICENSE_TEMPLATE_VERSION

if TYPE_CHECKING:
    from licensetemplate.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of LicenseTemplate.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.DEFAULT.value,
    help="Output format.",
)
def version_command(*, output_format: str) -> None:
    """Show the current version of LicenseTemplate."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if OutputFormat(output_format) is OutputFormat.JSON:
        console.print(json.dumps({"version": LICENSE_TEMPLATE_VERSION}))
    else:
        console.print(LICENSE_TEMPLATE_VERSION)
