# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : check.py
#   file_relpath : src/licensetemplate/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseTemplate `check` command.

Verifies that every source file of the project contains the license header
described by the template. Files are reported as they are checked:

* default output: one line per file that does not conform (or could not be
  read), followed by a summary; ``-v`` also lists conforming files.
* ``--format json``: a single JSON document with per-file results and counts.

Exit status:
    0 when every file conforms, 1 when at least one file does not, 74 when
    files could not be read (and none conflicts). Template and configuration
    problems exit with the codes listed in `licensetemplate.cli.exit_codes`.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from licensetemplate.api import run_check
from licensetemplate.checker import Conformance
from licensetemplate.cli.cmd_common import (
    build_config_common,
    display_path,
    get_effective_verbosity,
)
from licensetemplate.cli.errors import from_core_error
from licensetemplate.cli.exit_codes import ExitCode
from licensetemplate.cli.options import (
    CONTEXT_SETTINGS,
    OutputFormat,
    common_check_options,
    common_config_options,
)
from licensetemplate.config.logging import get_logger
from licensetemplate.core.errors import LicenseTemplateError

if TYPE_CHECKING:
    from licensetemplate.api import CheckRun
    from licensetemplate.checker import ConformanceResult
    from licensetemplate.cli.console_api import ConsoleLike
    from licensetemplate.config import Config
    from licensetemplate.config.logging import LicenseTemplateLogger

logger: LicenseTemplateLogger = get_logger(__name__)


def _result_line(console: ConsoleLike, result: ConformanceResult) -> str:
    path: str = display_path(result.path)
    if result.error is not None:
        return console.styled(
            f"file '{path}' could not be read: {result.error.reason}", fg="yellow"
        )
    if result.conformance is Conformance.CONFLICT:
        return console.styled(f"file '{path}' does not match the license template", fg="red")
    return f"Checking file '{path}' ... " + console.styled("ok", fg="green")


def _result_dict(result: ConformanceResult) -> dict[str, Any]:
    return {
        "path": str(result.path),
        "status": result.conformance.value if result.conformance is not None else "unreadable",
        "error": result.error.reason if result.error is not None else None,
    }


def _render_json(run: CheckRun) -> str:
    payload: dict[str, Any] = {
        "template": str(run.template),
        "root": str(run.project.root),
        "results": [_result_dict(r) for r in run.results],
        "summary": dict(run.summary()),
        "stopped_early": run.stopped_early,
    }
    return json.dumps(payload, indent=2)


def _render_summary(console: ConsoleLike, run: CheckRun) -> None:
    summary = run.summary()
    text: str = (
        f"{summary['checked']} file(s) checked: {summary['conform']} ok, "
        f"{summary['conflict']} not matching, {summary['unreadable']} unreadable"
    )
    if run.stopped_early:
        text += f" (stopped early, {summary['files'] - summary['checked']} not checked)"
    console.print(console.styled(text, bold=True))


def exit_code_for(run: CheckRun) -> ExitCode:
    """Map a finished run onto the process exit code."""
    if run.conflicting:
        return ExitCode.CONFLICT
    if run.unreadable:
        return ExitCode.IO_ERROR
    return ExitCode.SUCCESS


@click.command(
    name="check",
    help="Check that every source file contains the license header from a template.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@common_check_options
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.DEFAULT.value,
    show_default=True,
    help="Output format.",
)
def check_command(
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
    output_format: str,
) -> None:
    """Check license headers across the project.

    Args:
        manifest_path (str | None): Explicit ``pyproject.toml``.
        config_paths (tuple[str, ...]): Extra config files to merge.
        no_config (bool): Ignore ``[tool.license-template]`` in the manifest.
        template (str | None): License template file.
        extensions (tuple[str, ...]): File extensions to check.
        exclude_patterns (tuple[str, ...]): Gitignore-style exclusion patterns.
        no_gitignore (bool): Do not honour the root ``.gitignore``.
        jobs (int | None): Worker threads (0 = one per CPU).
        fail_fast (bool): Stop at the first non-conforming file.
        output_format (str): ``default`` or ``json``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    fmt = OutputFormat(output_format)

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
    vlevel: int = get_effective_verbosity(ctx, config)

    def _on_result(result: ConformanceResult) -> None:
        if fmt is OutputFormat.JSON:
            return
        if result.error is not None:
            console.warn(_result_line(console, result))
        elif not result.ok or vlevel > 0:
            console.print(_result_line(console, result))

    try:
        run: CheckRun = run_check(config, on_result=_on_result)
    except LicenseTemplateError as exc:
        raise from_core_error(exc) from exc

    if fmt is OutputFormat.JSON:
        console.print(_render_json(run))
    elif not run.files:
        if vlevel >= 0:
            console.warn(f"No files to check under {run.project.root}.")
    elif vlevel >= 0:
        _render_summary(console, run)

    code: ExitCode = exit_code_for(run)
    if code is not ExitCode.SUCCESS:
        ctx.exit(code)
