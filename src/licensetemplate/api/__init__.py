# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : __init__.py
#   file_relpath : src/licensetemplate/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public LicenseTemplate API (stable surface).

This module exposes a small, typed API for integrations that want to check
license headers programmatically without going through the CLI. The CLI is a
thin layer over the same functions.

Configuration contract
----------------------
- `resolve_config` performs manifest discovery and layered merging, then
  freezes the result into an immutable [`licensetemplate.config.Config`][].
- `run_check` runs against that snapshot only; it never reads configuration
  itself.
- `check` combines both for the common case:

```python
from licensetemplate import api

run = api.check(template="LICENSE_HEADER.txt", overrides={"jobs": 4})
if not run.passed:
    for result in run.conflicting:
        print(result.path)
```

Errors
------
Template problems raise a subclass of
[`licensetemplate.core.errors.TemplateError`][]; a missing template setting
raises [`licensetemplate.core.errors.ConfigError`][]; an explicit manifest
that does not exist raises [`licensetemplate.core.errors.ProjectError`][].
Per-file read failures never raise; they are reported on the run.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from licensetemplate.api.types import CheckRun, RunSummary
from licensetemplate.checker import check_files
from licensetemplate.config import Config, MutableConfig
from licensetemplate.config.logging import get_logger
from licensetemplate.core.errors import ConfigError
from licensetemplate.file_resolver import resolve_file_list
from licensetemplate.project import discover_project, find_manifest
from licensetemplate.template.compiler import load_and_compile_template

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping
    from os import PathLike

    from licensetemplate.checker import ConformanceResult
    from licensetemplate.config.logging import LicenseTemplateLogger
    from licensetemplate.project import Project
    from licensetemplate.template.compiler import TemplateMatcher

logger: LicenseTemplateLogger = get_logger(__name__)


def resolve_config(
    *,
    manifest_path: str | PathLike[str] | None = None,
    config_files: Iterable[str | PathLike[str]] = (),
    no_config: bool = False,
    overrides: Mapping[str, Any] | None = None,
    start: Path | None = None,
) -> Config:
    """Discover the project manifest and merge all configuration layers.

    Args:
        manifest_path (str | PathLike[str] | None): Explicit ``pyproject.toml``;
            searched upward from ``start`` when omitted.
        config_files (Iterable[str | PathLike[str]]): Extra config files merged
            after the manifest, in order.
        no_config (bool): Ignore ``[tool.license-template]`` in the manifest.
        overrides (Mapping[str, Any] | None): Highest-precedence values, keyed
            like `MutableConfig.apply_cli_args` expects.
        start (Path | None): Directory to search upward from (default: CWD).

    Returns:
        Config: The frozen configuration.

    Raises:
        ProjectError: If ``manifest_path`` is given but is not an existing file.
    """
    manifest: Path | None = find_manifest(manifest_path, start)
    draft: MutableConfig = MutableConfig.load_merged(
        manifest=manifest,
        extra_config_files=[Path(p) for p in config_files],
        no_config=no_config,
    )
    if overrides:
        draft.apply_cli_args(overrides)
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config


def run_check(
    config: Config,
    *,
    start: Path | None = None,
    on_result: Callable[[ConformanceResult], None] | None = None,
) -> CheckRun:
    """Check every source file of the configured project against the template.

    The template is loaded and compiled once, before any file is read, so a
    template problem aborts the run without checking anything.

    Args:
        config (Config): Frozen configuration.
        start (Path | None): Project root when ``config`` has no manifest (default: CWD).
        on_result (Callable[[ConformanceResult], None] | None): Called with each
            result as soon as it is available, in input order.

    Returns:
        CheckRun: Results and aggregate view of the run.

    Raises:
        ConfigError: If no template is configured.
        TemplateError: If the template cannot be read, parsed or compiled.
    """
    if config.template is None:
        raise ConfigError(
            "No license template configured; pass --template or set "
            "'template' in [tool.license-template]"
        )

    matcher: TemplateMatcher = load_and_compile_template(config.template)
    project: Project = discover_project(config, start)
    files: list[Path] = resolve_file_list(project, config)
    logger.info("Checking %d file(s) under %s", len(files), project.root)

    results: list[ConformanceResult] = []
    for result in check_files(matcher, files, jobs=config.jobs, fail_fast=config.fail_fast):
        results.append(result)
        if on_result is not None:
            on_result(result)

    run = CheckRun(
        template=config.template,
        matcher=matcher,
        project=project,
        files=tuple(files),
        results=tuple(results),
    )
    logger.debug("Run summary: %s", run.summary())
    return run


def check(
    template: str | PathLike[str] | None = None,
    *,
    manifest_path: str | PathLike[str] | None = None,
    overrides: Mapping[str, Any] | None = None,
    start: Path | None = None,
) -> CheckRun:
    """Resolve configuration and run a check in one call.

    Args:
        template (str | PathLike[str] | None): Template file; overrides the
            configured one when given.
        manifest_path (str | PathLike[str] | None): Explicit ``pyproject.toml``.
        overrides (Mapping[str, Any] | None): Additional configuration overrides.
        start (Path | None): Directory to search upward from (default: CWD).

    Returns:
        CheckRun: Results and aggregate view of the run.
    """
    args: dict[str, Any] = dict(overrides or {})
    if template is not None:
        args["template"] = template
    config: Config = resolve_config(manifest_path=manifest_path, overrides=args, start=start)
    return run_check(config, start=start)


__all__ = [
    "CheckRun",
    "RunSummary",
    "check",
    "resolve_config",
    "run_check",
]
