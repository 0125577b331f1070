# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : project.py
#   file_relpath : src/licensetemplate/project.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate the project to check.

A project is identified by its ``pyproject.toml`` manifest: the manifest's
directory is the project root, and the configured build-output directories
under that root are excluded from discovery. Without a manifest, the starting
directory itself is the root.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from licensetemplate.config.logging import get_logger
from licensetemplate.constants import PYPROJECT_TOML_NAME
from licensetemplate.core.errors import ProjectError

if TYPE_CHECKING:
    from os import PathLike

    from licensetemplate.config import Config
    from licensetemplate.config.logging import LicenseTemplateLogger

logger: LicenseTemplateLogger = get_logger(__name__)


@dataclass(frozen=True)
class Project:
    """A resolved project.

    Attributes:
        root (Path): Absolute project root; discovery starts here.
        manifest (Path | None): The project's ``pyproject.toml``, if any.
        build_dirs (tuple[Path, ...]): Absolute build-output directories to skip.
    """

    root: Path
    manifest: Path | None
    build_dirs: tuple[Path, ...]


def find_manifest(
    manifest_path: str | PathLike[str] | None = None,
    start: Path | None = None,
) -> Path | None:
    """Return the project manifest to use.

    An explicit ``manifest_path`` must exist. Otherwise the nearest
    ``pyproject.toml`` is searched upward from ``start`` (default: CWD).

    Args:
        manifest_path (str | PathLike[str] | None): Explicit manifest location.
        start (Path | None): Directory to search upward from.

    Returns:
        Path | None: Absolute manifest path, or None if none was found.

    Raises:
        ProjectError: If an explicit ``manifest_path`` is not an existing file.
    """
    if manifest_path is not None:
        p: Path = Path(manifest_path).resolve()
        if not p.is_file():
            raise ProjectError(f"Manifest '{manifest_path}' does not exist or is not a file")
        return p

    anchor: Path = (start or Path.cwd()).resolve()
    if anchor.is_file():
        anchor = anchor.parent
    for directory in (anchor, *anchor.parents):
        candidate: Path = directory / PYPROJECT_TOML_NAME
        if candidate.is_file():
            logger.debug("Found project manifest %s", candidate)
            return candidate
    logger.debug("No %s found above %s", PYPROJECT_TOML_NAME, anchor)
    return None


def discover_project(config: Config, start: Path | None = None) -> Project:
    """Build the `Project` described by ``config``.

    Args:
        config (Config): Frozen configuration; ``config.manifest`` selects the root.
        start (Path | None): Root to use when there is no manifest (default: CWD).

    Returns:
        Project: The resolved project.
    """
    root: Path = (
        config.manifest.parent if config.manifest is not None else (start or Path.cwd())
    ).resolve()
    build_dirs: tuple[Path, ...] = tuple((root / d).resolve() for d in config.build_dirs)
    project = Project(root=root, manifest=config.manifest, build_dirs=build_dirs)
    logger.debug("Project: %s", project)
    return project
