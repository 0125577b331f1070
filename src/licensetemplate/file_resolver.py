# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : file_resolver.py
#   file_relpath : src/licensetemplate/file_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the source files to check under a project root.

The resolver walks the project root recursively and keeps regular files whose
name ends with one of the configured extensions. It never descends into
VCS/tool directories or the project's build-output directories, and it skips
anything matched by the configured exclude patterns or, when enabled, by the
root ``.gitignore``. Patterns follow gitignore (gitwildmatch) semantics,
evaluated relative to the project root. The result is a sorted list for
deterministic output.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import GitIgnoreSpec, PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from licensetemplate.config.logging import get_logger
from licensetemplate.constants import GITIGNORE_NAME, IGNORED_DIR_NAMES

if TYPE_CHECKING:
    from collections.abc import Iterable

    from licensetemplate.config import Config
    from licensetemplate.config.logging import LicenseTemplateLogger
    from licensetemplate.project import Project

logger: LicenseTemplateLogger = get_logger(__name__)


def load_patterns_from_file(path: Path) -> list[str]:
    """Load non-empty, non-comment patterns from a gitignore-style file.

    Args:
        path (Path): Pattern file.

    Returns:
        list[str]: The patterns; empty if the file is missing or unreadable.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read patterns from '%s': %s", path, e)
        return []
    patterns: list[str] = []
    for line in text.splitlines():
        s: str = line.strip()
        if not s or s.startswith("#"):
            continue
        patterns.append(s)
    logger.debug("Loaded %d pattern(s) from %s", len(patterns), path)
    return patterns


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()


def find_source_files(
    root: Path,
    *,
    extensions: Iterable[str],
    exclude_dirs: Iterable[Path] = (),
    exclude_patterns: Iterable[str] = (),
    use_gitignore: bool = True,
) -> list[Path]:
    """Return the files under ``root`` that should carry a license header.

    Args:
        root (Path): Directory to walk.
        extensions (Iterable[str]): Filename endings to keep (e.g. ``.py``).
        exclude_dirs (Iterable[Path]): Directories never descended into.
        exclude_patterns (Iterable[str]): Gitwildmatch patterns relative to ``root``.
        use_gitignore (bool): Also honour ``root/.gitignore``.

    Returns:
        list[Path]: Sorted absolute file paths.
    """
    root = root.resolve()
    suffixes: tuple[str, ...] = tuple(extensions)
    excluded_dirs: frozenset[Path] = frozenset(d.resolve() for d in exclude_dirs)

    specs: list[PathSpec] = []
    patterns: list[str] = list(exclude_patterns)
    if patterns:
        specs.append(PathSpec.from_lines(GitWildMatchPattern, patterns))
    if use_gitignore:
        ignore_lines: list[str] = load_patterns_from_file(root / GITIGNORE_NAME)
        if ignore_lines:
            specs.append(GitIgnoreSpec.from_lines(ignore_lines))

    def _is_excluded(rel: str) -> bool:
        return any(spec.match_file(rel) for spec in specs)

    logger.trace(
        """\
    root: %s
    extensions: %s
    excluded_dirs: %s
    exclude_patterns: %s
    use_gitignore: %s
""",
        root,
        suffixes,
        sorted(excluded_dirs),
        patterns,
        use_gitignore,
    )

    if not suffixes:
        logger.warning("No file extensions configured; nothing to check")
        return []

    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        current = Path(dirpath)

        # Prune in place so os.walk never descends into skipped directories
        kept: list[str] = []
        for name in dirnames:
            sub: Path = current / name
            if name in IGNORED_DIR_NAMES or sub in excluded_dirs:
                logger.trace("Skipping directory %s", sub)
                continue
            if _is_excluded(_rel_for_match(sub, root) + "/"):
                logger.trace("Excluded directory %s", sub)
                continue
            kept.append(name)
        dirnames[:] = kept

        for name in filenames:
            if not name.endswith(suffixes):
                continue
            path: Path = current / name
            if not path.is_file():
                continue
            if _is_excluded(_rel_for_match(path, root)):
                logger.trace("Excluded file %s", path)
                continue
            found.append(path)

    logger.debug("Resolved %d file(s) under %s", len(found), root)
    return sorted(found)


def resolve_file_list(project: Project, config: Config) -> list[Path]:
    """Return the files to check for ``project`` using the settings in ``config``."""
    return find_source_files(
        project.root,
        extensions=config.extensions,
        exclude_dirs=project.build_dirs,
        exclude_patterns=config.exclude_patterns,
        use_gitignore=config.use_gitignore,
    )
