# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : types.py
#   file_relpath : src/licensetemplate/api/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stable public types for the LicenseTemplate API.

This module defines the dataclasses and TypedDicts returned by
[`licensetemplate.api`][licensetemplate.api]. These shapes follow the
project's semver policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypedDict

from licensetemplate.checker import Conformance, ConformanceResult

if TYPE_CHECKING:
    from pathlib import Path

    from licensetemplate.project import Project
    from licensetemplate.template.compiler import TemplateMatcher


class RunSummary(TypedDict):
    """Aggregate counts for a check run.

    Attributes:
        files (int): Number of files discovered.
        checked (int): Number of files actually checked.
        conform (int): Files containing the license header.
        conflict (int): Files missing the license header.
        unreadable (int): Files that could not be read.
    """

    files: int
    checked: int
    conform: int
    conflict: int
    unreadable: int


@dataclass(frozen=True)
class CheckRun:
    """Outcome of a full check run.

    Attributes:
        template (Path): The template file that was compiled.
        matcher (TemplateMatcher): The compiled template.
        project (Project): The project that was checked.
        files (tuple[Path, ...]): All discovered files, in check order.
        results (tuple[ConformanceResult, ...]): Per-file results, in input order.
            With fail-fast this may be shorter than ``files``.
    """

    template: Path
    matcher: TemplateMatcher
    project: Project
    files: tuple[Path, ...]
    results: tuple[ConformanceResult, ...]

    @property
    def stopped_early(self) -> bool:
        """True when fail-fast left some discovered files unchecked."""
        return len(self.results) < len(self.files)

    @property
    def conforming(self) -> tuple[ConformanceResult, ...]:
        """Results for files that contain the license header."""
        return tuple(r for r in self.results if r.conformance is Conformance.CONFORM)

    @property
    def conflicting(self) -> tuple[ConformanceResult, ...]:
        """Results for files that do not contain the license header."""
        return tuple(r for r in self.results if r.conformance is Conformance.CONFLICT)

    @property
    def unreadable(self) -> tuple[ConformanceResult, ...]:
        """Results for files that could not be read."""
        return tuple(r for r in self.results if r.unreadable)

    @property
    def passed(self) -> bool:
        """True when every discovered file was checked and conforms."""
        return not self.stopped_early and all(r.ok for r in self.results)

    def summary(self) -> RunSummary:
        """Return aggregate counts for this run."""
        return RunSummary(
            files=len(self.files),
            checked=len(self.results),
            conform=len(self.conforming),
            conflict=len(self.conflicting),
            unreadable=len(self.unreadable),
        )
