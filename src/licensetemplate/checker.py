# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : checker.py
#   file_relpath : src/licensetemplate/checker.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Conformance checker: apply a compiled template to file contents.

`check` is the pure decision: given a `TemplateMatcher` and some text, it
returns `Conformance.CONFORM` when the template occurs in the text and
`Conformance.CONFLICT` otherwise. It never raises.

`check_file` adds the file read and turns read failures into a per-file
`ConformanceResult` carrying a `FileReadError`, so one unreadable file never
aborts the others. `check_files` maps `check_file` over many paths, optionally
on a thread pool; since the matcher is immutable, workers share it freely.
"""

from __future__ import annotations

from collections import deque
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from itertools import islice
from typing import TYPE_CHECKING

from licensetemplate.config.logging import get_logger
from licensetemplate.core.errors import FileReadError

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from concurrent.futures import Future
    from pathlib import Path

    from licensetemplate.config.logging import LicenseTemplateLogger
    from licensetemplate.template.compiler import TemplateMatcher

logger: LicenseTemplateLogger = get_logger(__name__)


class Conformance(str, Enum):
    """Outcome of checking one file's content against a template."""

    CONFORM = "conform"
    CONFLICT = "conflict"


@dataclass(frozen=True)
class ConformanceResult:
    """Per-file outcome, consumed by the reporting layer.

    Exactly one of ``conformance`` and ``error`` is set.

    Attributes:
        path (Path): The checked file (reporting only; never part of the decision).
        conformance (Conformance | None): Match outcome, or None if the file was unreadable.
        error (FileReadError | None): Read failure, if any.
    """

    path: Path
    conformance: Conformance | None = None
    error: FileReadError | None = None

    @property
    def ok(self) -> bool:
        """True when the file was read and conforms."""
        return self.conformance is Conformance.CONFORM

    @property
    def unreadable(self) -> bool:
        """True when the file could not be read."""
        return self.error is not None


def check(matcher: TemplateMatcher, content: str) -> Conformance:
    """Decide whether ``content`` conforms to the template compiled into ``matcher``.

    Args:
        matcher (TemplateMatcher): Compiled template.
        content (str): File content.

    Returns:
        Conformance: CONFORM if the template occurs anywhere in ``content``,
            CONFLICT otherwise.
    """
    return Conformance.CONFORM if matcher.search(content) else Conformance.CONFLICT


def read_source(path: Path) -> str:
    """Read a candidate source file as UTF-8 text.

    Args:
        path (Path): File to read.

    Returns:
        str: The file content (universal newlines).

    Raises:
        FileReadError: On any I/O failure or invalid UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileReadError(path, "file not found") from exc
    except PermissionError as exc:
        raise FileReadError(path, "permission denied") from exc
    except UnicodeDecodeError as exc:
        raise FileReadError(path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise FileReadError(path, exc.strerror or str(exc)) from exc


def check_file(matcher: TemplateMatcher, path: Path) -> ConformanceResult:
    """Read ``path`` and check its content against ``matcher``.

    Read failures are returned on the result rather than raised.

    Args:
        matcher (TemplateMatcher): Compiled template.
        path (Path): File to check.

    Returns:
        ConformanceResult: The per-file outcome.
    """
    try:
        content: str = read_source(path)
    except FileReadError as exc:
        logger.debug("Unreadable file %s: %s", path, exc.reason)
        return ConformanceResult(path=path, error=exc)
    conformance: Conformance = check(matcher, content)
    logger.trace("%s: %s", path, conformance.value)
    return ConformanceResult(path=path, conformance=conformance)


def check_files(
    matcher: TemplateMatcher,
    paths: Iterable[Path],
    *,
    jobs: int = 1,
    fail_fast: bool = False,
) -> Iterator[ConformanceResult]:
    """Check many files against one matcher, yielding results in input order.

    With ``jobs > 1`` files are read and checked on a thread pool. Submission
    runs a bounded window ahead of the consumer, so results stream in input
    order regardless of completion order.

    Args:
        matcher (TemplateMatcher): Compiled template, shared by all workers.
        paths (Iterable[Path]): Files to check.
        jobs (int): Number of worker threads; values below 2 check sequentially.
        fail_fast (bool): Stop after the first result that is not CONFORM
            (conflict or unreadable). Files not yet started are never checked.

    Yields:
        ConformanceResult: One result per checked file.
    """
    if jobs < 2:
        for path in paths:
            result: ConformanceResult = check_file(matcher, path)
            yield result
            if fail_fast and not result.ok:
                return
        return

    window: int = jobs * 2
    path_iter: Iterator[Path] = iter(paths)
    with ThreadPoolExecutor(max_workers=jobs, thread_name_prefix="license-check") as pool:
        pending: deque[Future[ConformanceResult]] = deque(
            pool.submit(check_file, matcher, p) for p in islice(path_iter, window)
        )
        while pending:
            result = pending.popleft().result()
            yield result
            if fail_fast and not result.ok:
                for future in pending:
                    future.cancel()
                return
            next_path: Path | None = next(path_iter, None)
            if next_path is not None:
                pending.append(pool.submit(check_file, matcher, next_path))
