# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : test_check_files.py
#   file_relpath : tests/checker/test_check_files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for checking many files, sequentially and on a thread pool."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

from licensetemplate.checker import Conformance, ConformanceResult, check, check_files
from licensetemplate.template import compile_template
from tests.conftest import HEADER_TEMPLATE, header, parametrize, write_file

if TYPE_CHECKING:
    from pathlib import Path

MATCHER = compile_template(HEADER_TEMPLATE)


def _make_files(tmp_path: Path, n: int, bad: set[int]) -> list[Path]:
    paths: list[Path] = []
    for i in range(n):
        body: str = "x = 1\n" if i in bad else header() + "x = 1\n"
        paths.append(write_file(tmp_path / f"f{i:03d}.py", body))
    return paths


@parametrize("jobs", [1, 2, 8])
def test_results_follow_input_order(tmp_path: Path, jobs: int) -> None:
    paths: list[Path] = _make_files(tmp_path, 40, bad={3, 17, 39})
    # Reverse the input to make sure order is not an artifact of sorting
    paths.reverse()

    results: list[ConformanceResult] = list(check_files(MATCHER, paths, jobs=jobs))

    assert [r.path for r in results] == paths
    conflicts: set[str] = {r.path.name for r in results if r.conformance is Conformance.CONFLICT}
    assert conflicts == {"f003.py", "f017.py", "f039.py"}


@parametrize("jobs", [1, 4])
def test_parallel_matches_sequential(tmp_path: Path, jobs: int) -> None:
    paths: list[Path] = _make_files(tmp_path, 25, bad={0, 5, 10})
    sequential = [r.conformance for r in check_files(MATCHER, paths, jobs=1)]
    parallel = [r.conformance for r in check_files(MATCHER, paths, jobs=jobs)]
    assert sequential == parallel


@parametrize("jobs", [1, 3])
def test_fail_fast_stops_after_first_failure(tmp_path: Path, jobs: int) -> None:
    paths: list[Path] = _make_files(tmp_path, 30, bad={4, 20})

    results: list[ConformanceResult] = list(check_files(MATCHER, paths, jobs=jobs, fail_fast=True))

    assert len(results) == 5
    assert all(r.ok for r in results[:-1])
    assert results[-1].path.name == "f004.py"
    assert results[-1].conformance is Conformance.CONFLICT


def test_fail_fast_also_stops_on_unreadable(tmp_path: Path) -> None:
    paths: list[Path] = _make_files(tmp_path, 3, bad=set())
    paths.insert(1, tmp_path / "missing.py")

    results: list[ConformanceResult] = list(check_files(MATCHER, paths, fail_fast=True))

    assert [r.path.name for r in results] == ["f000.py", "missing.py"]
    assert results[-1].unreadable


def test_unreadable_file_does_not_stop_the_run(tmp_path: Path) -> None:
    paths: list[Path] = _make_files(tmp_path, 3, bad=set())
    (tmp_path / "f001.py").write_bytes(b"\xff\xff")

    results: list[ConformanceResult] = list(check_files(MATCHER, paths, jobs=2))

    assert [r.unreadable for r in results] == [False, True, False]
    assert results[0].ok
    assert results[2].ok


def test_empty_input_yields_nothing() -> None:
    assert list(check_files(MATCHER, [], jobs=4)) == []


def test_shared_matcher_concurrent_check_matches_sequential() -> None:
    """Many threads calling `check` on one matcher agree with a sequential pass."""
    contents: list[str] = [
        header(f"{1990 + i % 40}") + f"x = {i}\n" if i % 3 else f"# Copyright {i}\n"
        for i in range(2000)
    ]
    sequential: list[Conformance] = [check(MATCHER, c) for c in contents]

    with ThreadPoolExecutor(max_workers=16) as pool:
        concurrent: list[Conformance] = list(pool.map(lambda c: check(MATCHER, c), contents))

    assert concurrent == sequential
    assert sequential.count(Conformance.CONFLICT) == 667
