# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : test_check_exit_codes.py
#   file_relpath : tests/cli/test_check_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""`check` exit codes for CI and pre-commit use.

Each outcome maps onto a distinct, sysexits-aligned exit status so that
callers can tell a missing header apart from a broken template or setup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from licensetemplate.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_CONFLICT, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import write_file

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def test_success_when_all_files_conform(project: Path) -> None:
    assert_SUCCESS(run_cli(["check"]))


def test_conflict_when_a_header_is_missing(project: Path) -> None:
    write_file(project / "src" / "pkg" / "bad.py", "x = 1\n")
    assert_CONFLICT(run_cli(["check"]))


def test_io_error_for_unreadable_files(project: Path) -> None:
    (project / "src" / "pkg" / "blob.py").write_bytes(b"\xff\xfe\xfa")
    result: Result = run_cli(["check"])
    assert result.exit_code == ExitCode.IO_ERROR, result.output


def test_conflict_takes_precedence_over_unreadable(project: Path) -> None:
    (project / "src" / "pkg" / "blob.py").write_bytes(b"\xff\xfe\xfa")
    write_file(project / "src" / "pkg" / "bad.py", "x = 1\n")
    assert_CONFLICT(run_cli(["check"]))


def test_missing_template_file(project: Path) -> None:
    result: Result = run_cli(["check", "--template", "missing.txt"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "missing.txt" in result.output


def test_malformed_template(project: Path) -> None:
    write_file(project / "BAD.txt", "Copyright {{year\n")
    result: Result = run_cli(["check", "--template", "BAD.txt"])
    assert result.exit_code == ExitCode.DATA_ERROR, result.output
    assert "invalid license template" in result.output
    assert "line 1, column 11" in result.output


def test_unknown_placeholder_kind(project: Path) -> None:
    write_file(project / "BAD.txt", "Copyright {{author}}\n")
    result: Result = run_cli(["check", "--template", "BAD.txt"])
    assert result.exit_code == ExitCode.DATA_ERROR, result.output


def test_no_template_configured(tmp_path: Path) -> None:
    write_file(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    result: Result = run_cli_in(tmp_path, ["check"])
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "No license template configured" in result.output


def test_missing_manifest_path(project: Path) -> None:
    result: Result = run_cli(["check", "--manifest-path", "nowhere/pyproject.toml"])
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def test_verbose_and_quiet_are_mutually_exclusive(project: Path) -> None:
    result: Result = run_cli(["-v", "-q", "check"])
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def test_click_usage_errors_keep_click_status(project: Path) -> None:
    result: Result = run_cli(["check", "--jobs", "-1"])
    assert result.exit_code == 2
