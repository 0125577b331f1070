# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseTemplate project automation via Nox.

Sessions:
  - `lint`: Ruff lint on the repository.
  - `format_check`: Verify formatting with Ruff.
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running property tests (opt-in).
  - `headers`: Check the project's own license headers with license-template.

Common invocations:
  - `nox -s lint`
  - `nox -s qa`
  - `nox -s qa -- -k checker`
"""

from __future__ import annotations

import nox

PYTHONS: list[str] = ["3.10", "3.11", "3.12", "3.13"]

nox.options.sessions = ["lint", "format_check", "qa"]


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run the test suite and the type checker."""
    session.install("-e", ".[dev]")
    # We add *session.posargs to the end of the command
    session.run("pytest", "-q", "tests", "-m", "not slow and not hypothesis_slow", *session.posargs)
    session.run("pyright", "--pythonversion", session.python)


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests only."""
    session.install("-e", ".[test]")
    session.run("pytest", "-q", "tests", "-m", "hypothesis_slow", *session.posargs)


@nox.session
def lint(session: nox.Session) -> None:
    """Lint the repository with Ruff."""
    session.install("ruff")
    session.run("ruff", "check", ".")


@nox.session
def format_check(session: nox.Session) -> None:
    """Verify formatting with Ruff."""
    session.install("ruff")
    session.run("ruff", "format", "--check", ".")


@nox.session
def headers(session: nox.Session) -> None:
    """Check this repository's own license headers."""
    session.install("-e", ".")
    session.run("license-template", "check", *session.posargs)
