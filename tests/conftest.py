# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the LicenseTemplate test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `licensetemplate.config.MutableConfig` (mutable), then
      `freeze()` into a `licensetemplate.config.Config` for public API calls
      (``licensetemplate.api.run_check``).
    - Do **not** mutate a frozen `Config`. If you need to tweak one,
      call `Config.thaw()`, edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from licensetemplate.config import MutableConfig, logging
from licensetemplate.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from pathlib import Path

    from licensetemplate.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

HEADER_TEMPLATE: str = "# Copyright (c) {{year}} Example Corp\n# SPDX-License-Identifier: MIT\n"


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_license_template_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    LICENSE_TEMPLATE_LOG_LEVEL in their shell.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def header(year: str = "2024") -> str:
    """Return a file header conforming to `HEADER_TEMPLATE` for ``year``."""
    return f"# Copyright (c) {year} Example Corp\n# SPDX-License-Identifier: MIT\n"


def write_file(path: Path, text: str) -> Path:
    """Write ``text`` to ``path`` (creating parents) and return the path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a small project with a manifest and a template; chdir into it.

    Layout::

        proj/
          pyproject.toml          [tool.license-template] template = "LICENSE_HEADER.txt"
          LICENSE_HEADER.txt
          src/pkg/__init__.py     conforming
          src/pkg/core.py         conforming (year range, after a shebang)

    Returns:
        Path: The project root (also the working directory).
    """
    root: Path = tmp_path / "proj"
    write_file(
        root / "pyproject.toml",
        '[project]\nname = "proj"\n\n[tool.license-template]\ntemplate = "LICENSE_HEADER.txt"\n',
    )
    write_file(root / "LICENSE_HEADER.txt", HEADER_TEMPLATE)
    write_file(root / "src" / "pkg" / "__init__.py", header() + '"""Package."""\n')
    write_file(
        root / "src" / "pkg" / "core.py",
        "#!/usr/bin/env python3\n" + header("2019-2024") + "\nVALUE = 1\n",
    )
    monkeypatch.chdir(root)
    return root


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Attributes set on the mutable builder before freezing.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    return make_mutable_config(**overrides).freeze()


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a mutable builder for scenarios that need staged edits."""
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m
