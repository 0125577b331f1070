# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : constants.py
#   file_relpath : src/licensetemplate/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseTemplate Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

LICENSE_TEMPLATE_VERSION: str = get_version("license-template")

# Name of the tool table in pyproject.toml ([tool.license-template])
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "license-template"

# Environment variable consulted for the internal log level
LOG_LEVEL_ENV_VAR: Final[str] = "LICENSE_TEMPLATE_LOG_LEVEL"

# Placeholder delimiters used in template files, e.g. "Copyright {{year}} Example Corp"
PLACEHOLDER_OPEN: Final[str] = "{{"
PLACEHOLDER_CLOSE: Final[str] = "}}"

DEFAULT_EXTENSIONS: Final[tuple[str, ...]] = (".py",)
DEFAULT_BUILD_DIRS: Final[tuple[str, ...]] = ("build", "dist")

# Directories never descended into during discovery
IGNORED_DIR_NAMES: Final[frozenset[str]] = frozenset(
    {
        ".git",
        ".hg",
        ".svn",
        ".tox",
        ".nox",
        ".venv",
        "__pycache__",
    }
)

GITIGNORE_NAME: Final[str] = ".gitignore"
