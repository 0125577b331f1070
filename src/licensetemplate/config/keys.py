# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : keys.py
#   file_relpath : src/licensetemplate/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for LicenseTemplate configuration.

These constants define the keys accepted at the top level of a standalone
config file and inside ``[tool.license-template]`` in ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by LicenseTemplate configuration."""

    SECTION_TOOL: Final[str] = "tool"

    KEY_TEMPLATE: Final[str] = "template"
    KEY_EXTENSIONS: Final[str] = "extensions"
    KEY_EXCLUDE: Final[str] = "exclude"
    KEY_BUILD_DIRS: Final[str] = "build_dirs"
    KEY_USE_GITIGNORE: Final[str] = "use_gitignore"
    KEY_JOBS: Final[str] = "jobs"
    KEY_FAIL_FAST: Final[str] = "fail_fast"
