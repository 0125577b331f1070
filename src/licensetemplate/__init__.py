# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : __init__.py
#   file_relpath : src/licensetemplate/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseTemplate package.

LicenseTemplate checks that every source file in a project carries a license
header matching an approved template. Templates are plain text with a small
placeholder syntax (``{{year}}``) so that files differing only in their
copyright years are still accepted. The package exposes both a CLI and a small
typed API for automation.
"""

from __future__ import annotations
