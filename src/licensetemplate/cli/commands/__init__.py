# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : __init__.py
#   file_relpath : src/licensetemplate/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""LicenseTemplate CLI commands."""
