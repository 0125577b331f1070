# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : __init__.py
#   file_relpath : src/licensetemplate/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for LicenseTemplate.

The CLI is a thin presentation layer over [`licensetemplate.api`][licensetemplate.api]:
it collects options, delegates to the API, renders results through a console
and maps outcomes and core errors onto sysexits-aligned exit codes.
"""
