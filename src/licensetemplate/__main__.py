# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : __main__.py
#   file_relpath : src/licensetemplate/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running LicenseTemplate via ``python -m licensetemplate``.

It delegates directly to :func:`licensetemplate.cli.main.cli`, so the module
interface and the ``license-template`` console script behave identically.

Examples:
    Check the project in the current directory::

        python -m licensetemplate check --template LICENSE_HEADER.txt
"""

from __future__ import annotations

from licensetemplate.cli.main import cli

if __name__ == "__main__":
    cli()
