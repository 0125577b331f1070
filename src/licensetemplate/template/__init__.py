# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : __init__.py
#   file_relpath : src/licensetemplate/template/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template-to-matcher compiler.

Public surface:
    - `compile_template`: template text -> `TemplateMatcher`
    - `load_template` / `load_and_compile_template`: file-based variants
    - `parse_template`: template text -> literal/placeholder segments
"""

from __future__ import annotations

from licensetemplate.template.compiler import (
    TemplateMatcher,
    build_pattern,
    compile_template,
    load_and_compile_template,
    load_template,
)
from licensetemplate.template.parser import parse_template
from licensetemplate.template.segments import (
    YEAR_PATTERN,
    LiteralSegment,
    PlaceholderKind,
    PlaceholderSegment,
    Segment,
)

__all__ = [
    "YEAR_PATTERN",
    "LiteralSegment",
    "PlaceholderKind",
    "PlaceholderSegment",
    "Segment",
    "TemplateMatcher",
    "build_pattern",
    "compile_template",
    "load_and_compile_template",
    "load_template",
    "parse_template",
]
