# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : test_compiler.py
#   file_relpath : tests/template/test_compiler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for template compilation and matching.

Covers the year placeholder, escaping of pattern metacharacters, unanchored
search and the empty template.
"""

from __future__ import annotations

import re

from licensetemplate.template import YEAR_PATTERN, TemplateMatcher, build_pattern, compile_template
from licensetemplate.template.segments import LiteralSegment, PlaceholderKind, PlaceholderSegment
from tests.conftest import parametrize

TEMPLATE = "Copyright {{year}} Acme"


@parametrize(
    "content",
    [
        "Copyright 2020 Acme",
        "Copyright 2019-2024 Acme",
        "#!/bin/sh\n# Copyright 1999 Acme\n",
        "prefix Copyright 2020 Acme suffix",
    ],
)
def test_year_placeholder_matches(content: str) -> None:
    assert compile_template(TEMPLATE).search(content)


@parametrize(
    "content",
    [
        "Copyright 20 Acme",
        "Copyright 20201 Acme",
        "Copyright 2019- Acme",
        "Copyright 2019-24 Acme",
        "Copyright YEAR Acme",
        "Copyright  2020 Acme",
        "Copyright 2020 Acme"[:-1],
        "",
    ],
)
def test_year_placeholder_rejects(content: str) -> None:
    assert not compile_template(TEMPLATE).search(content)


def test_year_rejects_non_ascii_digits() -> None:
    """Only ASCII digits satisfy the year placeholder."""
    arabic_indic: str = "\u0662\u0660\u0662\u0660"
    assert not compile_template(TEMPLATE).search(f"Copyright {arabic_indic} Acme")


def test_literals_are_escaped() -> None:
    """Pattern metacharacters in literal text only match themselves."""
    matcher: TemplateMatcher = compile_template("(c) {{year}} A.B* [x]+?")
    assert matcher.search("(c) 2021 A.B* [x]+?")
    assert not matcher.search("c 2021 AxB [x]+?")
    assert not matcher.search("(c) 2021 AzBBB x")


def test_multiline_template() -> None:
    matcher: TemplateMatcher = compile_template("# Line one {{year}}\n# Line two\n")
    assert matcher.search("#!/usr/bin/env python\n# Line one 2022\n# Line two\nprint()\n")
    assert not matcher.search("# Line one 2022\n#  Line two\n")


def test_empty_template_matches_anything() -> None:
    matcher: TemplateMatcher = compile_template("")
    assert matcher.pattern == ""
    assert matcher.search("")
    assert matcher.search("anything at all")


def test_template_with_only_placeholder() -> None:
    matcher: TemplateMatcher = compile_template("{{year}}")
    assert matcher.pattern == YEAR_PATTERN
    assert matcher.search("released in 1987")
    assert not matcher.search("no digits here")


def test_build_pattern_concatenates_in_order() -> None:
    pattern: str = build_pattern(
        (LiteralSegment("a."), PlaceholderSegment(PlaceholderKind.YEAR), LiteralSegment("b"))
    )
    assert pattern == re.escape("a.") + YEAR_PATTERN + "b"


def test_matcher_keeps_source_and_segments() -> None:
    matcher: TemplateMatcher = compile_template(TEMPLATE)
    assert matcher.source == TEMPLATE
    assert len(matcher.segments) == 3
    assert matcher.regex.pattern == matcher.pattern


def test_compilation_is_deterministic() -> None:
    assert compile_template(TEMPLATE).pattern == compile_template(TEMPLATE).pattern
