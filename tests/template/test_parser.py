# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : test_parser.py
#   file_relpath : tests/template/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `licensetemplate.template.parser.parse_template`."""

from __future__ import annotations

import pytest

from licensetemplate.core.errors import TemplateParseError
from licensetemplate.template import (
    LiteralSegment,
    PlaceholderKind,
    PlaceholderSegment,
    parse_template,
)
from tests.conftest import parametrize

YEAR = PlaceholderSegment(PlaceholderKind.YEAR)


def test_plain_text_is_one_literal() -> None:
    """Text without delimiters parses to a single literal segment."""
    assert parse_template("MIT License\n") == (LiteralSegment("MIT License\n"),)


def test_empty_text_has_no_segments() -> None:
    assert parse_template("") == ()


def test_literal_placeholder_literal() -> None:
    """Placeholders split the surrounding text into literals."""
    assert parse_template("Copyright {{year}} Acme") == (
        LiteralSegment("Copyright "),
        YEAR,
        LiteralSegment(" Acme"),
    )


def test_no_empty_literals_at_edges_or_between_placeholders() -> None:
    """Adjacent placeholders and placeholders at either end emit no empty literals."""
    assert parse_template("{{year}}{{year}}") == (YEAR, YEAR)
    assert parse_template("{{year}} x") == (YEAR, LiteralSegment(" x"))
    assert parse_template("x {{year}}") == (LiteralSegment("x "), YEAR)


@parametrize("token", ["{{year}}", "{{ year }}", "{{YEAR}}", "{{\tYear\t}}"])
def test_whitespace_and_case_are_ignored(token: str) -> None:
    assert parse_template(token) == (YEAR,)


def test_stray_closing_delimiter_is_literal() -> None:
    assert parse_template("a }} b") == (LiteralSegment("a }} b"),)


def test_single_braces_are_literal() -> None:
    assert parse_template("{year}") == (LiteralSegment("{year}"),)


def test_unterminated_placeholder_reports_position() -> None:
    """An opening delimiter without a closing one fails with line and column."""
    with pytest.raises(TemplateParseError) as excinfo:
        parse_template("line one\n  Copyright {{year Acme\n")

    err: TemplateParseError = excinfo.value
    assert err.line == 2
    assert err.column == 13
    assert "unterminated" in str(err)
    assert str(err).startswith("parsing failed")


@parametrize("text", ["{{author}}", "{{}}", "{{   }}", "(c) {{yaer}}"])
def test_unknown_or_empty_kind_is_rejected(text: str) -> None:
    with pytest.raises(TemplateParseError, match="unknown placeholder kind"):
        parse_template(text)


def test_unknown_kind_name_is_truncated_in_message() -> None:
    name: str = "x" * 100
    with pytest.raises(TemplateParseError) as excinfo:
        parse_template("{{" + name + "}}")
    assert name not in str(excinfo.value)
    assert "x" * 40 + "..." in str(excinfo.value)
