# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : test_template_property_slow.py
#   file_relpath : tests/template/test_template_property_slow.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Long-running property tests for template compilation.

Run with ``nox -s property_test`` (or ``pytest -m hypothesis_slow``); the
default ``qa`` session deselects them.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from licensetemplate.checker import Conformance, check
from licensetemplate.core.errors import TemplateParseError
from licensetemplate.template import TemplateMatcher, compile_template
from tests.strategies import s_template_and_rendering, s_year_value

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow


@settings(
    max_examples=2000,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
@given(
    case=s_template_and_rendering(),
    prefix=st.text(max_size=200),
    suffix=st.text(max_size=200),
)
def test_rendered_template_is_found_in_large_files(
    case: tuple[str, str], prefix: str, suffix: str
) -> None:
    template, rendered = case
    matcher: TemplateMatcher = compile_template(template)
    assert check(matcher, prefix + rendered + suffix) is Conformance.CONFORM


@settings(max_examples=1000, deadline=None)
@given(year=s_year_value)
def test_every_year_and_range_is_accepted(year: str) -> None:
    matcher: TemplateMatcher = compile_template("Copyright (c) {{ Year }} Example Corp\n")
    assert matcher.search(f"Copyright (c) {year} Example Corp\n")


@settings(
    max_examples=2000,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
@given(text=st.text(alphabet=st.characters(exclude_categories=("Cs",)), max_size=120))
def test_arbitrary_text_compiles_or_fails_with_parse_error(text: str) -> None:
    """No template text escapes the typed error contract."""
    try:
        matcher: TemplateMatcher = compile_template(text)
    except TemplateParseError as exc:
        assert exc.line >= 1
        assert exc.column >= 1
    else:
        if "{{" not in text:
            assert matcher.search(text)
