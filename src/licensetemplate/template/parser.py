# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : parser.py
#   file_relpath : src/licensetemplate/template/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Split template text into literal and placeholder segments.

The parser performs a single left-to-right scan over the template text. Text
outside ``{{ ... }}`` becomes `LiteralSegment` values; each delimited
identifier becomes a `PlaceholderSegment`. Empty literals (between adjacent
placeholders or at either end of the text) are not emitted.

A closing delimiter without an opening one is ordinary text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from licensetemplate.config.logging import get_logger
from licensetemplate.constants import PLACEHOLDER_CLOSE, PLACEHOLDER_OPEN
from licensetemplate.core.errors import TemplateParseError
from licensetemplate.template.segments import (
    LiteralSegment,
    PlaceholderKind,
    PlaceholderSegment,
)

if TYPE_CHECKING:
    from licensetemplate.config.logging import LicenseTemplateLogger
    from licensetemplate.template.segments import Segment

logger: LicenseTemplateLogger = get_logger(__name__)

# Longest placeholder identifier echoed back in error messages
_MAX_ECHO: int = 40


def _position(text: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of ``offset`` in ``text``."""
    line: int = text.count("\n", 0, offset) + 1
    line_start: int = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def _parse_error(text: str, offset: int, reason: str) -> TemplateParseError:
    line, column = _position(text, offset)
    return TemplateParseError(reason, line=line, column=column)


def parse_template(text: str) -> tuple[Segment, ...]:
    """Parse template text into an ordered tuple of segments.

    Args:
        text (str): Raw template text.

    Returns:
        tuple[Segment, ...]: Literal and placeholder segments in source order.

    Raises:
        TemplateParseError: If an opening delimiter has no closing delimiter,
            or if a placeholder names an unknown (or empty) kind.
    """
    segments: list[Segment] = []
    pos: int = 0

    while True:
        start: int = text.find(PLACEHOLDER_OPEN, pos)
        if start < 0:
            if pos < len(text):
                segments.append(LiteralSegment(text[pos:]))
            break

        if start > pos:
            segments.append(LiteralSegment(text[pos:start]))

        name_start: int = start + len(PLACEHOLDER_OPEN)
        end: int = text.find(PLACEHOLDER_CLOSE, name_start)
        if end < 0:
            raise _parse_error(
                text, start, f"unterminated placeholder, expected '{PLACEHOLDER_CLOSE}'"
            )

        name: str = text[name_start:end].strip()
        kind: PlaceholderKind | None = PlaceholderKind.from_name(name)
        if kind is None:
            shown: str = name if len(name) <= _MAX_ECHO else name[:_MAX_ECHO] + "..."
            known: str = ", ".join(k.value for k in PlaceholderKind)
            raise _parse_error(
                text, start, f"unknown placeholder kind '{shown}' (known kinds: {known})"
            )

        segments.append(PlaceholderSegment(kind))
        pos = end + len(PLACEHOLDER_CLOSE)

    logger.trace("Parsed template into %d segment(s): %s", len(segments), segments)
    return tuple(segments)
