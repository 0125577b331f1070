# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : segments.py
#   file_relpath : src/licensetemplate/template/segments.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Template segments and placeholder kinds.

A parsed template is an ordered sequence of segments, each either a
`LiteralSegment` (text matched verbatim) or a `PlaceholderSegment` (a variable
part matched by the sub-pattern of its `PlaceholderKind`).

Placeholder syntax (stable, relied on by existing template files):

    {{year}}        a four-digit year or a range such as 2019-2024

Whitespace inside the delimiters is ignored and kind names are
case-insensitive, so ``{{ Year }}`` is the same placeholder as ``{{year}}``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class PlaceholderKind(str, Enum):
    """Supported placeholder kinds.

    Each member's value is the identifier written between the delimiters in a
    template file.
    """

    YEAR = "year"

    @property
    def pattern(self) -> str:
        """Regular expression fragment matched in place of the placeholder."""
        return _KIND_PATTERNS[self]

    @classmethod
    def from_name(cls, name: str) -> PlaceholderKind | None:
        """Return the kind whose identifier matches ``name`` (case-insensitive).

        Args:
            name (str): Identifier found between the placeholder delimiters,
                already stripped of surrounding whitespace.

        Returns:
            PlaceholderKind | None: The matching kind, or None when unknown.
        """
        try:
            return cls(name.lower())
        except ValueError:
            return None


# ASCII digits only: `\d` would also accept other Unicode decimal digits.
YEAR_PATTERN: Final[str] = r"[0-9]{4}(?:-[0-9]{4})?"

_KIND_PATTERNS: Final[dict[PlaceholderKind, str]] = {
    PlaceholderKind.YEAR: YEAR_PATTERN,
}


@dataclass(frozen=True)
class LiteralSegment:
    """Template text that must appear verbatim.

    Attributes:
        text (str): The literal text (never empty).
    """

    text: str


@dataclass(frozen=True)
class PlaceholderSegment:
    """A variable part of the template.

    Attributes:
        kind (PlaceholderKind): Which rule matches the variable part.
    """

    kind: PlaceholderKind


Segment = LiteralSegment | PlaceholderSegment
