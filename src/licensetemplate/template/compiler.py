# topmark:header:start
#
#   project      : LicenseTemplate
#   file         : compiler.py
#   file_relpath : src/licensetemplate/template/compiler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compile license templates into reusable matchers.

Compilation runs in four steps:
  1. parse the template text into literal and placeholder segments;
  2. escape every literal with `re.escape` so pattern metacharacters
     (``.``, ``*``, ``(``, ...) only ever match themselves;
  3. replace every placeholder with the sub-pattern of its kind;
  4. join the pieces in order and compile the result.

The resulting `TemplateMatcher` searches **anywhere** in a file's content, not
only at its start, since license headers may follow a shebang line, an encoding
declaration, or other file-level directives.

A matcher is immutable after construction and holds no per-call state, so one
instance can be shared by any number of threads checking different files.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from licensetemplate.config.logging import get_logger
from licensetemplate.core.errors import PatternCompileError, TemplateReadError
from licensetemplate.template.parser import parse_template
from licensetemplate.template.segments import LiteralSegment

if TYPE_CHECKING:
    from os import PathLike

    from licensetemplate.config.logging import LicenseTemplateLogger
    from licensetemplate.template.segments import Segment

logger: LicenseTemplateLogger = get_logger(__name__)


@dataclass(frozen=True)
class TemplateMatcher:
    """Compiled, immutable representation of a license template.

    Attributes:
        source (str): The template text the matcher was built from.
        segments (tuple[Segment, ...]): Parsed literal and placeholder segments.
        regex (re.Pattern[str]): The compiled pattern.
    """

    source: str
    segments: tuple[Segment, ...]
    regex: re.Pattern[str]

    @property
    def pattern(self) -> str:
        """The pattern string the matcher was compiled from."""
        return self.regex.pattern

    def search(self, content: str) -> bool:
        """Return True if the template occurs anywhere within ``content``."""
        return self.regex.search(content) is not None


def build_pattern(segments: tuple[Segment, ...]) -> str:
    """Fold segments into a single pattern string.

    Args:
        segments (tuple[Segment, ...]): Segments in source order.

    Returns:
        str: Escaped literals interleaved with placeholder sub-patterns.
    """
    parts: list[str] = []
    for segment in segments:
        if isinstance(segment, LiteralSegment):
            parts.append(re.escape(segment.text))
        else:
            parts.append(segment.kind.pattern)
    return "".join(parts)


def compile_template(text: str) -> TemplateMatcher:
    """Compile template text into a `TemplateMatcher`.

    Empty text is accepted and yields a matcher that matches any content.

    Args:
        text (str): Raw template text.

    Returns:
        TemplateMatcher: The compiled matcher.

    Raises:
        TemplateParseError: If the placeholder syntax is malformed.
        PatternCompileError: If the assembled pattern does not compile.
    """
    segments: tuple[Segment, ...] = parse_template(text)
    pattern: str = build_pattern(segments)
    logger.trace("Template pattern: %r", pattern)
    try:
        regex: re.Pattern[str] = re.compile(pattern)
    except re.error as exc:
        raise PatternCompileError(pattern, exc) from exc
    return TemplateMatcher(source=text, segments=segments, regex=regex)


def load_template(path: str | PathLike[str]) -> str:
    """Read template text from ``path``.

    The file is decoded as UTF-8 (a leading byte order mark is dropped) with
    universal newlines, so templates saved with CRLF line endings behave like
    LF ones.

    Args:
        path (str | PathLike[str]): Template file location.

    Returns:
        str: The template text.

    Raises:
        TemplateReadError: If the file is missing, unreadable, or not valid UTF-8.
    """
    p = Path(path)
    try:
        text: str = p.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise TemplateReadError(p, "file not found", not_found=True) from exc
    except PermissionError as exc:
        raise TemplateReadError(p, "permission denied") from exc
    except UnicodeDecodeError as exc:
        raise TemplateReadError(p, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise TemplateReadError(p, exc.strerror or str(exc)) from exc
    logger.debug("Loaded license template %s (%d characters)", p, len(text))
    return text


def load_and_compile_template(path: str | PathLike[str]) -> TemplateMatcher:
    """Read the template at ``path`` and compile it.

    Raises:
        TemplateReadError: If the file cannot be read.
        TemplateParseError: If the placeholder syntax is malformed.
        PatternCompileError: If the assembled pattern does not compile.
    """
    return compile_template(load_template(path))
