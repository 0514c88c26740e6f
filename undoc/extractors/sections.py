"""Section segmentation and classification over plain text.

A single linear scan over the lines of the text decides, line by line,
whether a line is a heading (by its shape alone) or body text.  Headings
open a new section; body lines accumulate into the open one.

Usage::

    from undoc.extractors.sections import extract_sections

    for section in extract_sections(text):
        print(section.type, section.title)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from undoc.items import Section, SectionType
from undoc.settings import (
    DEFAULT_SECTION_TITLE,
    ELLIPSIS,
    FALLBACK_SECTION_CHARS,
    MAX_SECTION_CHARS,
    MAX_SECTIONS,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Heading heuristic
# ---------------------------------------------------------------------------

_MAX_HEADING_LEN = 100
_MIN_HEADING_LEN = 2

# Every word capitalized, letters only.  Digits or punctuation disqualify.
_TITLE_CASE_RE = re.compile(r"[A-Z][a-z]+(\s+[A-Z][a-z]+)*")
_MARKDOWN_HEADING_RE = re.compile(r"#{1,3}\s")
_HEADING_MARKER_RE = re.compile(r"^#+\s*")

# ---------------------------------------------------------------------------
# Classification rules, first match wins
# ---------------------------------------------------------------------------

_TYPE_RULES: tuple[tuple[SectionType, tuple[str, ...]], ...] = (
    ("quickstart", ("quick", "start", "getting started")),
    ("key-concepts", ("concept", "fundamentals", "basics")),
    ("api-reference", ("api", "reference", "endpoint")),
    ("examples", ("example", "tutorial", "guide")),
    ("troubleshooting", ("trouble", "error", "debug", "faq")),
)


def truncate(text: str, limit: int) -> str:
    """Cap *text* at *limit* characters, appending an ellipsis if cut."""
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def is_heading(line: str) -> bool:
    """Return True if *line* looks like a section heading."""
    trimmed = line.strip()
    if not (_MIN_HEADING_LEN < len(trimmed) < _MAX_HEADING_LEN):
        return False
    if trimmed.endswith("."):
        return False
    return (
        trimmed == trimmed.upper()
        or _TITLE_CASE_RE.fullmatch(trimmed) is not None
        or _MARKDOWN_HEADING_RE.match(trimmed) is not None
    )


def classify_section(title: str) -> SectionType:
    """Map a section *title* to its semantic type."""
    lowered = title.lower()
    for section_type, keywords in _TYPE_RULES:
        if any(kw in lowered for kw in keywords):
            return section_type
    return "overview"


def make_section(title: str, content: str) -> Section:
    return Section(
        title=title,
        content=truncate(content, MAX_SECTION_CHARS),
        type=classify_section(title),
    )


@dataclass
class _SectionAccumulator:
    title: str
    lines: list[str] = field(default_factory=list)

    def to_section(self) -> Section:
        return make_section(self.title, "\n".join(self.lines))


def extract_sections(text: str) -> list[Section]:
    """Split plain *text* into at most eight classified sections.

    Sections without any body line are dropped.  If nothing survives, a
    single Overview section is built from the start of the text.
    """
    sections: list[Section] = []
    current: _SectionAccumulator | None = None

    for raw_line in (text or "").split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        if is_heading(line):
            if current is not None and current.lines:
                sections.append(current.to_section())
            current = _SectionAccumulator(title=_HEADING_MARKER_RE.sub("", line))
        elif current is not None:
            current.lines.append(line)
        else:
            current = _SectionAccumulator(title=DEFAULT_SECTION_TITLE, lines=[line])

    if current is not None and current.lines:
        sections.append(current.to_section())

    if not sections:
        logger.debug("no sections found; using overview fallback")
        sections.append(
            Section(
                title=DEFAULT_SECTION_TITLE,
                content=truncate(text or "", FALLBACK_SECTION_CHARS),
                type="overview",
            ),
        )

    if len(sections) > MAX_SECTIONS:
        logger.debug("dropping %d section(s) past the limit", len(sections) - MAX_SECTIONS)
    return sections[:MAX_SECTIONS]
