"""Main content location by shallow, fixed-priority pattern matching.

Tried in order, first match wins:

1. ``<main>``
2. ``<article>``
3. ``<div class="...content...">``
4. ``<div class="...markdown...">``
5. ``<div id="content">``

then ``<body>``, then the whole document.  Each pattern takes the leftmost
occurrence and stops at the first matching close tag, so nested elements of
the same name truncate the region.  There is no scoring and no merging of
candidates.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from undoc.extractors.markup import html_to_text

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE | re.DOTALL

# (method name, pattern) in priority order
_CONTENT_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("main", re.compile(r"<main[^>]*>(.*?)</main>", _FLAGS)),
    ("article", re.compile(r"<article[^>]*>(.*?)</article>", _FLAGS)),
    ("div.content", re.compile(
        r'<div[^>]*class="[^"]*content[^"]*"[^>]*>(.*?)</div>', _FLAGS,
    )),
    ("div.markdown", re.compile(
        r'<div[^>]*class="[^"]*markdown[^"]*"[^>]*>(.*?)</div>', _FLAGS,
    )),
    ("div#content", re.compile(r'<div[^>]*id="content"[^>]*>(.*?)</div>', _FLAGS)),
)

_BODY_RE = re.compile(r"<body[^>]*>(.*?)</body>", _FLAGS)


class ContentRegion(NamedTuple):
    html: str
    method: str  # "main"|"article"|"div.content"|"div.markdown"|"div#content"|"body"|"document"


def locate_content_region(html: str) -> ContentRegion:
    """Return the raw substring of *html* most likely to hold the main content."""
    for method, pattern in _CONTENT_PATTERNS:
        match = pattern.search(html)
        if match:
            return ContentRegion(html=match.group(1), method=method)

    match = _BODY_RE.search(html)
    if match:
        return ContentRegion(html=match.group(1), method="body")

    return ContentRegion(html=html, method="document")


def extract_main_content(html: str) -> str:
    """Return the plain text of the best-guess main content region of *html*."""
    region = locate_content_region(html or "")
    logger.debug(
        "content region: %s (%d chars of markup)", region.method, len(region.html),
    )
    return html_to_text(region.html)
