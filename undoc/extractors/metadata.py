"""Document title extraction: ``<title>`` → first ``<h1>`` → placeholder."""

from __future__ import annotations

import logging
import re

from undoc.extractors.markup import html_to_text
from undoc.settings import DEFAULT_TITLE

logger = logging.getLogger(__name__)

# Single-line matches only, as in the raw markup.
_TITLE_RE = re.compile(r"<title[^>]*>(.*?)</title>", re.IGNORECASE)
_H1_RE = re.compile(r"<h1[^>]*>(.*?)</h1>", re.IGNORECASE)

_WHITESPACE_RE = re.compile(r"\s+")


def extract_title(html: str) -> str:
    """Return a single-line, non-empty title for *html*.

    The first ``<title>`` element wins, then the first ``<h1>``.  A matched
    element whose text is blank falls through to the next candidate; with no
    usable candidate the placeholder ``"Documentation"`` is returned.
    """
    if not html:
        return DEFAULT_TITLE

    for source, pattern in (("title", _TITLE_RE), ("h1", _H1_RE)):
        match = pattern.search(html)
        if not match:
            continue
        title = _WHITESPACE_RE.sub(" ", html_to_text(match.group(1))).strip()
        if title:
            logger.debug("title taken from <%s>: %r", source, title)
            return title

    return DEFAULT_TITLE
