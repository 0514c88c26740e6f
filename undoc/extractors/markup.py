"""Convert arbitrary (possibly malformed) HTML into plain text.

No tree is built: tags are removed with regular expressions over the raw
character sequence.  The result keeps paragraph and line structure so the
section segmenter can work on it, and never contains a literal ``<`` or
``>`` character.

Usage::

    from undoc.extractors.markup import html_to_text

    text = html_to_text("<p>Hello &amp; welcome</p><script>x()</script>")
    # -> "Hello & welcome"
"""

from __future__ import annotations

import logging
import re

from undoc.extractors.entities import decode_entities
from undoc.settings import MAX_STRIP_PASSES

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Compiled patterns (evaluated once at import time)
# ---------------------------------------------------------------------------

# Executable / style payloads, removed repeatedly until stable.  Order
# matters: paired blocks first, then orphaned openers, then orphaned closers.
_PAYLOAD_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"<script\b.*?</script.*?>", re.IGNORECASE | re.DOTALL),
    re.compile(r"<style\b.*?</style.*?>", re.IGNORECASE | re.DOTALL),
    re.compile(r"<script\b[^>]*>", re.IGNORECASE),
    re.compile(r"<style\b[^>]*>", re.IGNORECASE),
    re.compile(r"</script.*?>", re.IGNORECASE | re.DOTALL),
    re.compile(r"</style.*?>", re.IGNORECASE | re.DOTALL),
)

# Block-level boundaries that become line breaks.
_BLOCK_BREAKS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"<br\s*/?>", re.IGNORECASE), "\n"),
    (re.compile(r"</p>", re.IGNORECASE), "\n\n"),
    (re.compile(r"</div>", re.IGNORECASE), "\n"),
    (re.compile(r"</li>", re.IGNORECASE), "\n"),
    (re.compile(r"</h[1-6]>", re.IGNORECASE), "\n\n"),
)

_ANY_TAG_RE = re.compile(r"<[^>]*>")
_EXCESSIVE_BLANK_LINES_RE = re.compile(r"\n{3,}")

# Single angle quotation marks stand in for angle brackets.
LEFT_ANGLE_QUOTE = "‹"
RIGHT_ANGLE_QUOTE = "›"


def strip_payloads(html: str, max_passes: int = MAX_STRIP_PASSES) -> str:
    """Remove ``<script>``/``<style>`` blocks and orphaned tags from *html*.

    Runs at most *max_passes* passes and stops as soon as a pass leaves the
    text unchanged, so deeply nested or unterminated tags cannot make this
    loop forever.
    """
    text = html
    passes = 0
    while passes < max_passes:
        passes += 1
        before = text
        for pattern in _PAYLOAD_PATTERNS:
            text = pattern.sub("", text)
        if text == before:
            break
    logger.debug("payload stripping finished after %d pass(es)", passes)
    return text


def neutralize_angle_brackets(text: str) -> str:
    """Replace every ``<`` and ``>`` with a look-alike angle quote."""
    return text.replace("<", LEFT_ANGLE_QUOTE).replace(">", RIGHT_ANGLE_QUOTE)


def html_to_text(html: str) -> str:
    """Convert *html* to plain text.

    Steps:
    - strip script/style payloads (bounded passes)
    - turn ``<br>``, ``</p>``, ``</div>``, ``</li>``, ``</hN>`` into newlines
    - drop every remaining tag
    - decode entities
    - neutralize any angle brackets that survived
    - collapse runs of blank lines and trim

    Never raises for ``str`` input; malformed markup is over-stripped rather
    than rejected.
    """
    if not html:
        return ""

    text = strip_payloads(html)

    for pattern, replacement in _BLOCK_BREAKS:
        text = pattern.sub(replacement, text)

    text = _ANY_TAG_RE.sub("", text)
    text = decode_entities(text)
    text = neutralize_angle_brackets(text)

    text = _EXCESSIVE_BLANK_LINES_RE.sub("\n\n", text)
    return text.strip()
