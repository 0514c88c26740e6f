"""Key takeaway extraction.

Two tiers:

1. Lines the author emphasised: marker words (``important``, ``note:``,
   ``must`` ...) or numbered / bulleted list items.
2. If no line qualifies, the first few mid-length sentences of the text.
"""

from __future__ import annotations

import logging
import re

from undoc.settings import MAX_FALLBACK_TAKEAWAYS, MAX_TAKEAWAYS

logger = logging.getLogger(__name__)

# Case-sensitive substring markers.
_MARKER_WORDS: tuple[str, ...] = (
    "important",
    "note:",
    "remember",
    "must",
    "should",
    "recommended",
)

_NUMBERED_RE = re.compile(r"[0-9]+\.\s")
_BULLETED_RE = re.compile(r"[-*]\s")
_BULLET_PREFIX_RE = re.compile(r"^[-*]\s*")
_NUMBER_PREFIX_RE = re.compile(r"^[0-9]+\.\s*")
_SENTENCE_SPLIT_RE = re.compile(r"[.!]")

_LINE_MIN_LEN = 30
_LINE_MAX_LEN = 200
_SENTENCE_MIN_LEN = 40
_SENTENCE_MAX_LEN = 200


def _is_salient_line(line: str) -> bool:
    if not (_LINE_MIN_LEN < len(line) < _LINE_MAX_LEN):
        return False
    return (
        any(marker in line for marker in _MARKER_WORDS)
        or _NUMBERED_RE.match(line) is not None
        or _BULLETED_RE.match(line) is not None
    )


def _strip_list_marker(line: str) -> str:
    return _NUMBER_PREFIX_RE.sub("", _BULLET_PREFIX_RE.sub("", line))


def _fallback_sentences(text: str) -> list[str]:
    sentences: list[str] = []
    for piece in _SENTENCE_SPLIT_RE.split(text):
        sentence = piece.strip()
        if _SENTENCE_MIN_LEN < len(sentence) < _SENTENCE_MAX_LEN:
            sentences.append(sentence)
            if len(sentences) >= MAX_FALLBACK_TAKEAWAYS:
                break
    return sentences


def extract_key_takeaways(text: str) -> list[str]:
    """Return up to five salient statements from plain *text*."""
    text = text or ""
    takeaways: list[str] = []

    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if _is_salient_line(line):
            takeaways.append(_strip_list_marker(line))
            if len(takeaways) >= MAX_TAKEAWAYS:
                break

    if not takeaways:
        takeaways = _fallback_sentences(text)
        logger.debug("no emphasised lines; %d fallback sentence(s)", len(takeaways))

    return takeaways[:MAX_TAKEAWAYS]
