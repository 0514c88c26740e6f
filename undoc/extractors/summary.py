"""Short extractive synopsis from plain text."""

from __future__ import annotations

import re

from undoc.settings import MAX_SUMMARY_SENTENCES

_SENTENCE_SPLIT_RE = re.compile(r"[.!?]")
_MIN_SENTENCE_LEN = 20


def generate_summary(text: str, title: str) -> str:
    """Join the first few substantial sentences of *text* into a summary.

    Falls back to a fixed sentence naming *title* when the text has no
    sentence longer than 20 characters.
    """
    sentences = [
        s.strip()
        for s in _SENTENCE_SPLIT_RE.split(text or "")
        if len(s.strip()) > _MIN_SENTENCE_LEN
    ][:MAX_SUMMARY_SENTENCES]

    if sentences:
        return ". ".join(sentences) + "."

    return f"Documentation for {title}. This page has been simplified for easier reading."
