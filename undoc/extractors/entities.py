"""HTML entity decoding for a small, fixed set of named entities."""

from __future__ import annotations

# Applied in order.  ``&amp;`` is deliberately absent: see decode_entities().
_ENTITY_TABLE: tuple[tuple[str, str], ...] = (
    ("&nbsp;", " "),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&apos;", "'"),
)


def decode_entities(text: str) -> str:
    """Decode the fixed entity table in *text*, then ``&amp;``.

    ``&amp;`` must run last and on its own, otherwise ``&amp;lt;`` would be
    unescaped twice and turn into ``<``.  Numeric references other than
    ``&#39;`` are left as-is.
    """
    if not text:
        return ""
    for entity, char in _ENTITY_TABLE:
        text = text.replace(entity, char)
    return text.replace("&amp;", "&")
