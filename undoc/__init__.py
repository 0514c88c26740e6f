"""undoc - simplify documentation pages into structured, readable summaries.

Quick single-URL usage::

    from undoc import fetch

    doc = fetch("https://docs.example.com/getting-started")
    print(doc.title)
    print(doc.summary)
    print(doc.key_takeaways)

Pre-fetched HTML (no network)::

    from undoc import process

    doc = process(html, "https://docs.example.com/getting-started")
    payload = doc.to_json_dict()   # {"title", "summary", "sections", "keyTakeaways", "originalUrl"}
"""

from undoc.api import handle_process_request
from undoc.items import ProcessedDocument, Section, SectionType
from undoc.query import FetchError, InvalidURLError, fetch, fetch_html, is_valid_url, process

__version__ = "0.1.0"
__all__ = [
    "FetchError",
    "InvalidURLError",
    "ProcessedDocument",
    "Section",
    "SectionType",
    "fetch",
    "fetch_html",
    "handle_process_request",
    "is_valid_url",
    "process",
]
