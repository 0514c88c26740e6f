"""Framework-agnostic request boundary.

``handle_process_request`` takes a decoded JSON request body and returns a
``(status_code, json_body)`` pair, so any web framework can expose it as a
``POST`` endpoint in a few lines::

    status, body = handle_process_request(await request.json())
    return JSONResponse(body, status_code=status)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from undoc.query import FetchError, InvalidURLError, is_valid_url, process
from undoc.query import fetch_html as _fetch_html

logger = logging.getLogger(__name__)

URL_REQUIRED = "URL is required"
INVALID_URL = "Invalid URL format. Please provide a valid HTTP or HTTPS URL."
PROCESSING_FAILED = "Failed to process documentation. Please check the URL and try again."


def _error(status: int, message: str) -> tuple[int, dict[str, Any]]:
    return status, {"error": message}


def handle_process_request(
    payload: Any,
    *,
    fetcher: Callable[[str], str] | None = None,
) -> tuple[int, dict[str, Any]]:
    """Validate *payload*, fetch its ``url`` and return the simplified document.

    Args:
        payload: Decoded request body; expected to be ``{"url": "..."}``.
        fetcher: Callable mapping a URL to its HTML.  Defaults to
                 :func:`undoc.query.fetch_html`.

    Returns:
        ``(200, document)`` on success, where *document* uses the outward
        camelCase field names; ``(400, {"error": ...})`` for a missing or
        invalid URL or a failed fetch; ``(500, {"error": ...})`` for
        anything else.
    """
    url = payload.get("url") if isinstance(payload, Mapping) else None
    if not url:
        return _error(400, URL_REQUIRED)
    if not is_valid_url(url):
        return _error(400, INVALID_URL)

    fetch = fetcher or _fetch_html
    try:
        html = fetch(url)
        doc = process(html, url)
    except InvalidURLError as exc:
        logger.info("rejected URL %s: %s", url, exc)
        return _error(400, INVALID_URL)
    except FetchError as exc:
        logger.info("fetch failed for %s: %s", url, exc)
        return _error(400, str(exc))
    except Exception:
        logger.exception("Error processing documentation for %s", url)
        return _error(500, PROCESSING_FAILED)

    return 200, doc.to_json_dict()
