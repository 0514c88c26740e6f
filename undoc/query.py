"""undoc.query - single-URL fetch and simplification API.

Uses only the stdlib (``urllib``) for HTTP.

Basic usage::

    from undoc.query import fetch

    doc = fetch("https://docs.example.com/getting-started")
    print(doc.title)
    print(doc.summary)
    for section in doc.sections:
        print(section.type, section.title)

    # Outward JSON shape (keyTakeaways / originalUrl)
    data = doc.to_json_dict()

Pre-fetched HTML (no network)::

    from undoc.query import process

    doc = process(html, "https://docs.example.com/getting-started")
"""

from __future__ import annotations

import gzip
import logging
import random
import time
import urllib.error
import urllib.request
import zlib
from typing import Any
from urllib.parse import urlparse

from undoc import settings
from undoc.extractors.main_content import extract_main_content
from undoc.extractors.metadata import extract_title
from undoc.extractors.sections import extract_sections
from undoc.extractors.summary import generate_summary
from undoc.extractors.takeaways import extract_key_takeaways
from undoc.items import ProcessedDocument

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public exceptions
# ---------------------------------------------------------------------------

class FetchError(RuntimeError):
    """Raised when a URL cannot be fetched.

    Attributes:
        url    -- the URL that failed
        status -- HTTP status code (0 if no response was received)
        body   -- decoded error response body, if any
    """

    def __init__(
        self,
        message: str,
        url: str = "",
        status: int = 0,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status = status
        self.body = body


class InvalidURLError(FetchError):
    """Raised for URLs that are not absolute ``http``/``https`` URLs."""


def is_valid_url(url: str) -> bool:
    """Return True if *url* is an absolute ``http`` or ``https`` URL with a host."""
    if not isinstance(url, str) or not url.strip():
        return False
    try:
        parsed = urlparse(url.strip())
        hostname = parsed.hostname
        parsed.port  # raises ValueError for a non-numeric or out-of-range port
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(hostname)


# ---------------------------------------------------------------------------
# Extraction (pure HTML → ProcessedDocument, no network)
# ---------------------------------------------------------------------------

def process(html: str, url: str = "") -> ProcessedDocument:
    """Simplify *html* into a :class:`~undoc.items.ProcessedDocument`.

    Runs title extraction, content location, section segmentation,
    summarization and takeaway extraction.  Never raises for ``str`` input:
    empty or malformed HTML degrades to the placeholder title, a single
    Overview section and the fallback summary.

    Args:
        html: Raw HTML string of the page.
        url:  Original URL of the page, recorded as ``originalUrl``.
    """
    html = html or ""
    title = extract_title(html)
    content = extract_main_content(html)
    sections = extract_sections(content)
    summary = generate_summary(content, title)
    takeaways = extract_key_takeaways(content)

    logger.debug(
        "processed %s: %d chars of text, %d section(s), %d takeaway(s)",
        url or "<no url>", len(content), len(sections), len(takeaways),
    )
    return ProcessedDocument(
        title=title,
        summary=summary,
        sections=sections,
        key_takeaways=takeaways,
        original_url=url,
    )


# ---------------------------------------------------------------------------
# Low-level HTTP fetch
# ---------------------------------------------------------------------------

def _decode_body(raw: bytes, headers: Any, url: str) -> str:
    encoding = ""
    if headers is not None:
        try:
            encoding = str(headers.get("Content-Encoding", "")).lower().strip()
        except Exception:
            encoding = ""

    try:
        if encoding == "gzip":
            raw = gzip.decompress(raw)
        elif encoding in ("deflate", "zlib"):
            raw = zlib.decompress(raw)
    except (OSError, zlib.error) as exc:
        raise FetchError(
            f"Failed to fetch documentation: could not decode {encoding} body ({exc})",
            url=url,
        ) from exc

    charset = "utf-8"
    if headers is not None:
        try:
            charset = headers.get_content_charset("utf-8") or "utf-8"
        except Exception:
            charset = "utf-8"
    try:
        return raw.decode(charset, errors="replace")
    except (LookupError, ValueError):
        return raw.decode("utf-8", errors="replace")


def _retry_delay(attempt: int, retry_after: str | None = None) -> float:
    wait = 0
    if retry_after and retry_after.strip().isdigit():
        wait = int(retry_after.strip())
    return max(wait, 2 ** attempt) + random.uniform(0, 1)


def fetch_html(
    url: str,
    *,
    timeout: int | None = None,
    user_agent: str | None = None,
    max_retries: int | None = None,
) -> str:
    """Fetch *url* and return the response body as a decoded string.

    Retries transient failures (429/5xx and network errors) with jittered
    exponential backoff, honouring ``Retry-After`` when the server sends it.

    Args:
        url:         Absolute HTTP/HTTPS URL.
        timeout:     Request timeout in seconds (default ``settings.DOWNLOAD_TIMEOUT``).
        user_agent:  Override the ``UnDoc/1.0`` User-Agent string.
        max_retries: Retry attempts after the first (default ``settings.RETRY_TIMES``).

    Returns:
        Response body decoded to ``str``.

    Raises:
        InvalidURLError: If *url* is not an absolute http(s) URL.
        FetchError: On HTTP errors or connection failures.
    """
    if not is_valid_url(url):
        raise InvalidURLError(
            "Invalid URL format. Please provide a valid HTTP or HTTPS URL.", url=url,
        )
    if timeout is None:
        timeout = settings.DOWNLOAD_TIMEOUT
    if max_retries is None:
        max_retries = settings.RETRY_TIMES

    try:
        req = urllib.request.Request(
            url,
            headers={
                "User-Agent": user_agent or settings.USER_AGENT,
                "Accept": settings.ACCEPT_HEADER,
                "Accept-Encoding": "gzip, deflate",
            },
        )
    except ValueError as exc:
        raise InvalidURLError(
            f"Invalid URL format. Please provide a valid HTTP or HTTPS URL. ({exc})",
            url=url,
        ) from exc

    last_exc: FetchError | None = None
    for attempt in range(max_retries + 1):
        try:
            with urllib.request.urlopen(req, timeout=timeout) as resp:
                raw: bytes = resp.read()
                return _decode_body(raw, resp.headers, url)

        except urllib.error.HTTPError as exc:
            error = FetchError(
                f"Failed to fetch documentation: {exc.code} {exc.reason}",
                url=url,
                status=exc.code,
            )
            try:
                raw = exc.read()
                if raw:
                    error.body = _decode_body(raw, exc.headers, url)
            except Exception as read_exc:
                logger.debug("Could not read error body from %s: %s", url, read_exc)
            if exc.code in settings.RETRY_HTTP_CODES and attempt < max_retries:
                retry_after = exc.headers.get("Retry-After") if exc.headers else None
                delay = _retry_delay(attempt, retry_after)
                logger.debug(
                    "HTTP %d for %s, retrying in %.1fs (attempt %d/%d)",
                    exc.code, url, delay, attempt + 1, max_retries,
                )
                time.sleep(delay)
                last_exc = error
                continue
            raise error from exc

        except urllib.error.URLError as exc:
            error = FetchError(
                f"Failed to fetch documentation: {exc.reason}", url=url,
            )
            if attempt < max_retries:
                delay = _retry_delay(attempt)
                logger.debug(
                    "URL error for %s, retrying in %.1fs (attempt %d/%d): %s",
                    url, delay, attempt + 1, max_retries, exc.reason,
                )
                time.sleep(delay)
                last_exc = error
                continue
            raise error from exc

        except OSError as exc:
            error = FetchError(f"Failed to fetch documentation: {exc}", url=url)
            if attempt < max_retries:
                delay = _retry_delay(attempt)
                logger.debug(
                    "Network error for %s, retrying in %.1fs (attempt %d/%d): %s",
                    url, delay, attempt + 1, max_retries, exc,
                )
                time.sleep(delay)
                last_exc = error
                continue
            raise error from exc

        except ValueError as exc:
            # http.client.InvalidURL and friends, raised once the URL is dialled
            raise InvalidURLError(
                f"Invalid URL format. Please provide a valid HTTP or HTTPS URL. ({exc})",
                url=url,
            ) from exc

    raise last_exc or FetchError(f"All retries exhausted for {url}", url=url)


# ---------------------------------------------------------------------------
# Main public API
# ---------------------------------------------------------------------------

def fetch(url: str, **kwargs: Any) -> ProcessedDocument:
    """Fetch *url* and return its simplified :class:`~undoc.items.ProcessedDocument`.

    Keyword arguments are forwarded to :func:`fetch_html`.

    Raises:
        InvalidURLError: If *url* is not an absolute http(s) URL.
        FetchError: If the page cannot be fetched.
    """
    url = url.strip() if isinstance(url, str) else url
    logger.info("fetch: %s", url)
    html = fetch_html(url, **kwargs)
    return process(html, url)
