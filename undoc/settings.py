"""Project settings for undoc.

Extraction limits are fixed constants.  Network settings can be overridden
through ``UNDOC_*`` environment variables, read once at import time.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must be >= 0", name, raw)
        return default
    return value


# ---------------------------------------------------------------------------
# Network
# ---------------------------------------------------------------------------
USER_AGENT = os.getenv("UNDOC_USER_AGENT") or "UnDoc/1.0 (Documentation Simplifier)"

ACCEPT_HEADER = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"

DOWNLOAD_TIMEOUT = _env_int("UNDOC_TIMEOUT", 30)

# ---------------------------------------------------------------------------
# Retry policy
# ---------------------------------------------------------------------------
RETRY_TIMES = _env_int("UNDOC_RETRY_TIMES", 2)
RETRY_HTTP_CODES: frozenset[int] = frozenset({429, 500, 502, 503, 504})

# ---------------------------------------------------------------------------
# Markup stripping
# ---------------------------------------------------------------------------
# Hard cap on script/style removal passes; guarantees termination.
MAX_STRIP_PASSES = 100

# ---------------------------------------------------------------------------
# Output shape
# ---------------------------------------------------------------------------
DEFAULT_TITLE = "Documentation"
DEFAULT_SECTION_TITLE = "Overview"
ELLIPSIS = "..."

MAX_SECTIONS = 8
MAX_SECTION_CHARS = 1500
FALLBACK_SECTION_CHARS = 2000

MAX_SUMMARY_SENTENCES = 3

MAX_TAKEAWAYS = 5
MAX_FALLBACK_TAKEAWAYS = 3
