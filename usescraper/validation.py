# =============================================================================
# usescraper/validation.py  —  Scrape Argument Validation
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Decides whether an untyped ``arguments`` value (whatever the caller put
#   in tools/call) is an acceptable scrape request, and if so turns it into
#   a ScrapeRequest with defaults applied.
#
# THE RULES:
#   - arguments must be a mapping (None is rejected)
#   - "url" must be present and a str
#   - "format", if present, must be one of SCRAPE_FORMATS
#   - "advanced_proxy", if present, must be a real bool (1/0 are rejected)
#   - "extract_object", if present, must be a mapping
#
#   A key that is present with a null value counts as present, so
#   {"url": "...", "format": None} fails.  Nothing is coerced.
#
# Three entry points share one predicate:
#   check_scrape_args()  →  None or a rejection reason
#   is_scrape_args()     →  bool
#   parse_scrape_args()  →  ScrapeRequest, or raises InvalidArgumentsError
# =============================================================================

from collections.abc import Mapping
from typing import Any

from usescraper.errors import InvalidArgumentsError
from usescraper.models import DEFAULT_FORMAT, SCRAPE_FORMATS, ScrapeRequest


def check_scrape_args(raw: Any) -> str | None:
    """Return ``None`` if ``raw`` is valid scrape input, else the reason it is not."""
    if not isinstance(raw, Mapping):
        return "arguments must be an object"

    if "url" not in raw:
        return "'url' is required"
    if not isinstance(raw["url"], str):
        return "'url' must be a string"

    if "format" in raw and raw["format"] not in SCRAPE_FORMATS:
        return f"'format' must be one of {', '.join(SCRAPE_FORMATS)}"

    # bool only: isinstance(1, bool) is False, which is what we want
    if "advanced_proxy" in raw and not isinstance(raw["advanced_proxy"], bool):
        return "'advanced_proxy' must be a boolean"

    if "extract_object" in raw and not isinstance(raw["extract_object"], Mapping):
        return "'extract_object' must be an object"

    return None


def is_scrape_args(raw: Any) -> bool:
    """True when ``raw`` passes every rule in :func:`check_scrape_args`."""
    return check_scrape_args(raw) is None


def parse_scrape_args(raw: Any) -> ScrapeRequest:
    """Validate ``raw`` and build a ScrapeRequest with defaults applied.

    Raises:
        InvalidArgumentsError: if any validation rule fails.  No network
            activity has happened at that point.
    """
    reason = check_scrape_args(raw)
    if reason is not None:
        raise InvalidArgumentsError(reason)

    return ScrapeRequest(
        url=raw["url"],
        format=raw.get("format", DEFAULT_FORMAT),
        advanced_proxy=raw.get("advanced_proxy", False),
        extract_object=dict(raw.get("extract_object", {})),
    )
