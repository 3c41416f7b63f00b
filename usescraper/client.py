# =============================================================================
# usescraper/client.py  —  UseScraper HTTP Adapter
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Performs the one outbound call this server exists for:
#
#       POST https://api.usescraper.com/scraper/scrape
#       Authorization: Bearer <USESCRAPER_API_KEY>
#       {"url": ..., "format": ..., "advanced_proxy": ..., "extract_object": ...}
#
#   and reduces every outcome to one of two shapes:
#
#       ScrapeSuccess(data)      →  2xx, body relayed verbatim
#       ScrapeFailure(message)   →  any httpx.HTTPError
#
# ERROR MESSAGE SELECTION:
#   When UseScraper answers with an error status it usually includes a JSON
#   body like {"message": "Invalid API key"}.  We surface that message.
#   Otherwise (connection refused, timeout, HTML error page, ...) we use the
#   httpx exception's own message.
#
#   Exceptions that are NOT httpx.HTTPError are not ours to interpret and
#   propagate unchanged to the caller.
#
# ONE CLIENT PER PROCESS:
#   The underlying httpx.AsyncClient carries the base URL and auth header and
#   is never reconfigured after __init__, so concurrent tool calls share it.
# =============================================================================

import json
import logging
from typing import Any

import httpx

from usescraper.config import Settings
from usescraper.models import ScrapeFailure, ScrapeRequest, ScrapeResult, ScrapeSuccess

logger = logging.getLogger(__name__)

SCRAPE_PATH = "/scrape"


class UseScraperClient:
    """Async adapter around the UseScraper scrape endpoint.

    Args:
        settings: Process configuration (API key, base URL, timeout).
        transport: Optional httpx transport; tests pass an
            ``httpx.MockTransport`` here to simulate the remote API.
    """

    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings
        self._http = httpx.AsyncClient(
            base_url=settings.base_url,
            headers=settings.headers,
            timeout=settings.timeout,
            transport=transport,
        )

    async def __aenter__(self) -> "UseScraperClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Release pooled connections."""
        await self._http.aclose()

    async def scrape(self, request: ScrapeRequest) -> ScrapeResult:
        """Send one scrape request and normalize the outcome.

        Returns:
            ScrapeSuccess with the decoded response body, or ScrapeFailure
            for any transport-level or remote-reported error.

        Raises:
            Anything that is not an ``httpx.HTTPError``, unchanged.
        """
        try:
            response = await self._http.post(SCRAPE_PATH, json=request.to_payload())
            response.raise_for_status()
        except httpx.HTTPError as exc:
            message = _error_message(exc)
            logger.warning("UseScraper request for %s failed: %s", request.url, message)
            return ScrapeFailure(message)

        return ScrapeSuccess(_decode_body(response))


def _decode_body(response: httpx.Response) -> Any:
    # A success body that is not JSON is relayed as plain text.
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(exc: httpx.HTTPError) -> str:
    if isinstance(exc, httpx.HTTPStatusError):
        body = _decode_body(exc.response)
        if isinstance(body, dict) and body.get("message") is not None:
            message = body["message"]
            return message if isinstance(message, str) else json.dumps(message, ensure_ascii=False)
    return str(exc) or type(exc).__name__
