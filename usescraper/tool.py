# =============================================================================
# usescraper/tool.py  —  Tool Registry & Dispatch
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares the single tool this server offers ("scrape") and routes a
#   (name, arguments) pair to the HTTP adapter.
#
# THE GATE:
#   dispatch() rejects before touching the network:
#     - unknown tool name   →  UnknownToolError
#     - invalid arguments   →  InvalidArgumentsError
#   Only a fully-normalized ScrapeRequest ever reaches client.scrape().
# =============================================================================

from typing import Any, Protocol

from usescraper.errors import UnknownToolError
from usescraper.models import (
    DEFAULT_FORMAT,
    SCRAPE_FORMATS,
    ScrapeRequest,
    ScrapeResult,
    ToolDescriptor,
)
from usescraper.validation import parse_scrape_args

SCRAPE_TOOL_NAME = "scrape"


class Scraper(Protocol):
    async def scrape(self, request: ScrapeRequest) -> ScrapeResult: ...


# -----------------------------------------------------------------------------
# The descriptor.  The descriptions are what the calling model reads, so they
# spell out defaults and the recommended format.
# -----------------------------------------------------------------------------
SCRAPE_TOOL = ToolDescriptor(
    name=SCRAPE_TOOL_NAME,
    description="Scrape content from a webpage using UseScraper API",
    input_schema={
        "type": "object",
        "properties": {
            "url": {
                "type": "string",
                "description": "URL to scrape",
            },
            "format": {
                "type": "string",
                "enum": list(SCRAPE_FORMATS),
                "description": (
                    "Format to save crawled page content. Strongly recommended "
                    f"to keep as markdown for optimal AI processing (default: {DEFAULT_FORMAT})"
                ),
            },
            "advanced_proxy": {
                "type": "boolean",
                "description": "Use advanced proxy to circumvent bot detection (default: false)",
            },
            "extract_object": {
                "type": "object",
                "description": "Optional object specifying data to extract",
            },
        },
        "required": ["url"],
    },
)


def list_tools() -> list[ToolDescriptor]:
    """Return every tool this server advertises (there is only one)."""
    return [SCRAPE_TOOL]


async def dispatch(name: str, arguments: Any, client: Scraper) -> ScrapeResult:
    """Validate a tool call and run it against ``client``.

    Raises:
        UnknownToolError: ``name`` is not "scrape".
        InvalidArgumentsError: ``arguments`` fail validation.
    """
    if name != SCRAPE_TOOL_NAME:
        raise UnknownToolError(name)

    request = parse_scrape_args(arguments)
    return await client.scrape(request)
