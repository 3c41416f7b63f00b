# =============================================================================
# usescraper/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that
# flows through a scrape call:
#
#   ToolDescriptor  →  what we advertise on tools/list (static)
#   ScrapeRequest   →  one validated, normalized call (per invocation)
#   ScrapeSuccess   ┐
#   ScrapeFailure   ┘  the two possible outcomes of the remote call
#
# All of them are frozen.  A request is built once from caller input and
# never touched again; a result is rendered to text and discarded.
# =============================================================================

import json
from dataclasses import dataclass, field
from typing import Any, Union

# The three output formats UseScraper accepts, and the one we default to.
SCRAPE_FORMATS: tuple[str, ...] = ("text", "html", "markdown")
DEFAULT_FORMAT = "markdown"

ERROR_PREFIX = "UseScraper API error: "


# -----------------------------------------------------------------------------
# ToolDescriptor — static metadata for one tool
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolDescriptor:
    """Name, description and JSON Schema of a callable tool."""

    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)


# -----------------------------------------------------------------------------
# ScrapeRequest — one normalized call to the remote API
# -----------------------------------------------------------------------------
# All four fields are always populated.  Defaults are applied by the
# validator, so the body sent over the wire never has missing keys.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ScrapeRequest:
    """A fully-normalized scrape request."""

    url: str                                    # Page to scrape
    format: str = DEFAULT_FORMAT                # text | html | markdown
    advanced_proxy: bool = False                # Bot-detection bypass
    extract_object: dict[str, Any] = field(default_factory=dict)
    # extract_object is opaque to us: it is forwarded verbatim.

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON body for POST /scrape."""
        return {
            "url": self.url,
            "format": self.format,
            "advanced_proxy": self.advanced_proxy,
            "extract_object": self.extract_object,
        }


# -----------------------------------------------------------------------------
# ScrapeResult — success payload OR error descriptor
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ScrapeSuccess:
    """The remote response body, relayed verbatim."""

    data: Any
    is_error: bool = field(default=False, init=False)

    @property
    def text(self) -> str:
        # Two-space indent, non-ASCII kept as-is.
        return json.dumps(self.data, indent=2, ensure_ascii=False)


@dataclass(frozen=True)
class ScrapeFailure:
    """A remote API or transport failure, already reduced to a message."""

    message: str
    is_error: bool = field(default=True, init=False)

    @property
    def text(self) -> str:
        return f"{ERROR_PREFIX}{self.message}"


ScrapeResult = Union[ScrapeSuccess, ScrapeFailure]
