# =============================================================================
# usescraper/errors.py  —  Error Taxonomy
# =============================================================================
#
# Every fault the server knows how to classify has a type here:
#
#   ConfigError / MissingApiKeyError  →  startup faults, the process exits
#   UnknownToolError                  →  protocol fault (method not found)
#   InvalidArgumentsError             →  protocol fault (invalid params)
#
# Remote API faults are NOT exceptions at this level: the client turns
# httpx.HTTPError into a ScrapeFailure result (usescraper.models).  Anything
# that is neither is an unclassified fault and propagates as-is.
# =============================================================================


class UseScraperError(Exception):
    """Base class for errors raised by the usescraper package."""


class ConfigError(UseScraperError):
    """The process environment does not describe a usable configuration."""


class MissingApiKeyError(ConfigError):
    """USESCRAPER_API_KEY is unset or empty."""

    def __init__(self, variable: str = "USESCRAPER_API_KEY"):
        super().__init__(f"{variable} environment variable is required")
        self.variable = variable


class UnknownToolError(UseScraperError):
    """A tool name other than the ones we advertise was called."""

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name


class InvalidArgumentsError(UseScraperError):
    """Tool arguments failed validation; ``reason`` says which rule."""

    def __init__(self, reason: str):
        super().__init__(f"Invalid scrape arguments: {reason}")
        self.reason = reason
