# =============================================================================
# usescraper/config.py  —  Process Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the environment once at startup into an immutable Settings value.
#   main() builds it and hands it to UseScraperClient; nothing else reads
#   os.environ.
#
# ENVIRONMENT VARIABLES:
#   USESCRAPER_API_KEY  (required)  Bearer credential for api.usescraper.com.
#                                   Missing or empty → MissingApiKeyError and
#                                   the server refuses to start.
#   USESCRAPER_TIMEOUT  (optional)  Request timeout in seconds.  Unset means
#                                   no timeout at all; scrapes with the
#                                   advanced proxy can take a long time.
#
# A .env file is honoured too: the entry point calls load_dotenv() before
# Settings.from_env() runs.
# =============================================================================

import os
from collections.abc import Mapping
from dataclasses import dataclass

from usescraper.errors import ConfigError, MissingApiKeyError

API_BASE_URL = "https://api.usescraper.com/scraper"
API_KEY_ENV = "USESCRAPER_API_KEY"
TIMEOUT_ENV = "USESCRAPER_TIMEOUT"


@dataclass(frozen=True)
class Settings:
    """Immutable process configuration."""

    api_key: str
    base_url: str = API_BASE_URL
    timeout: float | None = None       # seconds; None = wait indefinitely

    def __repr__(self) -> str:
        return (
            f"Settings(api_key='***', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r})"
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """Build Settings from ``environ`` (defaults to ``os.environ``).

        Raises:
            MissingApiKeyError: USESCRAPER_API_KEY is unset or blank.
            ConfigError: USESCRAPER_TIMEOUT is set but not a positive number.
        """
        env = os.environ if environ is None else environ

        api_key = env.get(API_KEY_ENV, "").strip()
        if not api_key:
            raise MissingApiKeyError(API_KEY_ENV)

        return cls(api_key=api_key, timeout=_parse_timeout(env.get(TIMEOUT_ENV)))

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every request."""
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        raise ConfigError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw!r}") from None
    if value <= 0:
        raise ConfigError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return value
