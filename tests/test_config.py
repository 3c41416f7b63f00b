import pytest

from usescraper.config import API_BASE_URL, Settings
from usescraper.errors import ConfigError, MissingApiKeyError


def test_reads_api_key():
    settings = Settings.from_env({"USESCRAPER_API_KEY": "abc123"})
    assert settings.api_key == "abc123"
    assert settings.base_url == API_BASE_URL
    assert settings.timeout is None
    assert settings.headers == {
        "Authorization": "Bearer abc123",
        "Content-Type": "application/json",
    }


@pytest.mark.parametrize("environ", [{}, {"USESCRAPER_API_KEY": ""}, {"USESCRAPER_API_KEY": "   "}])
def test_missing_api_key_is_fatal(environ):
    with pytest.raises(MissingApiKeyError, match="USESCRAPER_API_KEY environment variable is required"):
        Settings.from_env(environ)


def test_defaults_to_process_environment(monkeypatch):
    monkeypatch.setenv("USESCRAPER_API_KEY", "from-os")
    monkeypatch.delenv("USESCRAPER_TIMEOUT", raising=False)
    assert Settings.from_env().api_key == "from-os"


def test_timeout_is_parsed():
    settings = Settings.from_env({"USESCRAPER_API_KEY": "k", "USESCRAPER_TIMEOUT": "90"})
    assert settings.timeout == 90.0


@pytest.mark.parametrize("raw", ["soon", "0", "-5"])
def test_bad_timeout_is_a_config_error(raw):
    with pytest.raises(ConfigError):
        Settings.from_env({"USESCRAPER_API_KEY": "k", "USESCRAPER_TIMEOUT": raw})


def test_repr_hides_the_key():
    assert "secret" not in repr(Settings(api_key="secret"))
