import json

import httpx
import pytest

from usescraper.client import UseScraperClient
from usescraper.models import ScrapeFailure, ScrapeRequest, ScrapeSuccess


@pytest.mark.anyio
async def test_posts_normalized_body_with_auth(settings, fake_api):
    async with UseScraperClient(settings, transport=fake_api.transport) as client:
        await client.scrape(ScrapeRequest(url="https://example.com"))

    request = fake_api.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.usescraper.com/scraper/scrape"
    assert request.headers["Authorization"] == "Bearer test-key"
    assert request.headers["Content-Type"] == "application/json"
    assert fake_api.bodies[0] == {
        "url": "https://example.com",
        "format": "markdown",
        "advanced_proxy": False,
        "extract_object": {},
    }


@pytest.mark.anyio
async def test_success_is_pretty_printed(settings, fake_api):
    payload = {"status": "scraped", "text": "# Example Domain", "meta": {"title": "Café"}}
    fake_api.respond = lambda request: httpx.Response(200, json=payload)

    async with UseScraperClient(settings, transport=fake_api.transport) as client:
        result = await client.scrape(ScrapeRequest(url="https://example.com"))

    assert isinstance(result, ScrapeSuccess)
    assert result.is_error is False
    assert result.data == payload
    assert result.text == json.dumps(payload, indent=2, ensure_ascii=False)
    assert "Café" in result.text


@pytest.mark.anyio
async def test_non_json_success_is_relayed_as_text(settings, fake_api):
    fake_api.respond = lambda request: httpx.Response(200, text="plain body")

    async with UseScraperClient(settings, transport=fake_api.transport) as client:
        result = await client.scrape(ScrapeRequest(url="https://example.com"))

    assert result.data == "plain body"
    assert result.text == '"plain body"'


@pytest.mark.anyio
async def test_remote_message_is_used(settings, fake_api):
    fake_api.respond = lambda request: httpx.Response(401, json={"message": "Invalid API key"})

    async with UseScraperClient(settings, transport=fake_api.transport) as client:
        result = await client.scrape(ScrapeRequest(url="https://example.com"))

    assert isinstance(result, ScrapeFailure)
    assert result.is_error is True
    assert result.text == "UseScraper API error: Invalid API key"


@pytest.mark.anyio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(500, text="<html>Internal error</html>"),
        httpx.Response(500, json={"error": "no message field"}),
        httpx.Response(500, json={"message": None}),
    ],
)
async def test_status_error_without_message_falls_back(settings, fake_api, response):
    fake_api.respond = lambda request: response

    async with UseScraperClient(settings, transport=fake_api.transport) as client:
        result = await client.scrape(ScrapeRequest(url="https://example.com"))

    assert result.is_error is True
    assert result.text.startswith("UseScraper API error: Server error '500 Internal Server Error'")


@pytest.mark.anyio
async def test_transport_error_becomes_failure(settings, fake_api):
    def refuse(request):
        raise httpx.ConnectError("Connection refused", request=request)

    fake_api.respond = refuse

    async with UseScraperClient(settings, transport=fake_api.transport) as client:
        result = await client.scrape(ScrapeRequest(url="https://example.com"))

    assert result == ScrapeFailure("Connection refused")
    assert result.text == "UseScraper API error: Connection refused"


@pytest.mark.anyio
async def test_empty_transport_message_uses_exception_name(settings, fake_api):
    def time_out(request):
        raise httpx.ReadTimeout("", request=request)

    fake_api.respond = time_out

    async with UseScraperClient(settings, transport=fake_api.transport) as client:
        result = await client.scrape(ScrapeRequest(url="https://example.com"))

    assert result.text == "UseScraper API error: ReadTimeout"


@pytest.mark.anyio
async def test_other_exceptions_propagate(settings, fake_api):
    def explode(request):
        raise RuntimeError("boom")

    fake_api.respond = explode

    async with UseScraperClient(settings, transport=fake_api.transport) as client:
        with pytest.raises(RuntimeError, match="boom"):
            await client.scrape(ScrapeRequest(url="https://example.com"))
