from __future__ import annotations

import json

import httpx
import pytest
from structlog.testing import capture_logs

from auction_showcase.api.press_one import PUBLISH_URL, ShowcasePublisher
from auction_showcase.config import AppSettings
from auction_showcase.errors import DecodeError, NetworkError, ResponseStatusError
from auction_showcase.models import DigitalCollectible, OutboundPayload


@pytest.fixture()
def payload() -> OutboundPayload:
    return OutboundPayload(
        digital_collectibles=DigitalCollectible(uuid="g1", contract_address="0xabc", token_id="7", media=[]),
        bids=[],
    )


@pytest.mark.asyncio
async def test_publish_sends_headers_and_logs_showcase_url(
    app_settings: AppSettings, payload: OutboundPayload
) -> None:
    captured = {}

    async def handler(request: httpx.Request) -> httpx.Response:
        captured["url"] = str(request.url)
        captured["method"] = request.method
        captured["headers"] = dict(request.headers)
        captured["body"] = request.content.decode()
        return httpx.Response(200, json={"showcaseUrl": "https://press.one/s/1", "id": 42})

    with capture_logs() as logs:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            result = await ShowcasePublisher(app_settings, client=client).publish(payload)

    assert captured["url"] == PUBLISH_URL
    assert captured["method"] == "POST"
    assert captured["headers"]["content-type"] == "application/json"
    assert captured["headers"]["authorization"] == "Basic dG9rZW4="
    assert captured["body"] == payload.to_json()
    assert result.showcase_url == "https://press.one/s/1"
    assert result.body["id"] == 42

    published = [entry for entry in logs if entry["event"] == "showcase_published"]
    assert published == [
        {
            "event": "showcase_published",
            "showcase_url": "https://press.one/s/1",
            "component": "showcase_publisher",
            "log_level": "info",
        }
    ]
    sent = [entry for entry in logs if entry["event"] == "publish_payload"]
    assert sent[0]["payload"] == json.loads(payload.to_json())


@pytest.mark.asyncio
async def test_missing_showcase_url_is_tolerated(app_settings: AppSettings, payload: OutboundPayload) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"status": "queued"})

    with capture_logs() as logs:
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            result = await ShowcasePublisher(app_settings, client=client).publish(payload)

    assert result.showcase_url is None
    assert not [entry for entry in logs if entry["event"] == "showcase_published"]


@pytest.mark.asyncio
async def test_custom_url_and_non_object_response(app_settings: AppSettings, payload: OutboundPayload) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == "https://publish.test/collections"
        return httpx.Response(200, json=["unexpected"])

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        publisher = ShowcasePublisher(app_settings, client=client, url="https://publish.test/collections")
        with pytest.raises(DecodeError, match="expected a JSON object"):
            await publisher.publish(payload)


@pytest.mark.asyncio
async def test_publish_propagates_transport_and_status_errors(
    app_settings: AppSettings, payload: OutboundPayload
) -> None:
    async def refused(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    async def unauthorized(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"error": "bad token"})

    async with httpx.AsyncClient(transport=httpx.MockTransport(refused)) as client:
        with pytest.raises(NetworkError):
            await ShowcasePublisher(app_settings, client=client).publish(payload)

    async with httpx.AsyncClient(transport=httpx.MockTransport(unauthorized)) as client:
        with pytest.raises(ResponseStatusError) as excinfo:
            await ShowcasePublisher(app_settings, client=client).publish(payload)
    assert excinfo.value.status_code == 401


@pytest.mark.asyncio
async def test_non_string_showcase_url_raises_decode_error(
    app_settings: AppSettings, payload: OutboundPayload
) -> None:
    async def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"showcaseUrl": 12345})

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(DecodeError, match="showcaseUrl"):
            await ShowcasePublisher(app_settings, client=client).publish(payload)
