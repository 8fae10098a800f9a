"""Publisher for the PRESS.one NFT collections API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx

from auction_showcase.api.client import JsonServiceClient
from auction_showcase.config import AppSettings
from auction_showcase.errors import DecodeError
from auction_showcase.models import OutboundPayload

PUBLISH_URL = "https://dev.press.one/api/v2/nft/collections"


@dataclass(slots=True)
class PublishResult:
    """Outcome of one publish call."""

    showcase_url: str | None
    body: dict[str, Any] = field(default_factory=dict)


class ShowcasePublisher(JsonServiceClient):
    """POST collection payloads and report the showcase URL PRESS.one returns.

    The authorization token is sent as ``Basic <token>`` exactly as configured;
    it is expected to be encoded already.
    """

    def __init__(
        self,
        settings: AppSettings,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        url: str = PUBLISH_URL,
    ) -> None:
        super().__init__(url, client=client, transport=transport, component="showcase_publisher")
        self._authorization = f"Basic {settings.authorization_token}"

    async def publish(self, payload: OutboundPayload) -> PublishResult:
        body = payload.to_json()
        self._logger.info("publish_payload", url=self.base_url, payload=payload.model_dump())

        result = await self.post_json("", body=body, headers={"Authorization": self._authorization})
        if not isinstance(result, dict):
            raise DecodeError(f"POST {self.base_url} returned {type(result).__name__}, expected a JSON object")

        showcase_url = result.get("showcaseUrl")
        if showcase_url is not None and not isinstance(showcase_url, str):
            raise DecodeError(
                f"POST {self.base_url} returned showcaseUrl of type {type(showcase_url).__name__}, expected a string"
            )
        if showcase_url is not None:
            self._logger.info("showcase_published", showcase_url=showcase_url)
        return PublishResult(showcase_url=showcase_url, body=result)
