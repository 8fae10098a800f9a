"""Fetch, transform and publish every configured auction in turn."""

from __future__ import annotations

from contextlib import AsyncExitStack
from typing import Protocol, Sequence

import structlog

from auction_showcase.api.press_one import PublishResult
from auction_showcase.config import AppSettings, AuctionSettings
from auction_showcase.logging import get_logger
from auction_showcase.models import AuctionDetail, Bid, Goods, OutboundPayload
from auction_showcase.pipelines.transform import build_payload


class AuctionSource(Protocol):
    """Where auction detail and bids come from."""

    async def fetch_auction_detail(self, auction_uuid: str) -> tuple[AuctionDetail, Goods]: ...

    async def list_bids(self, auction_uuid: str) -> list[Bid]: ...


class PayloadPublisher(Protocol):
    """Where finished payloads go."""

    async def publish(self, payload: OutboundPayload) -> PublishResult: ...


class ShowcasePipeline:
    """Publish each configured auction, stopping at the first failure.

    Errors from the source or the publisher propagate unchanged; auctions after
    the failing one are left untouched.
    """

    def __init__(
        self,
        *,
        app: AppSettings,
        auctions: Sequence[AuctionSettings],
        source: AuctionSource,
        publisher: PayloadPublisher,
    ) -> None:
        self.app = app
        self.auctions = tuple(auctions)
        self.source = source
        self.publisher = publisher
        self._logger = get_logger(__name__).bind(component="showcase_pipeline")

    async def process_auction(self, auction_settings: AuctionSettings) -> PublishResult:
        """Run fetch, transform and publish for a single auction."""

        auction, goods = await self.source.fetch_auction_detail(auction_settings.uuid)
        bids = await self.source.list_bids(auction_settings.uuid)
        payload = build_payload(auction_settings, auction, goods, bids, self.app.asset_host)
        return await self.publisher.publish(payload)

    async def run(self) -> list[PublishResult]:
        """Process every auction in configuration order."""

        results: list[PublishResult] = []
        async with AsyncExitStack() as stack:
            for resource in (self.source, self.publisher):
                lifecycle = getattr(resource, "lifecycle", None)
                if lifecycle is not None:
                    await stack.enter_async_context(lifecycle())

            for index, auction_settings in enumerate(self.auctions):
                with structlog.contextvars.bound_contextvars(auction_uuid=auction_settings.uuid):
                    self._logger.info("auction_started", position=index + 1, total=len(self.auctions))
                    results.append(await self.process_auction(auction_settings))

        self._logger.info("auctions_published", count=len(results))
        return results
