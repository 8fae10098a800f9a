"""Client for the BigONE NFT marketplace API (auction detail and bid list)."""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from auction_showcase.api.client import JsonServiceClient
from auction_showcase.config import AppSettings
from auction_showcase.errors import DecodeError
from auction_showcase.models import AuctionDetail, AuctionDetailResponse, Bid, BidListResponse, Goods

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_envelope(model: type[ModelT], body: Any, *, source: str) -> ModelT:
    """Validate a decoded JSON body, reporting shape mismatches as :class:`DecodeError`."""

    # A literal ``null`` body carries no data but is still valid JSON.
    if body is None:
        body = {}
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise DecodeError(f"unexpected response shape from {source}: {exc}") from exc


class BigOneClient(JsonServiceClient):
    """Read-only access to auctions listed on BigONE."""

    def __init__(
        self,
        settings: AppSettings,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(settings.bigone_url, client=client, transport=transport, component="bigone_client")

    async def fetch_auction_detail(self, auction_uuid: str) -> tuple[AuctionDetail, Goods]:
        """Return the auction and the goods it sells.

        Either may come back empty when the API omits it.
        """

        path = f"api/nft/v1/auctions/{auction_uuid}/detail"
        envelope = decode_envelope(AuctionDetailResponse, await self.get_json(path), source=self.url_for(path))
        auction, goods = envelope.data.auction, envelope.data.goods
        self._logger.info(
            "auction_detail_fetched",
            auction_uuid=auction_uuid,
            goods_guid=goods.guid,
            asset_symbol=auction.asset.symbol,
            attachments=len(goods.template.attachments),
        )
        return auction, goods

    async def list_bids(self, auction_uuid: str) -> list[Bid]:
        """Return the auction's bids in the order the API lists them."""

        path = f"api/nft/v1/auctions/{auction_uuid}/bids"
        envelope = decode_envelope(BidListResponse, await self.get_json(path), source=self.url_for(path))
        bids = list(envelope.data.bids)
        self._logger.info("bids_fetched", auction_uuid=auction_uuid, count=len(bids))
        return bids
