"""Reshape BigONE auction data into a PRESS.one collection payload."""

from __future__ import annotations

from typing import Sequence

from auction_showcase.config import AuctionSettings
from auction_showcase.models import (
    AuctionDetail,
    Bid,
    DigitalCollectible,
    Goods,
    Holder,
    Media,
    OutboundBid,
    OutboundPayload,
    Price,
    Unit,
)


def build_payload(
    auction_settings: AuctionSettings,
    auction: AuctionDetail,
    goods: Goods,
    bids: Sequence[Bid],
    asset_host: str,
) -> OutboundPayload:
    """Build the collection payload for one auction.

    Attachments and bids keep their source order. Bid prices are copied as
    strings so ``"10.500"`` is sent as ``"10.500"``. The collectible uuid is the
    goods guid, not the auction uuid.
    """

    media = [Media(url=f"{asset_host}/{attachment.path}") for attachment in goods.template.attachments]
    unit = Unit(uuid=auction.asset.uuid, symbol=auction.asset.symbol)

    return OutboundPayload(
        digital_collectibles=DigitalCollectible(
            uuid=goods.guid,
            contract_address=auction_settings.contract_address,
            token_id=auction_settings.token_id,
            media=media,
        ),
        bids=[
            OutboundBid(
                price=Price(value=bid.price, unit=unit),
                holder=Holder(uuid=bid.user.guid, nickname=bid.user.nickname),
                bid_at=bid.created_at,
            )
            for bid in bids
        ],
    )
