"""Wire models for the BigONE source API and the PRESS.one collections API."""

from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class SourceModel(BaseModel):
    """Base for BigONE response objects.

    Absent and ``null`` fields decode to their zero value (empty string, empty
    list, empty object) instead of failing validation.
    """

    model_config = ConfigDict(frozen=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name is not None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value


class Asset(SourceModel):
    uuid: str = ""
    symbol: str = ""


class AuctionDetail(SourceModel):
    """Auction metadata; only the asset bids are priced in is used."""

    asset: Asset = Field(default_factory=Asset)


class Attachment(SourceModel):
    path: str = ""


class GoodsTemplate(SourceModel):
    attachments: List[Attachment] = Field(default_factory=list)


class Goods(SourceModel):
    """The digital collectible sold by an auction."""

    guid: str = ""
    template: GoodsTemplate = Field(default_factory=GoodsTemplate)


class BidUser(SourceModel):
    guid: str = ""
    nickname: str = ""


class Bid(SourceModel):
    """A single bid. ``price`` is a decimal string and is never parsed."""

    user: BidUser = Field(default_factory=BidUser)
    price: str = ""
    created_at: str = ""


class AuctionDetailData(SourceModel):
    auction: AuctionDetail = Field(default_factory=AuctionDetail)
    goods: Goods = Field(default_factory=Goods)


class AuctionDetailResponse(SourceModel):
    """Envelope of ``GET /api/nft/v1/auctions/{uuid}/detail``."""

    data: AuctionDetailData = Field(default_factory=AuctionDetailData)


class BidListData(SourceModel):
    bids: List[Bid] = Field(default_factory=list)


class BidListResponse(SourceModel):
    """Envelope of ``GET /api/nft/v1/auctions/{uuid}/bids``."""

    data: BidListData = Field(default_factory=BidListData)


class Media(BaseModel):
    url: str


class DigitalCollectible(BaseModel):
    uuid: str
    contract_address: str
    token_id: str
    media: List[Media]


class Unit(BaseModel):
    uuid: str
    symbol: str


class Price(BaseModel):
    value: str
    unit: Unit


class Holder(BaseModel):
    uuid: str
    nickname: str


class OutboundBid(BaseModel):
    price: Price
    holder: Holder
    bid_at: str


class OutboundPayload(BaseModel):
    """Request body of ``POST /api/v2/nft/collections``."""

    digital_collectibles: DigitalCollectible
    bids: List[OutboundBid]

    def to_json(self) -> str:
        return self.model_dump_json()
