from __future__ import annotations

import pytest

from auction_showcase.config import AppSettings, AuctionSettings


@pytest.fixture()
def app_settings() -> AppSettings:
    return AppSettings(
        authorization_token="dG9rZW4=",
        bigone_url="https://bigone.test",
        asset_host="https://cdn",
    )


@pytest.fixture()
def auction_settings() -> AuctionSettings:
    return AuctionSettings(uuid="a1", contract_address="0xabc", token_id="7")


@pytest.fixture()
def detail_body() -> dict:
    return {
        "data": {
            "auction": {"asset": {"uuid": "usd1", "symbol": "USD"}},
            "goods": {"guid": "g1", "template": {"attachments": [{"path": "p1.png"}]}},
        }
    }


@pytest.fixture()
def bids_body() -> dict:
    return {
        "data": {
            "bids": [
                {"user": {"guid": "u1", "nickname": "Bob"}, "price": "5", "created_at": "t1"},
            ]
        }
    }
