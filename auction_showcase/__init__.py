"""Auction Showcase: publish BigONE NFT auctions to PRESS.one collections."""

from __future__ import annotations

from .api import BigOneClient, PublishResult, ShowcasePublisher
from .config import AppSettings, AuctionSettings, Settings, load_settings
from .errors import ConfigError, DecodeError, NetworkError, ResponseStatusError, ShowcaseError
from .pipelines import ShowcasePipeline, build_payload

__all__ = [
    "AppSettings",
    "AuctionSettings",
    "BigOneClient",
    "ConfigError",
    "DecodeError",
    "NetworkError",
    "PublishResult",
    "ResponseStatusError",
    "Settings",
    "ShowcaseError",
    "ShowcasePipeline",
    "ShowcasePublisher",
    "build_payload",
    "load_settings",
]
