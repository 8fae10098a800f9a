"""Pipeline orchestration for the auction showcase publisher."""

from .showcase_pipeline import AuctionSource, PayloadPublisher, ShowcasePipeline
from .transform import build_payload

__all__ = [
	"AuctionSource",
	"PayloadPublisher",
	"ShowcasePipeline",
	"build_payload",
]
