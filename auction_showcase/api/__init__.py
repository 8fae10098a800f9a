"""HTTP clients for the source marketplace and the publish target."""

from .bigone import BigOneClient
from .client import JsonServiceClient, ServiceRequest
from .press_one import PUBLISH_URL, PublishResult, ShowcasePublisher

__all__ = [
    "BigOneClient",
    "JsonServiceClient",
    "PUBLISH_URL",
    "PublishResult",
    "ServiceRequest",
    "ShowcasePublisher",
]
