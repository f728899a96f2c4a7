"""Client module for the Haex Marketplace API."""

from .base import ClientError, MarketplaceApiError
from .client import MarketplaceClient, create_marketplace_client
from .transport import AiohttpTransport, Transport, TransportResponse

__all__ = [
    "AiohttpTransport",
    "ClientError",
    "MarketplaceApiError",
    "MarketplaceClient",
    "Transport",
    "TransportResponse",
    "create_marketplace_client",
]
