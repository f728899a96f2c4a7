"""Haex Marketplace SDK.

Async client for browsing the Haex extension marketplace.
"""

from .client import (
    AiohttpTransport,
    ClientError,
    MarketplaceApiError,
    MarketplaceClient,
    Transport,
    TransportResponse,
    create_marketplace_client,
)
from .config import DEFAULT_BASE_URL, MarketplaceClientOptions
from .models import (
    ApiErrorBody,
    Category,
    CategorySummary,
    CategoryWithCount,
    DownloadResponse,
    Extension,
    ExtensionDetail,
    ExtensionListItem,
    ExtensionReview,
    ExtensionScreenshot,
    ExtensionVersion,
    ExtensionVersionSummary,
    HealthResponse,
    ListCategoriesResponse,
    ListExtensionsParams,
    ListExtensionsResponse,
    ListReviewsParams,
    ListReviewsResponse,
    ListVersionsResponse,
    Pagination,
    Publisher,
    PublisherSummary,
    SortOrder,
)
from .state import MarketplaceState

__all__ = [
    "DEFAULT_BASE_URL",
    "AiohttpTransport",
    "ApiErrorBody",
    "Category",
    "CategorySummary",
    "CategoryWithCount",
    "ClientError",
    "DownloadResponse",
    "Extension",
    "ExtensionDetail",
    "ExtensionListItem",
    "ExtensionReview",
    "ExtensionScreenshot",
    "ExtensionVersion",
    "ExtensionVersionSummary",
    "HealthResponse",
    "ListCategoriesResponse",
    "ListExtensionsParams",
    "ListExtensionsResponse",
    "ListReviewsParams",
    "ListReviewsResponse",
    "ListVersionsResponse",
    "MarketplaceApiError",
    "MarketplaceClient",
    "MarketplaceClientOptions",
    "MarketplaceState",
    "Pagination",
    "Publisher",
    "PublisherSummary",
    "SortOrder",
    "Transport",
    "TransportResponse",
    "create_marketplace_client",
]
