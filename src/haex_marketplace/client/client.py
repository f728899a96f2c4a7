"""Main MarketplaceClient with modular resource access."""

from typing import Any

from ..config import MarketplaceClientOptions
from ..models import HealthResponse
from .base import BaseClient
from .resources import CategoriesResource, ExtensionsResource, ReviewsResource


class MarketplaceClient:
    """Client for the Haex Marketplace API with modular resource access.

    Usage:
        async with MarketplaceClient(platform="linux", app_version="2.0.0") as client:
            page = await client.extensions.list(search="notes", sort="downloads")
            detail = await client.extensions.get(page.extensions[0].slug)
            download = await client.extensions.download_url(detail.slug)
            categories = await client.categories.list()
            reviews = await client.reviews.list(detail.slug, limit=10)

    Using the client as a context manager keeps one HTTP session open for all
    requests. Without it every request opens its own session.
    """

    def __init__(
        self, options: MarketplaceClientOptions | None = None, **overrides: Any
    ):
        """Initialize client from options and/or keyword overrides.

        Args:
            options: Client options; built from the environment when omitted
            **overrides: ``base_url``, ``platform``, ``app_version`` or
                ``transport``, taking precedence over ``options``

        """
        if options is None:
            options = MarketplaceClientOptions(**overrides)
        elif overrides:
            options = MarketplaceClientOptions(**{**dict(options), **overrides})
        self.options = options
        self._base_client = BaseClient(options)

        self.extensions = ExtensionsResource(self._base_client)
        self.categories = CategoriesResource(self._base_client)
        self.reviews = ReviewsResource(self._base_client)

    async def __aenter__(self):
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def connect(self):
        """Connect the underlying base client (increments reference count)."""
        await self._base_client.connect()

    async def close(self):
        """Close the underlying base client (decrements reference count)."""
        await self._base_client.close()

    @property
    def base_url(self) -> str:
        return self.options.base_url

    async def health_check(self) -> HealthResponse:
        """Check server health.

        Returns:
            HealthResponse: Health check response

        """
        response_data = await self._base_client.request("/health")
        return HealthResponse.model_validate(response_data)


def create_marketplace_client(
    options: MarketplaceClientOptions | None = None, **overrides: Any
) -> MarketplaceClient:
    """Create a new MarketplaceClient instance."""
    return MarketplaceClient(options, **overrides)
