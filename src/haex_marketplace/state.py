"""Observable loading/error/result state layered over a MarketplaceClient.

Meant for UI code that renders marketplace data: every fetch mirrors its
result into attributes, and subscribers are told about each change.
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import Any

from .client import MarketplaceClient
from .config import MarketplaceClientOptions
from .models import (
    CategoryWithCount,
    DownloadResponse,
    ExtensionDetail,
    ExtensionListItem,
    ExtensionVersion,
    ListExtensionsParams,
    ListExtensionsResponse,
    ListReviewsParams,
    ListReviewsResponse,
)

logger = logging.getLogger(__name__)

Listener = Callable[[str, Any], None]


class MarketplaceState:
    """Marketplace client whose calls are mirrored into observable state.

    Attributes exposed read-only:
        is_loading: True while any request is in flight
        error: Last exception raised by a request, until cleared
        extensions: Items of the last extension listing
        extensions_total: Total count reported by the last extension listing
        current_extension: Last extension fetched by slug
        categories: Last fetched categories

    Errors are recorded and then re-raised to the caller.
    """

    def __init__(
        self,
        options: MarketplaceClientOptions | None = None,
        *,
        client: MarketplaceClient | None = None,
        **overrides: Any,
    ):
        """Initialize state around a new client, or around an existing ``client``."""
        self.client = client or MarketplaceClient(options, **overrides)
        self._listeners: list[Listener] = []
        self._in_flight = 0
        self._values: dict[str, Any] = {
            "is_loading": False,
            "error": None,
            "extensions": [],
            "extensions_total": 0,
            "current_extension": None,
            "categories": [],
        }

    async def __aenter__(self):
        """Async context manager entry."""
        await self.client.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """Async context manager exit."""
        await self.client.close()

    @property
    def is_loading(self) -> bool:
        return self._values["is_loading"]

    @property
    def error(self) -> Exception | None:
        return self._values["error"]

    @property
    def extensions(self) -> list[ExtensionListItem]:
        return self._values["extensions"]

    @property
    def extensions_total(self) -> int:
        return self._values["extensions_total"]

    @property
    def current_extension(self) -> ExtensionDetail | None:
        return self._values["current_extension"]

    @property
    def categories(self) -> list[CategoryWithCount]:
        return self._values["categories"]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(name, value)`` on every state change.

        Returns:
            A function that removes the listener

        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _set(self, name: str, value: Any) -> None:
        if self._values[name] is value:
            return
        self._values[name] = value
        for listener in list(self._listeners):
            listener(name, value)

    @asynccontextmanager
    async def _track(self) -> AsyncIterator[None]:
        """Track a request: loading flag while in flight, error on failure."""
        self._in_flight += 1
        self._set("is_loading", True)
        self._set("error", None)
        try:
            yield
        except Exception as e:
            logger.debug(f"Marketplace request failed: {e!r}")
            self._set("error", e)
            raise
        finally:
            self._in_flight -= 1
            if self._in_flight == 0:
                self._set("is_loading", False)

    def clear_error(self) -> None:
        self._set("error", None)

    async def fetch_extensions(
        self, params: ListExtensionsParams | None = None, **filters: Any
    ) -> ListExtensionsResponse:
        """List extensions and mirror the items and total count."""
        async with self._track():
            response = await self.client.extensions.list(params, **filters)
            self._set("extensions", response.extensions)
            self._set("extensions_total", response.pagination.total)
            return response

    async def fetch_extension(self, slug: str) -> ExtensionDetail:
        """Fetch an extension and make it the current extension."""
        async with self._track():
            extension = await self.client.extensions.get(slug)
            self._set("current_extension", extension)
            return extension

    async def fetch_categories(self) -> list[CategoryWithCount]:
        async with self._track():
            response = await self.client.categories.list()
            self._set("categories", response.categories)
            return response.categories

    async def get_download_url(
        self, slug: str, version: str | None = None
    ) -> DownloadResponse:
        async with self._track():
            return await self.client.extensions.download_url(slug, version)

    async def fetch_versions(self, slug: str) -> list[ExtensionVersion]:
        async with self._track():
            response = await self.client.extensions.versions(slug)
            return response.versions

    async def fetch_reviews(
        self, slug: str, params: ListReviewsParams | None = None, **filters: Any
    ) -> ListReviewsResponse:
        async with self._track():
            return await self.client.reviews.list(slug, params, **filters)
