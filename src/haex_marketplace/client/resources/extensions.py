"""Extensions resource for Haex Marketplace API client."""

from typing import Any

from ...models import (
    DownloadParams,
    DownloadResponse,
    ExtensionDetail,
    ListExtensionsParams,
    ListExtensionsResponse,
    ListVersionsResponse,
)
from .base import BaseResource, build_params


class ExtensionsResource(BaseResource):
    """Extension-related client methods."""

    async def list(
        self, params: ListExtensionsParams | None = None, **filters: Any
    ) -> ListExtensionsResponse:
        """List extensions with optional filtering, sorting and pagination.

        Filters may be given as a ListExtensionsParams, as keyword arguments
        (``page``, ``limit``, ``category``, ``search``, ``tags``, ``sort``,
        ``publisher``), or both, in which case keyword arguments take precedence.
        """
        query = build_params(ListExtensionsParams, params, filters)
        response_data = await self.request("/extensions", params=query)
        return ListExtensionsResponse.model_validate(response_data)

    async def get(self, slug: str) -> ExtensionDetail:
        """Get extension details by slug."""
        response_data = await self.request(self.extension_path(slug))
        return ExtensionDetail.model_validate(response_data)

    async def download_url(
        self, slug: str, version: str | None = None
    ) -> DownloadResponse:
        """Get a signed download URL for an extension.

        Args:
            slug: Extension slug
            version: Specific version; when omitted the server picks the latest

        """
        params = DownloadParams(version=version) if version else None
        response_data = await self.request(
            self.extension_path(slug, "download"), params=params
        )
        return DownloadResponse.model_validate(response_data)

    async def versions(self, slug: str) -> ListVersionsResponse:
        """Get all published versions of an extension."""
        response_data = await self.request(self.extension_path(slug, "versions"))
        return ListVersionsResponse.model_validate(response_data)
