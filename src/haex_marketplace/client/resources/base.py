"""Base resource class with path and parameter helpers."""

from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from ...models import MarketplaceParams
from ..base import BaseClient, QueryParams


def build_params(
    params_type: type[MarketplaceParams],
    params: MarketplaceParams | None,
    filters: Mapping[str, Any],
) -> dict[str, Any]:
    """Validate an optional params model and keyword filters into query values.

    Filters win over the model. The result is keyed by wire name and keeps the
    order the values were given in: the model's set fields first, then filters.
    """
    values = params.model_dump(exclude_unset=True) if params is not None else {}
    values.update(filters)
    validated = params_type.model_validate(values).model_dump(
        mode="json", by_alias=True
    )

    fields = params_type.model_fields
    query: dict[str, Any] = {}
    for key in values:
        wire_name = (fields[key].alias or key) if key in fields else key
        query[wire_name] = validated[wire_name]
    return query


class BaseResource:
    """Base class for API resources."""

    def __init__(self, base_client: BaseClient):
        """Initialize resource with base client.

        Args:
            base_client: The BaseClient instance for making HTTP requests

        """
        self._base_client = base_client

    @staticmethod
    def extension_path(slug: str, *segments: str) -> str:
        """Build ``/extensions/{slug}[/segment...]`` with the slug as one encoded segment."""
        return "/".join(["/extensions", quote(slug, safe=""), *segments])

    async def request(
        self,
        path: str,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
        **options: Any,
    ) -> Any:
        """Make a GET request through the base client.

        Args:
            path: API endpoint path
            params: Optional query parameters
            headers: Optional additional headers
            **options: Passed through to the transport

        Returns:
            The decoded JSON body

        """
        return await self._base_client.request(path, params, headers, **options)
