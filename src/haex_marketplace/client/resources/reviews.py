"""Reviews resource for Haex Marketplace API client."""

from typing import Any

from ...models import ListReviewsParams, ListReviewsResponse
from .base import BaseResource, build_params


class ReviewsResource(BaseResource):
    """Review-related client methods."""

    async def list(
        self, slug: str, params: ListReviewsParams | None = None, **filters: Any
    ) -> ListReviewsResponse:
        """Get reviews for an extension with pagination (``page``, ``limit``)."""
        query = build_params(ListReviewsParams, params, filters)
        response_data = await self.request(
            self.extension_path(slug, "reviews"), params=query
        )
        return ListReviewsResponse.model_validate(response_data)
