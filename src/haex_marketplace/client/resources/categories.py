"""Categories resource for Haex Marketplace API client."""

from ...models import ListCategoriesResponse
from .base import BaseResource


class CategoriesResource(BaseResource):
    """Category-related client methods."""

    async def list(self) -> ListCategoriesResponse:
        """Get all categories with extension counts."""
        response_data = await self.request("/categories")
        return ListCategoriesResponse.model_validate(response_data)
