"""Client resources for the Haex Marketplace API."""

from .base import BaseResource
from .categories import CategoriesResource
from .extensions import ExtensionsResource
from .reviews import ReviewsResource

__all__ = [
    "BaseResource",
    "CategoriesResource",
    "ExtensionsResource",
    "ReviewsResource",
]
