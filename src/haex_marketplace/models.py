"""Data models for the Haex Marketplace API.

Attributes use snake_case; the wire format is camelCase and handled through
aliases. The models are a typing layer over the server JSON: apart from the key
a record is addressed by, every field has a default, so a sparse body is
accepted as-is. Fields the server sends that are not declared here are kept,
and ``dump_response`` returns exactly the fields the server sent.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SortOrder = Literal["downloads", "rating", "newest", "updated"]


class MarketplaceModel(BaseModel):
    """Base class for records returned by the marketplace API."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )


class MarketplaceParams(BaseModel):
    """Base class for query parameter sets. Unset parameters are never sent."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid"
    )


# Publisher
class Publisher(MarketplaceModel):
    """Account that owns one or more extensions."""

    id: str | None = None
    display_name: str | None = None
    slug: str
    description: str | None = None
    website: str | None = None
    email: str | None = None
    verified: bool = False
    avatar_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


class PublisherSummary(MarketplaceModel):
    """Publisher fields embedded in extension list items."""

    display_name: str | None = None
    slug: str
    verified: bool = False


# Category
class Category(MarketplaceModel):
    """Extension category."""

    id: str | None = None
    name: str | None = None
    slug: str
    description: str | None = None
    icon: str | None = None
    sort_order: int = 0
    created_at: str | None = None


class CategoryWithCount(Category):
    """Category together with the number of extensions filed under it."""

    extension_count: int = 0


class CategorySummary(MarketplaceModel):
    """Category fields embedded in extension list items."""

    name: str | None = None
    slug: str


# Extension
class Extension(MarketplaceModel):
    """Full extension record."""

    id: str | None = None
    publisher_id: str | None = None
    category_id: str | None = None
    extension_id: str | None = None
    public_key: str | None = None
    name: str | None = None
    slug: str
    author: str | None = None
    short_description: str | None = None
    description: str | None = None
    icon_url: str | None = None
    verified: bool = False
    total_downloads: int = 0
    average_rating: float | None = None
    review_count: int = 0
    tags: list[str] | None = None
    created_at: str | None = None
    updated_at: str | None = None
    published_at: str | None = None


class ExtensionListItem(MarketplaceModel):
    """Condensed extension record used in listings."""

    id: str | None = None
    extension_id: str | None = None
    name: str | None = None
    slug: str
    short_description: str | None = None
    icon_url: str | None = None
    verified: bool = False
    total_downloads: int = 0
    average_rating: float | None = None
    review_count: int = 0
    tags: list[str] | None = None
    published_at: str | None = None
    publisher: PublisherSummary | None = None
    category: CategorySummary | None = None


class ExtensionVersion(MarketplaceModel):
    """A published version of an extension bundle."""

    id: str
    version: str | None = None
    changelog: str | None = None
    bundle_size: int = 0
    bundle_hash: str | None = None
    permissions: list[str] | None = None
    min_app_version: str | None = None
    max_app_version: str | None = None
    downloads: int = 0
    published_at: str | None = None


class ExtensionVersionSummary(MarketplaceModel):
    """Version fields attached to an extension detail as its latest version."""

    version: str
    changelog: str | None = None
    bundle_size: int = 0
    permissions: list[str] | None = None
    min_app_version: str | None = None
    published_at: str | None = None


class ExtensionScreenshot(MarketplaceModel):
    id: str
    image_url: str | None = None
    caption: str | None = None
    sort_order: int = 0


class ExtensionDetail(Extension):
    """Extension with its publisher, category, screenshots and versions."""

    publisher: Publisher | None = None
    category: Category | None = None
    screenshots: list[ExtensionScreenshot] = Field(default_factory=list)
    versions: list[ExtensionVersion] = Field(default_factory=list)
    latest_version: ExtensionVersionSummary | None = None


# Reviews
class ExtensionReview(MarketplaceModel):
    id: str
    extension_id: str | None = None
    user_id: str | None = None
    rating: int = 0
    title: str | None = None
    content: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


# API responses
class Pagination(MarketplaceModel):
    """Window of a paginated result."""

    page: int = 0
    limit: int = 0
    total: int = 0
    total_pages: int = 0


class ListExtensionsResponse(MarketplaceModel):
    extensions: list[ExtensionListItem] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


class ListCategoriesResponse(MarketplaceModel):
    categories: list[CategoryWithCount] = Field(default_factory=list)


class ListVersionsResponse(MarketplaceModel):
    versions: list[ExtensionVersion] = Field(default_factory=list)


class ListReviewsResponse(MarketplaceModel):
    reviews: list[ExtensionReview] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


class DownloadResponse(MarketplaceModel):
    """Signed download descriptor for an extension bundle."""

    download_url: str | None = None
    version: str | None = None
    bundle_size: int = 0
    bundle_hash: str | None = None


class HealthResponse(MarketplaceModel):
    status: str | None = None


class ApiErrorBody(MarketplaceModel):
    """Body of an error response."""

    error: str
    status_code: int | None = None


# API requests
class ListExtensionsParams(MarketplaceParams):
    """Filters, sorting and pagination for the extension listing."""

    page: int | None = None
    limit: int | None = None
    category: str | None = None
    search: str | None = None
    tags: str | None = None
    sort: SortOrder | None = None
    publisher: str | None = None


class ListReviewsParams(MarketplaceParams):
    page: int | None = None
    limit: int | None = None


class DownloadParams(MarketplaceParams):
    version: str | None = None


def dump_response(response: BaseModel) -> dict[str, Any]:
    """Dump a response model back to the JSON the server sent.

    Only fields present in the server body are included; defaults filled in
    for absent fields are left out.
    """
    return response.model_dump(mode="json", by_alias=True, exclude_unset=True)
