"""Test configuration and fixtures for the marketplace client tests."""

import json
from collections.abc import AsyncGenerator, Callable
from typing import Any
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from haex_marketplace.client import MarketplaceClient, TransportResponse

TEST_BASE_URL = "https://test.example.com"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep configuration from leaking in through the environment."""
    for name in (
        "HAEX_MARKETPLACE_URL",
        "HAEX_MARKETPLACE_PLATFORM",
        "HAEX_MARKETPLACE_APP_VERSION",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def json_response() -> Callable[..., TransportResponse]:
    """Build a TransportResponse with a JSON-encoded body."""

    def make(body: Any, status: int = 200) -> TransportResponse:
        return TransportResponse(
            status=status,
            body=json.dumps(body).encode(),
            headers={"Content-Type": "application/json"},
        )

    return make


@pytest.fixture
def transport() -> AsyncMock:
    """Create a transport double answering 200 with an empty JSON object."""
    return AsyncMock(return_value=TransportResponse(status=200, body=b"{}"))


@pytest_asyncio.fixture
async def client(transport: AsyncMock) -> AsyncGenerator[MarketplaceClient]:
    """Create a MarketplaceClient wired to the transport double."""
    async with MarketplaceClient(base_url=TEST_BASE_URL, transport=transport) as client:
        yield client


@pytest.fixture
def list_item() -> dict[str, Any]:
    """Extension list item as sent by the server."""
    slug = "notes"
    return {
        "id": f"ext-{slug}",
        "extensionId": f"space.haex.{slug}",
        "name": slug.title(),
        "slug": slug,
        "shortDescription": f"The {slug} extension",
        "iconUrl": None,
        "verified": True,
        "totalDownloads": 1200,
        "averageRating": 4.5,
        "reviewCount": 12,
        "tags": ["productivity"],
        "publishedAt": "2024-05-01T10:00:00Z",
        "publisher": {"displayName": "Haex", "slug": "haex", "verified": True},
        "category": {"name": "Productivity", "slug": "productivity"},
    }


@pytest.fixture
def version_record() -> dict[str, Any]:
    """Extension version as sent by the server."""
    version = "1.2.3"
    return {
        "id": f"ver-{version}",
        "version": version,
        "changelog": "Bug fixes",
        "bundleSize": 20480,
        "bundleHash": "sha256-abc",
        "permissions": ["storage"],
        "minAppVersion": "1.0.0",
        "maxAppVersion": None,
        "downloads": 300,
        "publishedAt": "2024-05-01T10:00:00Z",
    }


@pytest.fixture
def detail_record(version_record: dict[str, Any]) -> dict[str, Any]:
    """Extension detail as sent by the server."""
    slug = "notes"
    return {
        "id": f"ext-{slug}",
        "publisherId": "pub-1",
        "categoryId": "cat-1",
        "extensionId": f"space.haex.{slug}",
        "publicKey": "pk",
        "name": slug.title(),
        "slug": slug,
        "author": "Haex Team",
        "shortDescription": f"The {slug} extension",
        "description": "Longer description",
        "iconUrl": None,
        "verified": True,
        "totalDownloads": 1200,
        "averageRating": None,
        "reviewCount": 0,
        "tags": None,
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": "2024-05-01T10:00:00Z",
        "publishedAt": "2024-05-01T10:00:00Z",
        "publisher": None,
        "category": None,
        "screenshots": [
            {"id": "shot-1", "imageUrl": "https://cdn/1.png", "caption": None, "sortOrder": 0}
        ],
        "versions": [version_record],
        "latestVersion": {
            "version": "1.2.3",
            "changelog": "Bug fixes",
            "bundleSize": 20480,
            "permissions": ["storage"],
            "minAppVersion": "1.0.0",
            "publishedAt": "2024-05-01T10:00:00Z",
        },
    }
