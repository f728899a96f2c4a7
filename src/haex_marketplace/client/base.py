"""Lightweight base client with the request plumbing shared by all resources."""

import logging
from collections.abc import Iterator, Mapping
from typing import Any
from urllib.parse import urlencode

from pydantic import BaseModel

from ..config import MarketplaceClientOptions
from ..models import ApiErrorBody
from .transport import AiohttpTransport, Transport, TransportResponse

logger = logging.getLogger(__name__)

QueryParams = BaseModel | Mapping[str, Any]


class ClientError(Exception):
    """Base exception for client errors."""

    pass


class MarketplaceApiError(ClientError):
    """Error response from the marketplace API."""

    def __init__(self, message: str, status_code: int):
        """Initialize API error with message and HTTP status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(message)


def _query_items(params: QueryParams) -> Iterator[tuple[str, str]]:
    """Yield query pairs in order, skipping parameters that are None."""
    if isinstance(params, BaseModel):
        params = params.model_dump(mode="json", by_alias=True)
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = "true" if value else "false"
        yield key, str(value)


def _error_message(response: TransportResponse) -> str:
    """Extract the ``error`` field of an error response, or fall back to the status."""
    fallback = f"HTTP {response.status}"
    try:
        # ValidationError and JSONDecodeError are both ValueErrors
        body = ApiErrorBody.model_validate(response.json())
    except ValueError:
        return fallback
    return body.error or fallback


class BaseClient:
    """Builds requests for the marketplace API and hands them to a transport."""

    def __init__(self, options: MarketplaceClientOptions):
        """Initialize base client from immutable client options."""
        self.base_url = options.base_url
        self.platform = options.platform
        self.app_version = options.app_version
        self._transport: Transport | None = options.transport
        self._default_transport: AiohttpTransport | None = None

    @property
    def transport(self) -> Transport:
        """The injected transport, or the aiohttp transport created on first use."""
        if self._transport is not None:
            return self._transport
        return self._get_default_transport()

    def _get_default_transport(self) -> AiohttpTransport:
        if self._default_transport is None:
            self._default_transport = AiohttpTransport()
        return self._default_transport

    async def connect(self):
        """Open a shared session on the default transport.

        Injected transports manage their own resources and are left alone.
        """
        if self._transport is None:
            await self._get_default_transport().connect()

    async def close(self):
        """Release the default transport's shared session."""
        if self._default_transport is not None:
            await self._default_transport.close()

    def _build_url(self, path: str, params: QueryParams | None = None) -> str:
        """Build a complete URL with query parameters."""
        url = f"{self.base_url}{path}"
        if params is not None:
            query = urlencode(list(_query_items(params)))
            if query:
                url += "?" + query
        return url

    def _build_headers(self, headers: Mapping[str, str] | None = None) -> dict[str, str]:
        """Merge default, caller and identity headers, in increasing precedence."""
        request_headers = {"Content-Type": "application/json", **(headers or {})}

        identity: dict[str, str] = {}
        if self.platform:
            identity["X-Platform"] = self.platform
        if self.app_version:
            identity["X-App-Version"] = self.app_version

        for name, value in identity.items():
            for key in [k for k in request_headers if k.lower() == name.lower()]:
                del request_headers[key]
            request_headers[name] = value
        return request_headers

    async def request(
        self,
        path: str,
        params: QueryParams | None = None,
        headers: Mapping[str, str] | None = None,
        **options: Any,
    ) -> Any:
        """Make a GET request and return the decoded JSON body.

        Args:
            path: API endpoint path, appended verbatim to the base URL
            params: Optional query parameters; None values are omitted
            headers: Optional additional headers
            **options: Passed through to the transport unchanged

        Returns:
            The decoded JSON body

        Raises:
            MarketplaceApiError: If the response status is not 2xx

        """
        url = self._build_url(path, params)
        logger.debug(f"GET {url}")

        response = await self.transport(
            url, method="GET", headers=self._build_headers(headers), **options
        )

        if not response.ok:
            message = _error_message(response)
            logger.debug(f"GET {url} failed with HTTP {response.status}: {message}")
            raise MarketplaceApiError(message, response.status)

        return response.json()
