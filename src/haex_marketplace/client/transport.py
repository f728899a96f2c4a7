"""Transport abstraction used by the client to perform HTTP round trips."""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Protocol

import aiohttp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransportResponse:
    """Fully read HTTP response returned by a transport.

    Attributes:
        status: HTTP status code
        body: Raw response body
        headers: Response headers

    """

    status: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        """Whether the status is in the 2xx range."""
        return 200 <= self.status < 300

    def json(self) -> Any:
        """Decode the body as JSON. Raises json.JSONDecodeError on invalid JSON."""
        return json.loads(self.body)


class Transport(Protocol):
    """Async callable performing a single HTTP request.

    Any extra keyword options given to the client (e.g. ``timeout``) are passed
    through untouched. Network failures are raised as-is.
    """

    async def __call__(
        self,
        url: str,
        *,
        method: str,
        headers: dict[str, str],
        **options: Any,
    ) -> TransportResponse: ...


class AiohttpTransport:
    """Default transport backed by aiohttp.

    Between ``connect()`` and the matching ``close()`` all requests share one
    ClientSession. Outside of that a short-lived session is opened per request.
    """

    def __init__(self, timeout: float | None = 60.0):
        """Initialize the transport with an optional total request timeout."""
        self.timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None
        self._session: aiohttp.ClientSession | None = None
        self._ref_count: int = 0

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
        """Create the aiohttp session and increment reference count."""
        if self._session is None:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        self._ref_count += 1

    async def close(self):
        """Close the aiohttp session when reference count reaches zero."""
        self._ref_count = max(self._ref_count - 1, 0)

        if self._ref_count == 0 and self._session:
            session = self._session
            self._session = None
            await session.close()

    async def __call__(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        **options: Any,
    ) -> TransportResponse:
        """Perform the request and read the whole response body."""
        if self._session is not None:
            return await self._send(self._session, url, method, headers, options)

        logger.debug("No open session, using a one-shot session")
        async with aiohttp.ClientSession(timeout=self.timeout) as session:
            return await self._send(session, url, method, headers, options)

    @staticmethod
    async def _send(
        session: aiohttp.ClientSession,
        url: str,
        method: str,
        headers: dict[str, str] | None,
        options: dict[str, Any],
    ) -> TransportResponse:
        async with session.request(
            method, url, headers=headers, **options
        ) as response:
            body = await response.read()
            return TransportResponse(
                status=response.status,
                body=body,
                headers=dict(response.headers),
            )
