"""Configuration for the marketplace client.

Options not passed explicitly are read from environment variables:

- ``HAEX_MARKETPLACE_URL``: base URL of the API (defaults to the production host)
- ``HAEX_MARKETPLACE_PLATFORM``: platform identifier sent as ``X-Platform``
- ``HAEX_MARKETPLACE_APP_VERSION``: application version sent as ``X-App-Version``
"""

import logging
import os
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://marketplace.haex.space"

TField = TypeVar("TField")


def EnvField(*env_vars: str, default: TField | None = None, **kwargs: Any) -> TField:  # noqa: N802
    """Create a Field that gets its default value from an environment variable."""

    def get_env_value():
        for env_var in env_vars:
            value = os.getenv(env_var)
            if value is not None:
                return value
        logger.debug(
            f"No environment variable found among: {env_vars}, using default value: {default}"
        )
        return default

    return Field(default_factory=get_env_value, validate_default=True, **kwargs)  # pyright: ignore[reportReturnType]


class MarketplaceClientOptions(BaseModel):
    """Immutable configuration of a MarketplaceClient."""

    model_config = ConfigDict(frozen=True)

    base_url: str = EnvField(
        "HAEX_MARKETPLACE_URL", default=DEFAULT_BASE_URL, min_length=1
    )
    # e.g. "windows", "macos", "linux", "android", "ios"
    platform: str | None = EnvField("HAEX_MARKETPLACE_PLATFORM")
    app_version: str | None = EnvField("HAEX_MARKETPLACE_APP_VERSION")
    # Async callable performing the request; None resolves to the aiohttp
    # transport when the first request is made.
    transport: Any = Field(default=None, exclude=True)

    @field_validator("transport")
    @classmethod
    def _check_transport(cls, value: Any) -> Any:
        if value is not None and not callable(value):
            raise ValueError("transport must be an async callable")
        return value
