"""HTTP plumbing shared by the third-party data providers."""

import os
from dataclasses import dataclass
from typing import Any

import httpx
from limits import parse
from limits.storage import MemoryStorage
from limits.strategies import MovingWindowRateLimiter

from friday.errors import ConfigurationError, ToolInvocationError
from friday.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ProviderConfig:
    """Configuration for one third-party provider."""

    name: str
    base_url: str
    api_key: str | None = None
    api_key_env: str = ""
    timeout_seconds: float = 10.0
    requests_per_minute: int = 30

    @classmethod
    def from_env(cls, name: str, key_env: str, url_env: str, default_url: str) -> "ProviderConfig":
        """Read the provider's key and base URL from the environment."""
        return cls(
            name=name,
            base_url=os.getenv(url_env) or default_url,
            api_key=os.getenv(key_env) or None,
            api_key_env=key_env,
            timeout_seconds=float(os.getenv("PROVIDER_TIMEOUT_SECONDS", "10")),
            requests_per_minute=int(os.getenv("PROVIDER_REQUESTS_PER_MINUTE", "30")),
        )

    def require_api_key(self) -> str:
        """Return the API key or fail with a configuration error."""
        if not self.api_key:
            raise ConfigurationError(f"{self.name} API is not configured. Set {self.api_key_env}.")
        return self.api_key


class ProviderRateLimiter:
    """Moving-window request budget for a provider.

    Turns are processed synchronously for the caller, so an exhausted budget
    fails the lookup instead of waiting for the window to reset.
    """

    def __init__(self, requests_per_minute: int = 30):
        self.storage = MemoryStorage()
        self.limiter = MovingWindowRateLimiter(self.storage)
        self.request_limit = parse(f"{requests_per_minute}/minute")

    def try_acquire(self, identifier: str) -> bool:
        """Record one request for identifier, returning False if over budget."""
        return self.limiter.hit(self.request_limit, identifier)


def ensure_trailing_slash(value: str) -> str:
    return value if value.endswith("/") else f"{value}/"


class ProviderClient:
    """Single-shot GET client for a JSON provider API.

    There is no retry: a transport error, non-2xx response or undecodable
    body is reported once as a ToolInvocationError.
    """

    def __init__(
        self,
        config: ProviderConfig,
        transport: httpx.AsyncBaseTransport | None = None,
        rate_limiter: ProviderRateLimiter | None = None,
    ):
        """Initialize provider client.

        Args:
            config: Provider configuration
            transport: Optional httpx transport (used to stub the provider in tests)
            rate_limiter: Optional limiter, one per provider by default
        """
        self.config = config
        self.transport = transport
        self.rate_limiter = rate_limiter or ProviderRateLimiter(config.requests_per_minute)

    def build_url(self, path: str) -> str:
        return ensure_trailing_slash(self.config.base_url) + path.lstrip("/")

    async def get_json(self, path: str, params: dict[str, str]) -> tuple[int, dict[str, Any]]:
        """Issue one GET and return the status code and decoded JSON body.

        The body is returned even for non-2xx statuses so callers can extract
        the provider's own error message. A body that isn't a JSON object
        decodes to an empty dict.
        """
        if not self.rate_limiter.try_acquire(self.config.name.lower()):
            logger.warning(f"{self.config.name} request budget exhausted")
            raise ToolInvocationError(f"{self.config.name} lookup failed: rate limit exceeded")

        url = self.build_url(path)
        logger.debug(f"{self.config.name} GET {url}")

        try:
            async with httpx.AsyncClient(timeout=self.config.timeout_seconds, transport=self.transport) as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning(f"{self.config.name} request failed: {e!r}")
            raise ToolInvocationError(f"{self.config.name} lookup failed: {str(e) or type(e).__name__}") from e

        try:
            payload = response.json()
        except ValueError:
            payload = {}

        if not isinstance(payload, dict):
            payload = {}

        logger.debug(f"{self.config.name} responded with status {response.status_code}")
        return response.status_code, payload
