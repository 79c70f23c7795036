"""
Defined.fi API client.

Defined.fi serves single-token records (price, volume, liquidity, decimals)
behind an API key sent in the X-API-KEY header.

The key comes from a credential provider, by default the DEFINED_API_KEY
environment variable, and is read on every request.
"""

from collections.abc import Callable
from typing import Any

import requests

from api.dexscreener import get_version
from config import (
    DEFINED_API_KEY_HEADER,
    DEFINED_BASE_URL,
    DEFINED_TOKENS_ENDPOINT,
    ERROR_DEFINED_API_KEY_MISSING,
    REQUEST_TIMEOUT_SECONDS,
    get_defined_api_key,
)


class DefinedError(Exception):
    """Base exception for Defined.fi API errors."""

    pass


class RateLimitError(DefinedError):
    """Raised when API rate limit is exceeded."""

    pass


class APIError(DefinedError):
    """Raised for general API errors."""

    pass


class MissingAPIKeyError(DefinedError):
    """Raised when a request is attempted without an API key."""

    pass


class DefinedClient:
    """
    Defined.fi API client.

    Usage:
        client = DefinedClient()
        if client.get_api_key():
            payload = client.get_token("9BB6NFEcjBCtnNLFko2FqVQBq8HHM13kCyYcdQbgpump")
    """

    def __init__(
        self,
        base_url: str = DEFINED_BASE_URL,
        api_key: str | None = None,
        api_key_provider: Callable[[], str | None] = get_defined_api_key,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        """
        Initialize the Defined.fi client.

        Args:
            base_url: API base URL
            api_key: Explicit API key, takes precedence over the provider
            api_key_provider: Callable returning the key, or None if unset
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.api_key_provider = api_key_provider
        self.timeout = timeout

        # The key is added per request, not to the session headers
        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": f"TokenLookup/{get_version()}",
        })

    def get_api_key(self) -> str | None:
        """Return the configured API key, or None if there is none."""
        if self.api_key:
            return self.api_key
        return self.api_key_provider()

    def _request(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> dict:
        """
        Make an authenticated request to the Defined.fi API.

        Args:
            endpoint: API endpoint
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            MissingAPIKeyError: When no API key is configured
            RateLimitError: When rate limit is exceeded
            APIError: For other API errors
        """
        api_key = self.get_api_key()
        if not api_key:
            raise MissingAPIKeyError(ERROR_DEFINED_API_KEY_MISSING)

        url = f"{self.base_url}{endpoint}"

        try:
            response = self.session.get(
                url,
                params=params,
                headers={DEFINED_API_KEY_HEADER: api_key},
                timeout=self.timeout,
            )

            if response.status_code == 429:
                raise RateLimitError("Rate limit exceeded")

            if response.status_code != 200:
                raise APIError(f"API error {response.status_code}: {response.text}")

            return response.json()

        except requests.RequestException as e:
            raise APIError(f"Request failed: {e}") from e

    def get_token(self, address: str) -> dict:
        """
        Get the token record for an address.

        Args:
            address: Token contract address

        Returns:
            Parsed JSON response; the token itself sits under "data"
        """
        return self._request(f"{DEFINED_TOKENS_ENDPOINT}/{address}")
