"""
DexScreener API client.

DexScreener offers free, keyless access to:
- Trading pairs for a token address on a given chain
- Latest token profiles and boosted tokens
- Paid orders for a token
- Pair search by symbol, name or address

Responses are returned as parsed JSON, mirroring the upstream shape.
Normalization into TokenData happens in providers.dexscreener.

API Documentation: https://docs.dexscreener.com/api/reference
"""

from importlib.metadata import version
from typing import Any

import requests

from config import DEXSCREENER_BASE_URL, REQUEST_TIMEOUT_SECONDS
from utils.logging import get_logger

logger = get_logger(__name__)


def get_version() -> str:
    """Get package version for User-Agent."""
    try:
        return version("tokenlookup")
    except Exception:
        return "dev"


class DexScreenerError(Exception):
    """Base exception for DexScreener API errors."""

    pass


class RateLimitError(DexScreenerError):
    """Raised when API rate limit is exceeded."""

    pass


class APIError(DexScreenerError):
    """Raised for general API errors."""

    pass


class DexScreenerClient:
    """
    DexScreener API client.

    Usage:
        client = DexScreenerClient()
        pairs = client.get_token_pairs("solana", "So11111111111111111111111111111111111111112")
        boosts = client.get_top_boosts()
    """

    def __init__(
        self,
        base_url: str = DEXSCREENER_BASE_URL,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
    ):
        """
        Initialize the DexScreener client.

        Args:
            base_url: API base URL
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

        self.session = requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": f"TokenLookup/{get_version()}",
        })

    def _request(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
    ) -> dict | list:
        """
        Make a request to the DexScreener API.

        Args:
            endpoint: API endpoint (e.g., "/token-boosts/top/v1")
            params: Query parameters

        Returns:
            Parsed JSON response

        Raises:
            RateLimitError: When rate limit is exceeded
            APIError: For other API errors
        """
        url = f"{self.base_url}{endpoint}"

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)

            if response.status_code == 429:
                raise RateLimitError("Rate limit exceeded")

            if response.status_code != 200:
                raise APIError(f"API error {response.status_code}: {response.text}")

            return response.json()

        except requests.RequestException as e:
            raise APIError(f"Request failed: {e}") from e

    def get_token_pairs(self, chain_id: str | int, token_address: str) -> dict | list:
        """
        Get the trading pairs of a token on one chain.

        The upstream answers with a JSON array of pair objects. The raw
        body is returned unchecked; callers decide what an unusable body is.

        Args:
            chain_id: Chain identifier (e.g., "solana", "ethereum")
            token_address: Token contract address

        Returns:
            Parsed JSON response (normally a list of pairs)
        """
        return self._request(f"/tokens/v1/{chain_id}/{token_address}")

    def get_token_profiles(self) -> list[dict]:
        """
        Get the latest token profiles.

        Rate limit: 60 requests per minute.
        """
        try:
            return self._request("/token-profiles/latest/v1")
        except DexScreenerError as e:
            logger.error("DexScreener token profiles error: %s", e)
            raise

    def get_latest_boosts(self) -> list[dict]:
        """
        Get the latest boosted tokens.

        Rate limit: 60 requests per minute.
        """
        try:
            return self._request("/token-boosts/latest/v1")
        except DexScreenerError as e:
            logger.error("DexScreener token boosts error: %s", e)
            raise

    def get_top_boosts(self) -> list[dict]:
        """
        Get the tokens with most active boosts.

        Rate limit: 60 requests per minute.
        """
        try:
            return self._request("/token-boosts/top/v1")
        except DexScreenerError as e:
            logger.error("DexScreener top boosts error: %s", e)
            raise

    def get_token_orders(self, chain_id: str, token_address: str) -> list[dict]:
        """
        Get the orders paid for a token.

        Rate limit: 60 requests per minute.

        Args:
            chain_id: Chain identifier
            token_address: Token contract address

        Returns:
            List of orders, each with paymentTimestamp, type and status
        """
        try:
            return self._request(f"/orders/v1/{chain_id}/{token_address}")
        except DexScreenerError as e:
            logger.error("DexScreener orders error: %s", e)
            raise

    def search_pairs(self, query: str, chain_id: str | None = None) -> list[dict]:
        """
        Search for pairs matching a query.

        Rate limit: 300 requests per minute.

        Args:
            query: Token address, symbol or name
            chain_id: Optional chain to restrict results to

        Returns:
            List of matching pairs
        """
        params = {"q": query}
        if chain_id:
            params["chain"] = chain_id

        try:
            data = self._request("/latest/dex/search", params=params)
            return data.get("pairs") or []
        except DexScreenerError as e:
            logger.error("DexScreener search error: %s", e)
            raise

    def get_pairs(self, token_address: str, chain_id: str) -> list[dict]:
        """
        Get pairs for a token address on a required chain.

        Rate limit: 300 requests per minute.

        Raises:
            ValueError: If chain_id is empty
        """
        if not chain_id:
            raise ValueError("chain_id is required for get_pairs")

        try:
            data = self._request(
                "/latest/dex/search",
                params={"q": token_address, "chain": chain_id},
            )
            return data.get("pairs") or []
        except DexScreenerError as e:
            logger.error("DexScreener get_pairs error: %s", e)
            raise

    def get_pair(self, pair_address: str, chain_id: str) -> dict | None:
        """
        Get a specific pair by its address.

        Unlike the other endpoints this never raises for API failures.

        Returns:
            The pair, or None if it was not found or the request failed
        """
        try:
            data = self._request(f"/latest/dex/pairs/{chain_id}/{pair_address}")
        except DexScreenerError as e:
            logger.error("DexScreener get_pair error: %s", e)
            return None

        pairs = data.get("pairs") if isinstance(data, dict) else None
        return pairs[0] if pairs else None

    def ping(self) -> bool:
        """
        Check if the API is reachable.

        Returns:
            True if API responds successfully
        """
        try:
            self._request("/token-profiles/latest/v1")
            return True
        except DexScreenerError:
            return False
