"""
Token lookup orchestration.

Asks each provider in turn and returns the first successful answer.

Provider order (default):
1. DexScreener - public, no key required
2. Defined.fi  - only consulted when DexScreener has no usable data

Providers are called one after another, never concurrently, and results
are never merged: the answer comes from exactly one source.
"""

from collections.abc import Sequence

from config import ERROR_NO_PROVIDERS
from models import TokenLookupOptions, TokenLookupResponse
from providers.base import TokenProvider
from providers.defined import DefinedProvider
from providers.dexscreener import DexScreenerProvider
from utils.logging import get_logger

# Module logger
logger = get_logger(__name__)


def default_providers() -> list[TokenProvider]:
    """Build the standard provider chain: DexScreener, then Defined.fi."""
    return [DexScreenerProvider(), DefinedProvider()]


class TokenLookup:
    """
    Looks up token market data with provider fallback.

    Usage:
        lookup = TokenLookup()
        response = lookup.lookup(TokenLookupOptions(address="...", chain_id="solana"))
        if response.success:
            print(response.data.price.usd)
        else:
            print(response.error)
    """

    def __init__(self, providers: Sequence[TokenProvider] | None = None):
        """
        Initialize the lookup.

        Args:
            providers: Providers in priority order (default: DexScreener, Defined.fi)
        """
        self.providers = list(providers) if providers is not None else default_providers()

    def lookup(self, options: TokenLookupOptions) -> TokenLookupResponse:
        """
        Look up a token, falling back through the providers.

        The first success is returned immediately and later providers are
        not called. If every provider fails, the last provider's failure is
        returned unchanged.

        Args:
            options: Token address and optional chain

        Returns:
            Lookup response from a single provider
        """
        response = TokenLookupResponse.fail(ERROR_NO_PROVIDERS)

        for provider in self.providers:
            response = provider.fetch(options)
            if response.success:
                logger.debug("Token %s found on %s", options.address, provider.name)
                return response

            logger.info("%s lookup failed for %s: %s", provider.name, options.address, response.error)

        return response


def get_token_info(options: TokenLookupOptions) -> TokenLookupResponse:
    """Look up a token on DexScreener, falling back to Defined.fi."""
    return TokenLookup().lookup(options)


def get_dexscreener_token_info(options: TokenLookupOptions) -> TokenLookupResponse:
    """Look up a token on DexScreener only."""
    return DexScreenerProvider().fetch(options)


def get_defined_token_info(options: TokenLookupOptions) -> TokenLookupResponse:
    """Look up a token on Defined.fi only."""
    return DefinedProvider().fetch(options)
