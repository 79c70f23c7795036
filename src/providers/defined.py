"""
Defined.fi token data provider.

Fallback source. Needs an API key; without one the provider reports a
failure and makes no request at all.
"""

from api.defined import DefinedClient, DefinedError
from config import (
    ERROR_DEFINED_API_KEY_MISSING,
    ERROR_DEFINED_NOT_FOUND,
    SOURCE_DEFINED,
)
from models import (
    TokenData,
    TokenLiquidity,
    TokenLookupOptions,
    TokenLookupResponse,
    TokenPrice,
)
from providers.base import error_message, optional_float, parse_price
from utils.logging import get_logger

logger = get_logger(__name__)


def token_to_token_data(token: dict, address: str) -> TokenData:
    """
    Normalize a Defined.fi token record into TokenData.

    The address is always the one that was asked for, whatever the record
    says. Market cap and FDV are not read from this API.

    Args:
        token: The "data" object of the /api/v0/tokens response
        address: Requested token address

    Returns:
        Normalized token data
    """
    liquidity_usd = optional_float(token.get("liquidity_usd"))

    return TokenData(
        symbol=token.get("symbol"),
        name=token.get("name"),
        address=address,
        chain_id=token.get("chain_id"),
        decimals=token.get("decimals") or 0,
        price=TokenPrice(
            usd=parse_price(token.get("price_usd")),
            change_24h=optional_float(token.get("price_change_24h")),
        ),
        volume_24h=optional_float(token.get("volume_24h")),
        liquidity=TokenLiquidity(usd=liquidity_usd) if liquidity_usd is not None else None,
        source=SOURCE_DEFINED,
    )


class DefinedProvider:
    """
    Token data from Defined.fi.

    Usage:
        provider = DefinedProvider(DefinedClient(api_key="..."))
        response = provider.fetch(TokenLookupOptions(address="..."))
    """

    name = SOURCE_DEFINED

    def __init__(self, client: DefinedClient | None = None):
        self.client = client or DefinedClient()

    def fetch(self, options: TokenLookupOptions) -> TokenLookupResponse:
        """
        Look up a token on Defined.fi.

        Never raises: a missing key, not-found and transport errors come
        back as failures.

        Args:
            options: Token address (the chain is not used by this API)

        Returns:
            Lookup response with source "defined" on success
        """
        try:
            if not self.client.get_api_key():
                logger.warning("Skipping Defined lookup: %s", ERROR_DEFINED_API_KEY_MISSING)
                return TokenLookupResponse.fail(ERROR_DEFINED_API_KEY_MISSING)

            payload = self.client.get_token(options.address)

            token = payload.get("data") if isinstance(payload, dict) else None
            if not token:
                logger.debug("No Defined record for %s", options.address)
                return TokenLookupResponse.fail(ERROR_DEFINED_NOT_FOUND)

            return TokenLookupResponse.ok(token_to_token_data(token, options.address))

        except DefinedError as e:
            logger.error("Defined API error: %s", e)
            return TokenLookupResponse.fail(error_message(e))
        except Exception as e:
            logger.error("Defined unexpected error: %r", e)
            return TokenLookupResponse.fail(error_message(e))
