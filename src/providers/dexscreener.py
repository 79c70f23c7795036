"""
DexScreener token data provider.

Looks up the pairs of a token and normalizes the first one into TokenData.
The upstream order is trusted as is; no re-ranking by liquidity is done.
"""

from api.dexscreener import DexScreenerClient, DexScreenerError
from config import DEFAULT_CHAIN_ID, ERROR_DEXSCREENER_NOT_FOUND, SOURCE_DEXSCREENER
from models import (
    TokenData,
    TokenLiquidity,
    TokenLookupOptions,
    TokenLookupResponse,
    TokenPrice,
)
from providers.base import error_message, parse_price
from utils.logging import get_logger

logger = get_logger(__name__)


def pair_to_token_data(pair: dict) -> TokenData:
    """
    Normalize a DexScreener pair object into TokenData.

    Symbol, name, address and chain come from the pair itself (its base
    token), not from the lookup request. This endpoint carries no decimals,
    so they are reported as 0. Volume and liquidity default to 0; market cap,
    FDV and the 24h change stay unset when the pair has none.

    Args:
        pair: One element of the /tokens/v1 response

    Returns:
        Normalized token data
    """
    base_token = pair["baseToken"]
    volume = pair.get("volume") or {}
    price_change = pair.get("priceChange") or {}
    liquidity = pair.get("liquidity") or {}

    return TokenData(
        symbol=base_token["symbol"],
        name=base_token["name"],
        address=base_token["address"],
        chain_id=pair.get("chainId"),
        decimals=0,
        price=TokenPrice(
            usd=parse_price(pair.get("priceUsd")),
            change_24h=price_change.get("h24"),
        ),
        volume_24h=volume.get("h24") or 0,
        liquidity=TokenLiquidity(usd=liquidity.get("usd") or 0),
        market_cap=pair.get("marketCap"),
        fdv=pair.get("fdv"),
        source=SOURCE_DEXSCREENER,
    )


class DexScreenerProvider:
    """
    Token data from DexScreener.

    Usage:
        provider = DexScreenerProvider()
        response = provider.fetch(TokenLookupOptions(address="..."))
    """

    name = SOURCE_DEXSCREENER

    def __init__(self, client: DexScreenerClient | None = None):
        self.client = client or DexScreenerClient()

    def fetch(self, options: TokenLookupOptions) -> TokenLookupResponse:
        """
        Look up a token on DexScreener.

        Never raises: not-found and transport errors come back as failures.

        Args:
            options: Token address and optional chain (default: solana)

        Returns:
            Lookup response with source "dexscreener" on success
        """
        chain_id = options.chain_id or DEFAULT_CHAIN_ID

        try:
            pairs = self.client.get_token_pairs(chain_id, options.address)

            if not pairs or not isinstance(pairs, list):
                logger.debug("No DexScreener pairs for %s on %s", options.address, chain_id)
                return TokenLookupResponse.fail(ERROR_DEXSCREENER_NOT_FOUND)

            return TokenLookupResponse.ok(pair_to_token_data(pairs[0]))

        except DexScreenerError as e:
            logger.error("DexScreener API error: %s", e)
            return TokenLookupResponse.fail(error_message(e))
        except Exception as e:
            logger.error("DexScreener unexpected error: %r", e)
            return TokenLookupResponse.fail(error_message(e))
