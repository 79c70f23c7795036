"""
Token data providers.

Each provider wraps one API client and normalizes its responses into the
shared TokenData shape.
"""

from .base import TokenProvider, parse_price
from .defined import DefinedProvider, token_to_token_data
from .dexscreener import DexScreenerProvider, pair_to_token_data

__all__ = [
    "TokenProvider",
    "parse_price",
    "DexScreenerProvider",
    "pair_to_token_data",
    "DefinedProvider",
    "token_to_token_data",
]
