"""
API client modules for external data sources.

Data source strategy:
- DexScreener: Primary source for token pairs, plus profiles, boosts, orders and search
- Defined.fi: Fallback source for single-token records (requires an API key)
"""

from .defined import (
    APIError as DefinedAPIError,
    DefinedClient,
    DefinedError,
    MissingAPIKeyError,
    RateLimitError as DefinedRateLimitError,
)
from .dexscreener import (
    APIError as DexScreenerAPIError,
    DexScreenerClient,
    DexScreenerError,
    RateLimitError as DexScreenerRateLimitError,
)

__all__ = [
    # DexScreener
    "DexScreenerClient",
    "DexScreenerError",
    "DexScreenerAPIError",
    "DexScreenerRateLimitError",
    # Defined.fi
    "DefinedClient",
    "DefinedError",
    "DefinedAPIError",
    "DefinedRateLimitError",
    "MissingAPIKeyError",
]
