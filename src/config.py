"""
Configuration constants for the TokenLookup project.

TokenLookup - Token market data from DexScreener with Defined.fi fallback.
"""

import os

# =============================================================================
# DexScreener API Configuration
# =============================================================================

# Public API, no key required
DEXSCREENER_BASE_URL = "https://api.dexscreener.com"

# Chain used when a lookup does not name one
DEFAULT_CHAIN_ID = "solana"

# =============================================================================
# Defined.fi API Configuration
# =============================================================================

DEFINED_BASE_URL = "https://api.defined.fi"
DEFINED_TOKENS_ENDPOINT = "/api/v0/tokens"

# The API key is read from the environment, never from this file
DEFINED_API_KEY_ENV = "DEFINED_API_KEY"
DEFINED_API_KEY_HEADER = "X-API-KEY"


def get_defined_api_key() -> str | None:
    """
    Get the Defined.fi API key from the environment.

    Read at call time so a key exported after import is still picked up.

    Returns:
        The API key, or None if the variable is unset or empty
    """
    return os.environ.get(DEFINED_API_KEY_ENV) or None


# =============================================================================
# HTTP Configuration
# =============================================================================

REQUEST_TIMEOUT_SECONDS = 30

# =============================================================================
# Result Sources and Messages
# =============================================================================

SOURCE_DEXSCREENER = "dexscreener"
SOURCE_DEFINED = "defined"

ERROR_DEXSCREENER_NOT_FOUND = "Token not found on DexScreener"
ERROR_DEFINED_NOT_FOUND = "Token not found on Defined"
ERROR_DEFINED_API_KEY_MISSING = "Defined API key not found in environment variables"
ERROR_UNKNOWN = "Unknown error occurred"
ERROR_NO_PROVIDERS = "No token data providers configured"
