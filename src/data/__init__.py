"""
Token lookup orchestration modules.
"""

from .lookup import (
    TokenLookup,
    default_providers,
    get_defined_token_info,
    get_dexscreener_token_info,
    get_token_info,
)

__all__ = [
    "TokenLookup",
    "default_providers",
    "get_token_info",
    "get_dexscreener_token_info",
    "get_defined_token_info",
]
