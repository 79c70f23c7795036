"""
Common interface for token data providers.
"""

import math
from typing import Any, Protocol

from config import ERROR_UNKNOWN
from models import TokenLookupOptions, TokenLookupResponse


class TokenProvider(Protocol):
    """Anything that can turn lookup options into a normalized response."""

    name: str

    def fetch(self, options: TokenLookupOptions) -> TokenLookupResponse:
        ...


def parse_price(value: Any) -> float:
    """
    Parse an upstream price into a float.

    Missing, malformed and non-finite values become 0.0.

    Args:
        value: Price as sent by the API (string or number)

    Returns:
        The price, or 0.0 if it cannot be parsed
    """
    if value is None:
        return 0.0
    try:
        price = float(value)
    except (TypeError, ValueError):
        return 0.0
    return price if math.isfinite(price) else 0.0


def optional_float(value: Any) -> float | None:
    """
    Convert an optional upstream number to float.

    Missing, malformed and non-finite values become None, so a bad
    optional field is dropped instead of failing the whole record.
    """
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def error_message(error: BaseException) -> str:
    """Message of an exception, or a generic one if it carries none."""
    return str(error) or ERROR_UNKNOWN
