"""
Normalized token data models.

Both providers map their upstream payloads onto these dataclasses, so callers
only ever see one shape. Optional fields hold None when the upstream source
did not supply them and are left out of ``to_dict()`` output entirely.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from config import SOURCE_DEFINED, SOURCE_DEXSCREENER

VALID_SOURCES = (SOURCE_DEXSCREENER, SOURCE_DEFINED)


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass
class TokenLookupOptions:
    """What to look up: a token address and, optionally, its chain."""

    address: str
    chain_id: str | int | None = None


@dataclass
class TokenPrice:
    """USD price and optional 24h change (percent)."""

    usd: float
    change_24h: float | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"usd": self.usd}
        if self.change_24h is not None:
            result["change24h"] = self.change_24h
        return result


@dataclass
class TokenLiquidity:
    """Liquidity locked in the token's pool(s), in USD."""

    usd: float

    def to_dict(self) -> dict[str, Any]:
        return {"usd": self.usd}


@dataclass
class TokenData:
    """Token market data normalized across providers."""

    symbol: str
    name: str
    address: str
    chain_id: str | int | None
    decimals: int
    price: TokenPrice
    source: str
    last_updated: datetime = field(default_factory=utc_now)
    volume_24h: float | None = None
    liquidity: TokenLiquidity | None = None
    market_cap: float | None = None
    fdv: float | None = None

    def __post_init__(self):
        if self.source not in VALID_SOURCES:
            raise ValueError(f"Unknown token data source: {self.source!r}")

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to a JSON-serializable dictionary.

        Keys follow the camelCase contract shared by both providers.
        Optional fields are omitted when absent rather than set to null.
        """
        result: dict[str, Any] = {
            "symbol": self.symbol,
            "name": self.name,
            "address": self.address,
            "chainId": self.chain_id,
            "decimals": self.decimals,
            "price": self.price.to_dict(),
        }
        if self.volume_24h is not None:
            result["volume24h"] = self.volume_24h
        if self.liquidity is not None:
            result["liquidity"] = self.liquidity.to_dict()
        if self.market_cap is not None:
            result["marketCap"] = self.market_cap
        if self.fdv is not None:
            result["fdv"] = self.fdv
        result["lastUpdated"] = self.last_updated.isoformat()
        result["source"] = self.source
        return result


@dataclass
class TokenLookupResponse:
    """
    Outcome of a token lookup.

    Either ``success`` is True and ``data`` is set, or ``success`` is False
    and ``error`` carries a human-readable reason. Never both.

    Usage:
        response = TokenLookupResponse.ok(token_data)
        response = TokenLookupResponse.fail("Token not found on DexScreener")
    """

    success: bool
    data: TokenData | None = None
    error: str | None = None

    def __post_init__(self):
        if self.success and (self.data is None or self.error is not None):
            raise ValueError("A successful response needs data and no error")
        if not self.success and (self.data is not None or not self.error):
            raise ValueError("A failed response needs an error and no data")

    @classmethod
    def ok(cls, data: TokenData) -> "TokenLookupResponse":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "TokenLookupResponse":
        return cls(success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, including only the populated branch."""
        if self.success:
            return {"success": True, "data": self.data.to_dict()}
        return {"success": False, "error": self.error}
