"""
TokenLookup - Token market data from DexScreener with Defined.fi fallback.

This package provides tools to:
- Look up price, liquidity, volume and market cap for a token address
- Normalize DexScreener and Defined.fi responses into one schema
- Fall back to Defined.fi when DexScreener has no data
- Query DexScreener profiles, boosts, orders and pair search
"""

__app_name__ = "tokenlookup"
