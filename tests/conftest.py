"""
Pytest configuration and fixtures for TokenLookup tests.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (actual API calls)"
    )


def pytest_addoption(parser):
    """Add command line option for integration tests."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="Run integration tests that make actual API calls",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is specified."""
    if config.getoption("--run-integration"):
        os.environ["RUN_INTEGRATION_TESTS"] = "1"
        return

    skip_integration = pytest.mark.skip(reason="Use --run-integration to run API tests")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture
def mock_response():
    """Create a mock requests.Response factory."""
    def _mock(status_code=200, json_data=None):
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = json_data
        response.text = str(json_data)
        return response

    return _mock


@pytest.fixture
def sample_pair():
    """A DexScreener pair as returned by /tokens/v1."""
    return {
        "chainId": "solana",
        "dexId": "raydium",
        "url": "https://dexscreener.com/solana/bzc9nzfmqkxr6fz1dbph7bdf9broyef6pnzesp7v5iiw",
        "pairAddress": "Bzc9NZfMqkXR6fz1DBph7BDf9BroyEf6pnzESP7v5iiw",
        "baseToken": {
            "address": "9BB6NFEcjBCtnNLFko2FqVQBq8HHM13kCyYcdQbgpump",
            "name": "Fartcoin ",
            "symbol": "Fartcoin ",
        },
        "quoteToken": {
            "address": "So11111111111111111111111111111111111111112",
            "name": "Wrapped SOL",
            "symbol": "SOL",
        },
        "priceNative": "0.005012",
        "priceUsd": "1.0234",
        "txns": {"h24": {"buys": 12000, "sells": 11000}},
        "volume": {"h24": 45000000.5, "h6": 9000000},
        "priceChange": {"h24": -3.2, "h6": 1.1},
        "liquidity": {"usd": 52000000.0, "base": 25000000, "quote": 130000},
        "fdv": 1023400000,
        "marketCap": 1023300000,
        "pairCreatedAt": 1729000000000,
    }


@pytest.fixture
def sample_defined_token():
    """A Defined.fi token record (the "data" object)."""
    return {
        "symbol": "FART",
        "name": "Fartcoin",
        "address": "SomeOtherAddress1111111111111111111111111111",
        "chain_id": "solana",
        "decimals": 6,
        "price_usd": 1.02,
        "price_change_24h": 2.5,
        "volume_24h": 1500000.0,
        "liquidity_usd": 800000.0,
    }
