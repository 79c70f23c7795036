"""
TokenLookup - Token market data from DexScreener and Defined.fi

Command-line entry point.

Usage:
    python -m main [command] [options]

Commands:
    lookup      Look up price, volume and liquidity for token addresses
    profiles    List the latest DexScreener token profiles
    boosts      List boosted tokens (latest, or --top)
    orders      List paid orders for a token
    search      Search DexScreener pairs
    pair        Show a single DexScreener pair
    status      Show API connectivity and configuration

Examples:
    # Look up a token (DexScreener first, Defined.fi as fallback)
    python -m main lookup 9BB6NFEcjBCtnNLFko2FqVQBq8HHM13kCyYcdQbgpump

    # Several tokens on another chain, Defined.fi only
    python -m main lookup ADDR1 ADDR2 --chain ethereum --provider defined

    # Most boosted tokens
    python -m main boosts --top

    # Verbose logging
    python -m main lookup ADDR --verbose
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from tqdm import tqdm

from api.defined import DefinedClient
from api.dexscreener import DexScreenerClient, DexScreenerError
from config import DEFINED_API_KEY_ENV
from data.lookup import TokenLookup
from models import TokenLookupOptions
from providers.defined import DefinedProvider
from providers.dexscreener import DexScreenerProvider
from utils.logging import get_logger, setup_logging

# Module logger
logger = get_logger(__name__)

PROVIDER_CHOICES = ("auto", "dexscreener", "defined")


def _print_json(data: Any) -> None:
    """Write a JSON document to stdout."""
    print(json.dumps(data, indent=2, default=str))


def _build_lookup(provider: str) -> TokenLookup:
    """Build a lookup restricted to the requested provider."""
    if provider == "dexscreener":
        return TokenLookup([DexScreenerProvider()])
    if provider == "defined":
        return TokenLookup([DefinedProvider()])
    return TokenLookup()


def cmd_lookup(args: argparse.Namespace) -> int:
    """Look up one or more token addresses."""
    lookup = _build_lookup(args.provider)

    addresses = args.addresses
    show_progress = len(addresses) > 1 and not args.quiet
    failures = 0

    for address in tqdm(addresses, desc="Looking up tokens", disable=not show_progress):
        response = lookup.lookup(TokenLookupOptions(address=address, chain_id=args.chain))

        if not response.success:
            failures += 1
            logger.error("%s: %s", address, response.error)

        _print_json(response.to_dict())

    if failures:
        logger.warning("%d of %d lookups failed", failures, len(addresses))
        return 1

    return 0


def cmd_profiles(args: argparse.Namespace) -> int:
    """List the latest token profiles."""
    _print_json(DexScreenerClient().get_token_profiles())
    return 0


def cmd_boosts(args: argparse.Namespace) -> int:
    """List latest or top boosted tokens."""
    client = DexScreenerClient()
    boosts = client.get_top_boosts() if args.top else client.get_latest_boosts()
    _print_json(boosts)
    return 0


def cmd_orders(args: argparse.Namespace) -> int:
    """List paid orders for a token."""
    _print_json(DexScreenerClient().get_token_orders(args.chain, args.address))
    return 0


def cmd_search(args: argparse.Namespace) -> int:
    """Search pairs by address, symbol or name."""
    _print_json(DexScreenerClient().search_pairs(args.query, chain_id=args.chain))
    return 0


def cmd_pair(args: argparse.Namespace) -> int:
    """Show a single pair."""
    pair = DexScreenerClient().get_pair(args.pair_address, args.chain)

    if pair is None:
        logger.error("Pair %s not found on %s", args.pair_address, args.chain)
        return 1

    _print_json(pair)
    return 0


def cmd_status(args: argparse.Namespace) -> int:
    """Show API connectivity and configuration."""
    logger.info("=" * 60)
    logger.info("TOKENLOOKUP - Status")
    logger.info("=" * 60)

    if DexScreenerClient().ping():
        logger.info("DexScreener API: reachable")
    else:
        logger.info("DexScreener API: NOT reachable")

    if DefinedClient().get_api_key():
        logger.info("Defined API key: configured")
    else:
        logger.info("Defined API key: not configured")
        logger.info("  Set %s to enable the Defined.fi fallback", DEFINED_API_KEY_ENV)

    return 0


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="tokenlookup",
        description="Token market data from DexScreener with Defined.fi fallback",
    )

    # Global arguments
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging (DEBUG level)",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress progress bars",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Log to file (in addition to console)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # lookup command
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Look up price, volume and liquidity for token addresses",
    )
    lookup_parser.add_argument(
        "addresses",
        nargs="+",
        help="Token address(es) to look up",
    )
    lookup_parser.add_argument(
        "--chain",
        "-c",
        default=None,
        help="Chain identifier (DexScreener default: solana)",
    )
    lookup_parser.add_argument(
        "--provider",
        "-p",
        choices=PROVIDER_CHOICES,
        default="auto",
        help="Data provider (default: auto = DexScreener, then Defined.fi)",
    )

    # profiles command
    subparsers.add_parser(
        "profiles",
        help="List the latest DexScreener token profiles",
    )

    # boosts command
    boosts_parser = subparsers.add_parser(
        "boosts",
        help="List boosted tokens",
    )
    boosts_parser.add_argument(
        "--top",
        action="store_true",
        help="Show tokens with most active boosts instead of the latest",
    )

    # orders command
    orders_parser = subparsers.add_parser(
        "orders",
        help="List paid orders for a token",
    )
    orders_parser.add_argument("chain", help="Chain identifier")
    orders_parser.add_argument("address", help="Token address")

    # search command
    search_parser = subparsers.add_parser(
        "search",
        help="Search DexScreener pairs",
    )
    search_parser.add_argument("query", help="Token address, symbol or name")
    search_parser.add_argument(
        "--chain",
        "-c",
        default=None,
        help="Restrict results to one chain",
    )

    # pair command
    pair_parser = subparsers.add_parser(
        "pair",
        help="Show a single DexScreener pair",
    )
    pair_parser.add_argument("chain", help="Chain identifier")
    pair_parser.add_argument("pair_address", help="Pair address")

    # status command
    subparsers.add_parser(
        "status",
        help="Show API connectivity and configuration",
    )

    args = parser.parse_args()

    # Setup logging based on global args
    log_level = logging.DEBUG if args.verbose else logging.INFO
    setup_logging(level=log_level, log_file=args.log_file, verbose=args.verbose)

    if args.command is None:
        parser.print_help()
        return 0

    # Route to command handler
    commands = {
        "lookup": cmd_lookup,
        "profiles": cmd_profiles,
        "boosts": cmd_boosts,
        "orders": cmd_orders,
        "search": cmd_search,
        "pair": cmd_pair,
        "status": cmd_status,
    }

    handler = commands.get(args.command)
    if handler:
        try:
            return handler(args)
        except DexScreenerError as e:
            logger.error("DexScreener request failed: %s", e)
            return 1
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            return 130
        except Exception as e:
            logger.exception("Unexpected error: %s", e)
            return 1

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
