"""
Tests for the command-line interface.
"""

import json
import sys
from unittest.mock import patch

import pytest

import main
from api.dexscreener import APIError, DexScreenerClient
from data.lookup import TokenLookup
from models import TokenData, TokenLookupResponse, TokenPrice


def run_cli(*argv):
    with patch.object(sys, "argv", ["tokenlookup", *argv]):
        return main.main()


def ok_response():
    return TokenLookupResponse.ok(
        TokenData(
            symbol="FART",
            name="Fartcoin",
            address="abc",
            chain_id="solana",
            decimals=0,
            price=TokenPrice(usd=1.0),
            source="dexscreener",
        )
    )


class TestLookupCommand:
    """Tests for the lookup command."""

    def test_success(self, capsys):
        with patch.object(TokenLookup, "lookup", return_value=ok_response()):
            assert run_cli("--quiet", "lookup", "abc") == 0

        output = json.loads(capsys.readouterr().out)
        assert output["success"] is True
        assert output["data"]["source"] == "dexscreener"

    def test_failure_exit_code(self, capsys):
        failure = TokenLookupResponse.fail("Token not found on DexScreener")

        with patch.object(TokenLookup, "lookup", return_value=failure):
            assert run_cli("--quiet", "lookup", "abc") == 1

        output = json.loads(capsys.readouterr().out)
        assert output == {"success": False, "error": "Token not found on DexScreener"}

    def test_chain_passed_through(self):
        with patch.object(TokenLookup, "lookup", return_value=ok_response()) as mock_lookup:
            run_cli("--quiet", "lookup", "abc", "def", "--chain", "base")

        assert mock_lookup.call_count == 2
        options = [call.args[0] for call in mock_lookup.call_args_list]
        assert [o.address for o in options] == ["abc", "def"]
        assert all(o.chain_id == "base" for o in options)

    @pytest.mark.parametrize(
        "provider, expected",
        [("auto", ["dexscreener", "defined"]), ("dexscreener", ["dexscreener"]), ("defined", ["defined"])],
    )
    def test_provider_selection(self, provider, expected):
        assert [p.name for p in main._build_lookup(provider).providers] == expected


class TestPassThroughCommands:
    """Tests for the DexScreener pass-through commands."""

    def test_boosts_top(self, capsys):
        with patch.object(DexScreenerClient, "get_top_boosts", return_value=[{"totalAmount": 5000}]):
            assert run_cli("boosts", "--top") == 0

        assert json.loads(capsys.readouterr().out) == [{"totalAmount": 5000}]

    def test_pair_not_found(self):
        with patch.object(DexScreenerClient, "get_pair", return_value=None):
            assert run_cli("pair", "solana", "p1") == 1

    def test_api_error_exit_code(self):
        with patch.object(DexScreenerClient, "get_token_profiles", side_effect=APIError("API error 503: down")):
            assert run_cli("profiles") == 1


def test_no_command_prints_help(capsys):
    assert run_cli() == 0
    assert "usage" in capsys.readouterr().out.lower()
