"""
Tests for the approval normalizer (field resolution, flags, per-approval risk).
"""

from __future__ import annotations

import pytest

from backend_walletguard.analytics.models import SENTINEL, Approval
from backend_walletguard.analytics.normalizer import (
    derive_flags,
    normalize_approval,
    normalize_approvals,
    resolve_allowance,
    resolve_last_updated,
    resolve_spender,
    resolve_symbol,
    resolve_token,
)

MAX_UINT256 = str(2**256 - 1)


def test_empty_record_uses_all_sentinels():
    """A record with no recognized field degrades to defaults instead of raising."""
    a = normalize_approval({"unrelated": 1})
    assert a == Approval(
        token="",
        spender="",
        allowance="0",
        symbol=SENTINEL,
        verified=SENTINEL,
        last_updated=SENTINEL,
        flags=SENTINEL,
        risk="Low",
    )
    assert a.to_dict() == {
        "token": "",
        "spender": "",
        "allowance": "0",
        "symbol": "—",
        "verified": "—",
        "lastUpdated": "—",
        "flags": "—",
        "risk": "Low",
    }


@pytest.mark.parametrize("raw", [None, 42, "approval", ["a", "b"]])
def test_non_mapping_record_is_treated_as_empty(raw):
    a = normalize_approval(raw)
    assert a.token == ""
    assert a.allowance == "0"
    assert a.risk == "Low"


def test_token_resolution_order():
    nested_first = {"token": {"address": "0xNested"}, "token_address": "0xSnake", "tokenAddress": "0xCamel"}
    assert resolve_token(nested_first) == "0xNested"
    assert resolve_token({"token_address": "0xSnake", "tokenAddress": "0xCamel"}) == "0xSnake"
    assert resolve_token({"tokenAddress": "0xCamel"}) == "0xCamel"
    # empty nested value falls through
    assert resolve_token({"token": {"address": ""}, "tokenAddress": "0xCamel"}) == "0xCamel"
    # nested token that is not an object is ignored
    assert resolve_token({"token": "0xStr", "token_address": "0xSnake"}) == "0xSnake"
    assert resolve_token({}) == ""


def test_spender_resolution_order():
    assert resolve_spender({"spender": {"address": "0xS1"}, "spender_address": "0xS2"}) == "0xS1"
    assert resolve_spender({"spender_address": "0xS2", "spenderAddress": "0xS3"}) == "0xS2"
    assert resolve_spender({"spenderAddress": "0xS3"}) == "0xS3"
    assert resolve_spender({"spender": None}) == ""


def test_symbol_resolution_order():
    assert resolve_symbol({"token": {"symbol": "USDT"}, "token_symbol": "X"}) == "USDT"
    assert resolve_symbol({"token_symbol": "CAKE"}) == "CAKE"
    assert resolve_symbol({"token": {"address": "0xA"}}) == SENTINEL


def test_allowance_coerced_to_text():
    assert resolve_allowance({"allowance": 0}) == "0"
    assert resolve_allowance({"allowance": "infinite"}) == "infinite"
    assert resolve_allowance({"value": 1500}) == "1500"
    assert resolve_allowance({"amount": "42"}) == "42"
    assert resolve_allowance({"allowance": 2.0}) == "2"
    assert resolve_allowance({"allowance": 2.5}) == "2.5"
    assert resolve_allowance({"allowance": True}) == "true"
    assert resolve_allowance({}) == "0"


def test_allowance_only_null_falls_through():
    """0 and "" are real values; None moves on to the next candidate."""
    assert resolve_allowance({"allowance": None, "value": "7"}) == "7"
    assert resolve_allowance({"allowance": "", "value": "7"}) == ""
    assert resolve_allowance({"allowance": 0, "value": "7"}) == "0"


def test_allowance_keeps_full_precision():
    assert resolve_allowance({"allowance": 2**256 - 1}) == MAX_UINT256


def test_last_updated_resolution_order():
    assert resolve_last_updated({"block_timestamp": "2024-01-01T00:00:00.000Z", "updated_at": "x"}) == (
        "2024-01-01T00:00:00.000Z"
    )
    assert resolve_last_updated({"updated_at": "2024-02-02"}) == "2024-02-02"
    assert resolve_last_updated({"blockTime": 1700000000}) == "1700000000"
    assert resolve_last_updated({}) == SENTINEL


@pytest.mark.parametrize("allowance", ["Infinite", "INF", "∞", "infinite", "Infinity", "unlimited-inf"])
def test_infinite_flag_case_insensitive(allowance):
    assert derive_flags(allowance) == ["infinite"]


@pytest.mark.parametrize("allowance", ["1000", "0", "", MAX_UINT256])
def test_no_flag_for_plain_amounts(allowance):
    assert derive_flags(allowance) == []


def test_infinite_approval_is_high_risk():
    a = normalize_approval({"allowance": "INF"})
    assert a.flags == ("infinite",)
    assert a.risk == "High"
    assert a.to_dict()["flags"] == ["infinite"]


def test_finite_approval_is_low_risk():
    a = normalize_approval({"allowance": "1000"})
    assert a.flags == SENTINEL
    assert a.risk == "Low"


def test_verified_is_always_sentinel():
    a = normalize_approval({"verified": True, "token": {"verified_contract": True}})
    assert a.verified == SENTINEL


def test_normalize_preserves_order_and_length():
    raw = [{"token_address": f"0x{i}"} for i in range(5)]
    out = normalize_approvals(raw)
    assert [a.token for a in out] == ["0x0", "0x1", "0x2", "0x3", "0x4"]


def test_normalize_empty_list():
    assert normalize_approvals([]) == []


def test_moralis_shaped_record():
    raw = {
        "block_number": "12345",
        "block_timestamp": "2024-05-01T10:00:00.000Z",
        "value": MAX_UINT256,
        "value_formatted": "1.157920892373162e+59",
        "token": {"address": "0xdac17f958d2ee523a2206206994597c13d831ec7", "symbol": "USDT"},
        "spender": {"address": "0x1111111254eeb25477b68fb85ed929f73a960582"},
    }
    a = normalize_approval(raw)
    assert a.token == "0xdac17f958d2ee523a2206206994597c13d831ec7"
    assert a.spender == "0x1111111254eeb25477b68fb85ed929f73a960582"
    assert a.symbol == "USDT"
    assert a.allowance == MAX_UINT256
    assert a.last_updated == "2024-05-01T10:00:00.000Z"
    # huge literal integers are not detected as unlimited
    assert a.risk == "Low"
