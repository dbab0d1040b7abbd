"""
Tests for the scan_wallet CLI tool. The pipeline is mocked; no network.
"""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

from backend_walletguard.analytics.analytics_pipeline import build_report
from backend_walletguard.core.exceptions import UpstreamStatusError
from backend_walletguard.tools import scan_wallet

from conftest import VALID_WALLET


def test_cli_prints_report(settings, capsys):
    report = build_report([{"token": {"address": "0xA", "symbol": "FOO"}, "allowance": "∞"}])
    scan = AsyncMock(return_value=report)
    with patch.object(scan_wallet, "get_settings", return_value=settings), patch.object(
        scan_wallet, "scan_wallet_approvals", new=scan
    ):
        code = scan_wallet.main([VALID_WALLET, "--net", "eth"])
    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["score"] == 85
    assert out["approvals"][0]["allowance"] == "∞"
    args = scan.call_args.args
    assert args[0] == VALID_WALLET
    assert args[1] == "eth"


def test_cli_base_url_override(settings):
    scan = AsyncMock(return_value=build_report([]))
    with patch.object(scan_wallet, "get_settings", return_value=settings), patch.object(
        scan_wallet, "scan_wallet_approvals", new=scan
    ):
        scan_wallet.main([VALID_WALLET, "--base-url", "https://proxy.example/api/"])
    assert scan.call_args.args[2].moralis_base_url == "https://proxy.example/api"


def test_cli_invalid_address_exit_code(settings, capsys):
    with patch.object(scan_wallet, "get_settings", return_value=settings):
        code = scan_wallet.main(["0xnothex"])
    assert code == 2
    assert "Invalid address" in capsys.readouterr().err


def test_cli_upstream_failure_exit_code(settings, capsys):
    scan = AsyncMock(side_effect=UpstreamStatusError(503, "maintenance"))
    with patch.object(scan_wallet, "get_settings", return_value=settings), patch.object(
        scan_wallet, "scan_wallet_approvals", new=scan
    ):
        code = scan_wallet.main([VALID_WALLET])
    assert code == 1
    assert "maintenance" in capsys.readouterr().err
