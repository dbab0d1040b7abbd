"""
Analytics pipeline: raw approvals -> normalize -> score -> Report.

Single entrypoint for the API and the CLI. build_report is pure;
scan_wallet_approvals adds validation and the upstream fetch in front of it.
"""

from __future__ import annotations

from typing import Any, Iterable

import httpx

from backend_walletguard.analytics.models import Report
from backend_walletguard.analytics.normalizer import normalize_approvals
from backend_walletguard.analytics.risk_engine import calculate_risk
from backend_walletguard.config.settings import Settings
from backend_walletguard.core.exceptions import InvalidAddressError, MissingCredentialError
from backend_walletguard.ingestion.moralis_client import fetch_approvals, resolve_chain
from backend_walletguard.utils.wallet_utils import is_valid_wallet
from backend_walletguard.walletguard_logging import get_logger, short_address

logger = get_logger(__name__)


def build_report(raw_items: Iterable[Any]) -> Report:
    """Normalize raw records and score them. Never raises for a list input."""
    approvals = normalize_approvals(raw_items)
    return calculate_risk(approvals)


async def scan_wallet_approvals(
    address: str,
    net: str | None,
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> Report:
    """
    Run a full scan for one wallet: validate -> fetch -> normalize -> score.

    Address validation runs before the credential check so a bad request is
    reported as such even on a misconfigured server.
    """
    if not is_valid_wallet(address):
        raise InvalidAddressError(address or "")
    if not settings.has_api_key:
        raise MissingCredentialError()

    chain = resolve_chain(net)
    logger.info("approval_scan_start", wallet=short_address(address), chain=chain)

    raw_items = await fetch_approvals(address, chain, settings, client=client)
    report = build_report(raw_items)

    logger.info(
        "approval_scan_done",
        wallet=short_address(address),
        chain=chain,
        approvals=len(report.approvals),
        score=report.score,
        risk_level=report.risk_level,
    )
    return report
