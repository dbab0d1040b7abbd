"""
Risk engine: score a wallet from its normalized approvals.

Each High-risk approval costs 15 points off a base of 100 (floor 0).
Risk level: score >= 80 -> Low, >= 50 -> Medium, else High.
"""

from __future__ import annotations

from typing import Sequence

from backend_walletguard.analytics.models import (
    RISK_HIGH,
    RISK_LOW,
    RISK_MEDIUM,
    Approval,
    Report,
)
from backend_walletguard.walletguard_logging import get_logger

logger = get_logger(__name__)

BASE_SCORE = 100
HIGH_RISK_PENALTY = 15
LOW_RISK_MIN_SCORE = 80
MEDIUM_RISK_MIN_SCORE = 50

TIP_REVOKE_HIGH = "Revoke high-risk approvals first ({count})."
TIP_ALL_CLEAR = "No major red flags detected. Keep monitoring regularly."


def count_high_risk(approvals: Sequence[Approval]) -> int:
    """Approvals whose risk text contains "high", case-insensitive."""
    return sum(1 for a in approvals if RISK_HIGH.lower() in str(a.risk).lower())


def score_from_high_count(high_count: int) -> int:
    return max(0, BASE_SCORE - high_count * HIGH_RISK_PENALTY)


def score_to_risk_level(score: int) -> str:
    if score >= LOW_RISK_MIN_SCORE:
        return RISK_LOW
    if score >= MEDIUM_RISK_MIN_SCORE:
        return RISK_MEDIUM
    return RISK_HIGH


def build_tips(high_count: int) -> list[str]:
    """Remediation tips; always exactly one entry for now."""
    if high_count > 0:
        return [TIP_REVOKE_HIGH.format(count=high_count)]
    return [TIP_ALL_CLEAR]


def calculate_risk(approvals: Sequence[Approval]) -> Report:
    """Compute score, risk level and tips; approvals are carried through in order."""
    high_count = count_high_risk(approvals)
    score = score_from_high_count(high_count)
    risk_level = score_to_risk_level(score)
    logger.debug(
        "risk_engine_result",
        approvals=len(approvals),
        high_count=high_count,
        score=score,
        risk_level=risk_level,
    )
    return Report(
        score=score,
        risk_level=risk_level,
        tips=tuple(build_tips(high_count)),
        approvals=tuple(approvals),
    )
