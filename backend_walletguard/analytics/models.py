"""
Data models for the approval report.

Approval is the one stable per-approval shape handed to clients; Report is
the aggregate returned by the API. Both are immutable and serialize with the
camelCase keys the frontend expects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

SENTINEL = "—"

RISK_LOW = "Low"
RISK_MEDIUM = "Medium"
RISK_HIGH = "High"

FLAG_INFINITE = "infinite"


@dataclass(frozen=True)
class Approval:
    """
    Normalized token approval.

    flags is a tuple of warning tags, or the sentinel string when there are none.
    """

    token: str = ""
    spender: str = ""
    allowance: str = "0"
    symbol: str = SENTINEL
    verified: str = SENTINEL
    last_updated: str = SENTINEL
    flags: tuple[str, ...] | str = SENTINEL
    risk: str = RISK_LOW

    def to_dict(self) -> dict[str, Any]:
        return {
            "token": self.token,
            "spender": self.spender,
            "allowance": self.allowance,
            "symbol": self.symbol,
            "verified": self.verified,
            "lastUpdated": self.last_updated,
            "flags": list(self.flags) if isinstance(self.flags, tuple) else self.flags,
            "risk": self.risk,
        }


@dataclass(frozen=True)
class Report:
    """Aggregate approval report: score 0-100, tiered risk level, tips, approvals."""

    score: int
    risk_level: str
    tips: tuple[str, ...]
    approvals: tuple[Approval, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "riskLevel": self.risk_level,
            "tips": list(self.tips),
            "approvals": [a.to_dict() for a in self.approvals],
        }
