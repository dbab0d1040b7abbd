"""
WalletGuard analytics engine.

Turns raw provider approval records into a scored report.
Modules: models, normalizer, risk_engine, analytics_pipeline.
"""

from backend_walletguard.analytics.models import Approval, Report
from backend_walletguard.analytics.normalizer import normalize_approvals
from backend_walletguard.analytics.risk_engine import calculate_risk
from backend_walletguard.analytics.analytics_pipeline import build_report, scan_wallet_approvals

__all__ = [
    "Approval",
    "Report",
    "normalize_approvals",
    "calculate_risk",
    "build_report",
    "scan_wallet_approvals",
]
