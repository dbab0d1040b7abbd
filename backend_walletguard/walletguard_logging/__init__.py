"""
Structured logging for Backend WalletGuard.

JSON logs with timestamp, event_type and keyword fields.
Use get_logger() in all modules for aggregation-friendly output.
"""

from backend_walletguard.walletguard_logging.logger import get_logger, short_address

__all__ = ["get_logger", "short_address"]
