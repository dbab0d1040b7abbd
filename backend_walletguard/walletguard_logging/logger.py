"""
Structured JSON logging: timestamp, event_type, wallet and request fields.

Level and output format come from config.env (LOG_LEVEL, LOG_FORMAT), so a
project .env applies to logging like it does to the Moralis settings.
configure_structlog() runs once on first import; call it again to pick up
changed settings.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

from backend_walletguard.config.env import get_log_format, get_log_level

SHORT_ADDRESS_LEN = 10


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog's positional 'event' becomes event_type; message mirrors it unless given."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def _renderer(log_format: str) -> Any:
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_structlog() -> None:
    """(Re)configure structlog from the current LOG_LEVEL / LOG_FORMAT settings."""
    level = getattr(logging, get_log_level(), logging.INFO)
    log_format = get_log_format()
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
    ]
    # console renderer reads the native "event" key
    if log_format == "json":
        processors.append(_normalize_event)
    processors.append(_renderer(log_format))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("approvals_scored", wallet=short_address(addr), score=85)
    """
    return structlog.get_logger(name).bind(logger=name)


def short_address(address: str | None) -> str:
    """Shorten a wallet/contract address for log lines."""
    address = (address or "").strip()
    if len(address) > SHORT_ADDRESS_LEN:
        return address[:SHORT_ADDRESS_LEN] + "..."
    return address
