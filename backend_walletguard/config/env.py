"""
Environment variable loading for WalletGuard.

- MORALIS_API_KEY: Moralis Deep Index API key (required for scans)
- MORALIS_BASE_URL: API root (default: Moralis v2.2)
- MORALIS_TIMEOUT_SEC: upstream request timeout in seconds (default: 20)
- API_HOST / API_PORT: bind address for main.py
- LOG_LEVEL / LOG_FORMAT: structlog level and renderer (json | console)
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is backend_walletguard/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_BACKEND_DIR = _CONFIG_DIR.parent
_ROOT = _BACKEND_DIR.parent
_ENV_PATH = _ROOT / ".env"

DEFAULT_MORALIS_BASE_URL = "https://deep-index.moralis.io/api/v2.2"
DEFAULT_TIMEOUT_SEC = 20.0
DEFAULT_API_HOST = "0.0.0.0"
DEFAULT_API_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"


def load_walletguard_env() -> None:
    """Load .env from project root. Safe to call multiple times."""
    load_dotenv(_ENV_PATH)


def get_moralis_api_key() -> str:
    """Return MORALIS_API_KEY from env, or "" when unset."""
    load_walletguard_env()
    return (os.getenv("MORALIS_API_KEY") or "").strip()


def get_moralis_base_url() -> str:
    """Return MORALIS_BASE_URL without trailing slash."""
    load_walletguard_env()
    url = (os.getenv("MORALIS_BASE_URL") or "").strip() or DEFAULT_MORALIS_BASE_URL
    return url.rstrip("/")


def get_request_timeout_sec() -> float:
    """Return MORALIS_TIMEOUT_SEC as float; falls back to the default when unparsable."""
    load_walletguard_env()
    raw = (os.getenv("MORALIS_TIMEOUT_SEC") or "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_SEC
    try:
        value = float(raw)
    except ValueError:
        return DEFAULT_TIMEOUT_SEC
    return value if value > 0 else DEFAULT_TIMEOUT_SEC


def get_api_host() -> str:
    load_walletguard_env()
    return (os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST


def get_api_port() -> int:
    load_walletguard_env()
    raw = (os.getenv("API_PORT") or "").strip()
    try:
        return int(raw) if raw else DEFAULT_API_PORT
    except ValueError:
        return DEFAULT_API_PORT


def get_log_level() -> str:
    """Return LOG_LEVEL upper-cased (default INFO)."""
    load_walletguard_env()
    return (os.getenv("LOG_LEVEL") or "").strip().upper() or DEFAULT_LOG_LEVEL


def get_log_format() -> str:
    """Return LOG_FORMAT: "json" (default) or anything else for console output."""
    load_walletguard_env()
    return (os.getenv("LOG_FORMAT") or "").strip().lower() or DEFAULT_LOG_FORMAT
