"""
Configuration management for Backend WalletGuard.

Loads settings from environment variables and an optional .env file.
Exposes a single source of truth for the upstream credential and endpoint.
"""

from backend_walletguard.config.settings import Settings, get_settings  # noqa: F401

__all__ = ["Settings", "get_settings"]
