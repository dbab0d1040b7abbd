"""
Application settings.

Settings are resolved from env.py once per call and handed to the pipeline
explicitly, so normalization and scoring never touch process state.
"""

from __future__ import annotations

from dataclasses import dataclass

from backend_walletguard.config.env import (
    DEFAULT_MORALIS_BASE_URL,
    DEFAULT_TIMEOUT_SEC,
    get_moralis_api_key,
    get_moralis_base_url,
    get_request_timeout_sec,
)


@dataclass(frozen=True)
class Settings:
    """Upstream credential and endpoint configuration."""

    moralis_api_key: str = ""
    moralis_base_url: str = DEFAULT_MORALIS_BASE_URL
    request_timeout_sec: float = DEFAULT_TIMEOUT_SEC

    @property
    def has_api_key(self) -> bool:
        return bool(self.moralis_api_key)


def get_settings() -> Settings:
    """Return the current application settings built from the environment."""
    return Settings(
        moralis_api_key=get_moralis_api_key(),
        moralis_base_url=get_moralis_base_url(),
        request_timeout_sec=get_request_timeout_sec(),
    )
