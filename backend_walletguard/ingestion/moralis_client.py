"""
Moralis Deep Index client: GET /wallets/{address}/approvals?chain=...

One awaited request per scan. The response body may be a bare list, an object
with the list under "result", or something else entirely (treated as no
approvals).
"""

from __future__ import annotations

from typing import Any

import httpx

from backend_walletguard.config.settings import Settings
from backend_walletguard.core.exceptions import UpstreamStatusError, UpstreamUnavailableError
from backend_walletguard.walletguard_logging import get_logger, short_address

logger = get_logger(__name__)

# Moralis chain ids accepted by the API; anything else falls back to bsc
SUPPORTED_CHAINS = ("eth", "bsc", "polygon")
DEFAULT_CHAIN = "bsc"
ERROR_BODY_MAX_CHARS = 300


def resolve_chain(net: str | None) -> str:
    """Map a network selector to a Moralis chain id (unknown -> bsc)."""
    if net in ("eth", "polygon"):
        return net
    return DEFAULT_CHAIN


def extract_items(payload: Any) -> list[Any]:
    """Pull the raw approval list out of any of the known payload shapes."""
    if isinstance(payload, dict) and isinstance(payload.get("result"), list):
        return payload["result"]
    if isinstance(payload, list):
        return payload
    return []


def approvals_url(base_url: str, address: str) -> str:
    return f"{base_url.rstrip('/')}/wallets/{address}/approvals"


async def fetch_approvals(
    address: str,
    chain: str,
    settings: Settings,
    client: httpx.AsyncClient | None = None,
) -> list[Any]:
    """
    Fetch raw approval records for a wallet.

    A caller-provided client is used as-is and left open; otherwise a client
    is created for this call. Raises UpstreamStatusError on non-2xx or an
    unreadable body, UpstreamUnavailableError on transport failure.
    """
    url = approvals_url(settings.moralis_base_url, address)
    headers = {
        "accept": "application/json",
        "X-API-Key": settings.moralis_api_key,
    }
    params = {"chain": chain}
    logger.info("moralis_request", wallet=short_address(address), chain=chain)

    try:
        if client is None:
            async with httpx.AsyncClient(timeout=settings.request_timeout_sec) as own_client:
                r = await own_client.get(url, headers=headers, params=params)
        else:
            r = await client.get(url, headers=headers, params=params, timeout=settings.request_timeout_sec)
    except httpx.RequestError as e:
        logger.warning("moralis_unreachable", wallet=short_address(address), chain=chain, error=str(e))
        raise UpstreamUnavailableError(str(e) or type(e).__name__) from e

    if not r.is_success:
        body = r.text[:ERROR_BODY_MAX_CHARS]
        logger.warning("moralis_failed", wallet=short_address(address), chain=chain, status=r.status_code)
        raise UpstreamStatusError(r.status_code, body)

    try:
        payload = r.json()
    except ValueError as e:
        logger.warning("moralis_bad_json", wallet=short_address(address), chain=chain, status=r.status_code)
        raise UpstreamStatusError(r.status_code, r.text[:ERROR_BODY_MAX_CHARS]) from e

    items = extract_items(payload)
    logger.info("moralis_response", wallet=short_address(address), chain=chain, items=len(items))
    return items
