"""
Ingestion package — upstream approvals provider client.

Fetches raw approval records from Moralis; shape handling is left to the
analytics normalizer.
"""

from backend_walletguard.ingestion.moralis_client import (
    SUPPORTED_CHAINS,
    extract_items,
    fetch_approvals,
    resolve_chain,
)

__all__ = ["SUPPORTED_CHAINS", "extract_items", "fetch_approvals", "resolve_chain"]
