"""
Scan one wallet's token approvals from the command line and print the report.

Usage:
    python -m backend_walletguard.tools.scan_wallet 0xYourWallet --net eth

Requires .env with MORALIS_API_KEY.
Exit codes: 0 ok, 1 upstream failure, 2 invalid input or missing API key.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import replace

from backend_walletguard.analytics.analytics_pipeline import scan_wallet_approvals
from backend_walletguard.config.settings import get_settings
from backend_walletguard.core.exceptions import (
    InvalidAddressError,
    MissingCredentialError,
    UpstreamError,
)
from backend_walletguard.ingestion.moralis_client import SUPPORTED_CHAINS


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Scan a wallet's token approvals via Moralis")
    parser.add_argument("address", help="Wallet address (0x + 40 hex)")
    parser.add_argument(
        "--net",
        default="bsc",
        help=f"Network: {' | '.join(SUPPORTED_CHAINS)} (default: bsc; unknown values use bsc)",
    )
    parser.add_argument("--base-url", default=None, help="Override MORALIS_BASE_URL")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    if args.base_url:
        settings = replace(settings, moralis_base_url=args.base_url.rstrip("/"))

    try:
        report = asyncio.run(scan_wallet_approvals(args.address, args.net, settings))
    except (InvalidAddressError, MissingCredentialError) as e:
        print(f"[scan_wallet] {e}", file=sys.stderr)
        return 2
    except UpstreamError as e:
        print(f"[scan_wallet] {e}: {json.dumps(e.to_body(), ensure_ascii=False)}", file=sys.stderr)
        return 1

    print(json.dumps(report.to_dict(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
