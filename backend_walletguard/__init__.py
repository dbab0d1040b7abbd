"""
Backend WalletGuard — token approval risk scanner for EVM wallets.

Fetches a wallet's outstanding ERC-20 approvals from the Moralis indexer,
normalizes them into a fixed schema and scores how exposed the wallet is.
Modular layout: ingestion (upstream client), analytics (normalizer + scorer),
API server, and CLI tools.
"""

__version__ = "0.1.0"
