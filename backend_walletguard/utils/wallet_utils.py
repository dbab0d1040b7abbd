"""Wallet validation utilities."""

import re

EVM_ADDRESS_RE = re.compile(r"0x[a-fA-F0-9]{40}")


def is_valid_wallet(w: str | None) -> bool:
    """Return True if w is exactly a 0x-prefixed, 40-hex-digit EVM address (no surrounding whitespace)."""
    if not w or not isinstance(w, str):
        return False
    return EVM_ADDRESS_RE.fullmatch(w) is not None
