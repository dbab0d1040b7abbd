"""
Application-level exceptions.

Each error carries the HTTP status the API layer answers with, so the
server and the CLI map failures the same way.
"""

from __future__ import annotations


class WalletGuardError(Exception):
    """Base class for all service errors."""

    status_code = 500
    error = "Server error"

    def to_body(self) -> dict:
        return {"error": self.error}


class InvalidAddressError(WalletGuardError):
    """Wallet address is empty or not 0x + 40 hex digits."""

    status_code = 400
    error = "Invalid address"

    def __init__(self, address: str = "") -> None:
        super().__init__(f"Invalid address: {address!r}")
        self.address = address


class MissingCredentialError(WalletGuardError):
    """MORALIS_API_KEY is not configured."""

    status_code = 500
    error = "Server missing MORALIS_API_KEY"

    def __init__(self) -> None:
        super().__init__(self.error)


class UpstreamError(WalletGuardError):
    """The approvals provider could not be used."""

    status_code = 502
    error = "Moralis failed"


class UpstreamStatusError(UpstreamError):
    """Provider answered with a non-success status or an unreadable body."""

    def __init__(self, status: int, body: str = "") -> None:
        super().__init__(f"Moralis returned HTTP {status}")
        self.status = status
        self.body = body

    def to_body(self) -> dict:
        return {"error": self.error, "status": self.status, "body": self.body}


class UpstreamUnavailableError(UpstreamError):
    """Provider could not be reached (DNS, connect, timeout)."""

    error = "Moralis unreachable"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict:
        return {"error": self.error, "message": self.message}
