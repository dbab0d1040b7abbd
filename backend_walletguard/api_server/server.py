"""
FastAPI server — wallet approval scan API.

Exposes GET /api/getApprovals?net=&address= returning the approval report
(score, riskLevel, tips, approvals). Data comes from Moralis on every call;
nothing is stored. Config via env (MORALIS_API_KEY, MORALIS_BASE_URL).
"""

from __future__ import annotations

from typing import Any, AsyncIterator

import httpx
from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from backend_walletguard import __version__
from backend_walletguard.analytics.analytics_pipeline import scan_wallet_approvals
from backend_walletguard.config.settings import Settings, get_settings
from backend_walletguard.core.exceptions import WalletGuardError
from backend_walletguard.walletguard_logging import get_logger, short_address

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Dependencies
# -----------------------------------------------------------------------------


async def get_upstream_client(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[httpx.AsyncClient]:
    """Dependency: one httpx client per request, closed after the response."""
    async with httpx.AsyncClient(timeout=settings.request_timeout_sec) as client:
        yield client


# -----------------------------------------------------------------------------
# Response models
# -----------------------------------------------------------------------------


class ApprovalResponse(BaseModel):
    """One normalized approval."""

    model_config = ConfigDict(populate_by_name=True)

    token: str = Field(..., description="Token contract address, or empty if unknown")
    spender: str = Field(..., description="Spender contract address, or empty if unknown")
    allowance: str = Field(..., description="Allowance as text (may be a keyword such as 'infinite')")
    symbol: str = Field(..., description="Token ticker or '—'")
    verified: str = Field(..., description="Reserved; always '—'")
    last_updated: str = Field(..., alias="lastUpdated", description="Upstream timestamp or '—'")
    flags: list[str] | str = Field(..., description="Warning tags, or '—' when none")
    risk: str = Field(..., description="Low | High")


class ReportResponse(BaseModel):
    """GET /api/getApprovals response."""

    model_config = ConfigDict(populate_by_name=True)

    score: int = Field(..., ge=0, le=100, description="Approval hygiene score (0–100)")
    risk_level: str = Field(..., alias="riskLevel", description="Low | Medium | High")
    tips: list[str] = Field(default_factory=list, description="Remediation tips")
    approvals: list[ApprovalResponse] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    error: str
    status: int | None = None
    body: str | None = None
    message: str | None = None


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------

app = FastAPI(
    title="Backend WalletGuard API",
    description="Token approval risk report for EVM wallets (data from Moralis).",
    version=__version__,
)

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
    502: {"model": ErrorResponse},
}


@app.get(
    "/api/getApprovals",
    response_model=ReportResponse,
    response_model_by_alias=True,
    responses=_ERROR_RESPONSES,
)
async def get_approvals(
    net: str = Query("bsc", description="eth | bsc | polygon (unknown values use bsc)"),
    address: str = Query("", description="Wallet address (0x + 40 hex)"),
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_upstream_client),
) -> Any:
    """
    Return the approval report for a wallet.

    400 on invalid address, 500 when the server has no API key, 502 when
    Moralis fails or cannot be reached.
    """
    try:
        report = await scan_wallet_approvals(address, net, settings, client=client)
    except WalletGuardError:
        raise
    except Exception as e:
        logger.exception("get_approvals_failed", wallet=short_address(address), error=str(e))
        return JSONResponse(
            status_code=500,
            content={"error": "Server error", "message": str(e)},
        )
    return ReportResponse.model_validate(report.to_dict())


@app.get("/health")
def health() -> dict[str, str]:
    """Liveness probe: API is up."""
    return {"status": "ok"}


@app.exception_handler(WalletGuardError)
def walletguard_error_handler(request: Request, exc: WalletGuardError) -> JSONResponse:
    """Consistent JSON error response for service errors."""
    logger.warning(
        "request_failed",
        path=request.url.path,
        status=exc.status_code,
        error=exc.error,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_body(),
    )
