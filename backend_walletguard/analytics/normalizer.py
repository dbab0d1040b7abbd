"""
Approval normalizer — raw Moralis approval records to Approval models.

The provider is not consistent about field names: the same value may sit in a
nested object (token.address), snake_case (token_address) or camelCase
(tokenAddress). Each logical field has its own resolver that walks an ordered
list of candidates and falls back to a sentinel, so normalization is total:
missing or malformed fields never raise.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from backend_walletguard.analytics.models import (
    FLAG_INFINITE,
    RISK_HIGH,
    RISK_LOW,
    SENTINEL,
    Approval,
)

INFINITE_MARKERS = ("infinite", "∞")
INFINITE_SUBSTRING = "inf"


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _nested(record: Mapping[str, Any], outer: str, inner: str) -> Any:
    return _as_mapping(record.get(outer)).get(inner)


def _first_truthy(*candidates: Any) -> Any:
    """First truthy candidate. Empty containers count as missing, same as "" and 0."""
    for c in candidates:
        if c:
            return c
    return None


def _to_text(value: Any) -> str:
    """Render a scalar as text: integral floats drop '.0', booleans are lower-case."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve_token(record: Mapping[str, Any]) -> str:
    """token.address -> token_address -> tokenAddress -> ""."""
    value = _first_truthy(
        _nested(record, "token", "address"),
        record.get("token_address"),
        record.get("tokenAddress"),
    )
    return _to_text(value) if value else ""


def resolve_spender(record: Mapping[str, Any]) -> str:
    """spender.address -> spender_address -> spenderAddress -> ""."""
    value = _first_truthy(
        _nested(record, "spender", "address"),
        record.get("spender_address"),
        record.get("spenderAddress"),
    )
    return _to_text(value) if value else ""


def resolve_symbol(record: Mapping[str, Any]) -> str:
    """token.symbol -> token_symbol -> sentinel."""
    value = _first_truthy(
        _nested(record, "token", "symbol"),
        record.get("token_symbol"),
    )
    return _to_text(value) if value else SENTINEL


def resolve_allowance(record: Mapping[str, Any]) -> str:
    """
    allowance -> value -> amount -> 0, always as text.

    Only null/missing falls through; 0 and "" are real values. Amounts stay
    text so uint256-sized integers and sentinel words survive unchanged.
    """
    for key in ("allowance", "value", "amount"):
        value = record.get(key)
        if value is not None:
            return _to_text(value)
    return "0"


def resolve_last_updated(record: Mapping[str, Any]) -> str:
    """block_timestamp -> updated_at -> blockTime -> sentinel."""
    value = _first_truthy(
        record.get("block_timestamp"),
        record.get("updated_at"),
        record.get("blockTime"),
    )
    return _to_text(value) if value else SENTINEL


def derive_flags(allowance: str) -> list[str]:
    """
    Heuristic warning tags for an allowance.

    Only textual "unlimited" markers are recognized; a uint256-max literal is
    not treated as infinite.
    """
    flags: list[str] = []
    alw = allowance.lower()
    if alw in INFINITE_MARKERS or INFINITE_SUBSTRING in alw:
        flags.append(FLAG_INFINITE)
    return flags


def classify_approval(flags: Iterable[str]) -> str:
    """High when the approval is unlimited, else Low."""
    return RISK_HIGH if FLAG_INFINITE in flags else RISK_LOW


def normalize_approval(raw: Any) -> Approval:
    """Normalize one raw record. Non-mapping input yields an all-default Approval."""
    record = _as_mapping(raw)
    allowance = resolve_allowance(record)
    flags = derive_flags(allowance)
    return Approval(
        token=resolve_token(record),
        spender=resolve_spender(record),
        allowance=allowance,
        symbol=resolve_symbol(record),
        verified=SENTINEL,
        last_updated=resolve_last_updated(record),
        flags=tuple(flags) if flags else SENTINEL,
        risk=classify_approval(flags),
    )


def normalize_approvals(raw_items: Iterable[Any]) -> list[Approval]:
    """Normalize every record, preserving input order and length."""
    return [normalize_approval(item) for item in raw_items]
