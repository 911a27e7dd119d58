"""
Data models for LayerZero Scan message records.

Responsibilities:
- Probe loosely-typed RawMessage dicts through ordered field chains
  (LayerZero Scan has shipped several response shapes).
- Define the normalized PendingMessageSummary emitted by the service.
- Define UpstreamResult, the value-or-unavailable wrapper returned by the scan client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

T = TypeVar("T")

# A raw explorer record; shape varies across API versions
RawMessage = Mapping[str, Any]

# Ordered lookup chains: each entry is a key path, first present value wins
EXEC_STATUS_PATHS: tuple[tuple[str, ...], ...] = (
    ("executorResult", "status"),
    ("executorStatus",),
)
TX_HASH_PATHS: tuple[tuple[str, ...], ...] = (
    ("srcTxHash",),
    ("txHash",),
    ("tx", "txHash"),
)
SENDER_PATHS: tuple[tuple[str, ...], ...] = (
    ("sender32",),
    ("sender",),
)
PAYLOAD_PATHS: tuple[tuple[str, ...], ...] = (
    ("payload",),
    ("payloadHex",),
    ("data",),
)
DST_EID_PATHS: tuple[tuple[str, ...], ...] = (
    ("dstEid",),
    ("dst_eid",),
    ("dst",),
)

WAITING_STATUS = "WAITING"


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def probe_path(record: Any, path: tuple[str, ...]) -> Any:
    """Follow one key path through nested mappings; None if any step is missing or not a mapping."""
    current = record
    for key in path:
        if not isinstance(current, Mapping):
            return None
        current = current.get(key)
    return current if _is_present(current) else None


def probe_first(record: Any, paths: tuple[tuple[str, ...], ...]) -> Any:
    """Return the first present value along the given paths, or None."""
    for path in paths:
        value = probe_path(record, path)
        if value is not None:
            return value
    return None


def resolve_exec_status(record: RawMessage) -> str | None:
    """Executor status, uppercased. None when the record carries no status."""
    raw = probe_first(record, EXEC_STATUS_PATHS)
    if raw is None:
        return None
    return str(raw).upper() or None


def resolve_tx_hash(record: RawMessage) -> str | None:
    raw = probe_first(record, TX_HASH_PATHS)
    if raw is None:
        return None
    return str(raw).strip() or None


def resolve_sender(record: RawMessage) -> str | None:
    raw = probe_first(record, SENDER_PATHS)
    return str(raw) if raw is not None else None


def resolve_payload(record: RawMessage) -> str | None:
    raw = probe_first(record, PAYLOAD_PATHS)
    return str(raw) if raw is not None else None


def resolve_dst_eid(record: RawMessage) -> Any:
    """Destination endpoint id passed through as the API gave it (int, str, or an object on some shapes)."""
    return probe_first(record, DST_EID_PATHS)


@dataclass(frozen=True)
class PendingMessageSummary:
    """
    One message still awaiting executor delivery.

    Only built for records whose status resolves to WAITING and whose source
    transaction hash resolves to a non-empty value.
    """

    src_tx_hash: str
    dst_eid: Any
    sender32: str | None
    payload: str | None
    status_summary: str
    lz_tx_page: str

    def to_dict(self) -> dict[str, Any]:
        """Wire shape returned by GET /pending (camelCase keys)."""
        return {
            "srcTxHash": self.src_tx_hash,
            "dstEid": self.dst_eid,
            "sender32": self.sender32,
            "payload": self.payload,
            "statusSummary": self.status_summary,
            "lzTxPage": self.lz_tx_page,
        }


@dataclass(frozen=True)
class UpstreamResult(Generic[T]):
    """
    Outcome of one outbound call to LayerZero Scan.

    ok=False marks the upstream as unavailable for this request; value then
    holds the degraded fallback (empty list or None) and error the reason.
    """

    value: T
    ok: bool = True
    error: str | None = None

    @classmethod
    def available(cls, value: T) -> "UpstreamResult[T]":
        return cls(value=value)

    @classmethod
    def unavailable(cls, fallback: T, error: str) -> "UpstreamResult[T]":
        return cls(value=fallback, ok=False, error=error)
