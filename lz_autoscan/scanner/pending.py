"""
Pending-message service — fetch, filter, enrich.

One call per GET /pending: list the owner's messages (page 1, limit 50),
keep those whose executor status is WAITING, fill sender32/payload from the
record or, failing that, from the tx page via hex heuristics. Tx pages are
fetched sequentially in message order.
"""

from __future__ import annotations

import httpx

from lz_autoscan.scan_logging import bind_owner
from lz_autoscan.scanner.client import DEFAULT_LIMIT, DEFAULT_PAGE, LayerZeroScanClient
from lz_autoscan.scanner.heuristics import extract_hex_candidates
from lz_autoscan.scanner.models import (
    WAITING_STATUS,
    PendingMessageSummary,
    RawMessage,
    resolve_dst_eid,
    resolve_exec_status,
    resolve_payload,
    resolve_sender,
    resolve_tx_hash,
)


class PendingMessageService:
    """Pending messages for one owner address, built from LayerZero Scan on each call."""

    def __init__(
        self,
        owner: str,
        scan_client: LayerZeroScanClient,
        *,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> None:
        owner = (owner or "").strip().lower()
        if not owner:
            raise ValueError("owner must be non-empty")
        self._owner = owner
        self._scan = scan_client
        self._page = page
        self._limit = limit
        self._log = bind_owner(owner, __name__)

    @property
    def owner(self) -> str:
        return self._owner

    async def get_pending_messages(self) -> list[PendingMessageSummary]:
        """Summaries for WAITING messages, in the order the API listed them."""
        async with self._scan.open() as http:
            listing = await self._scan.fetch_messages(
                http, self._owner, page=self._page, limit=self._limit
            )
            if not listing.ok:
                self._log.warning("pending_listing_unavailable", error=listing.error)

            out: list[PendingMessageSummary] = []
            for record in listing.value:
                summary = await self._summarize(http, record)
                if summary is not None:
                    out.append(summary)

        self._log.info(
            "pending_messages_resolved",
            scanned=len(listing.value),
            pending=len(out),
        )
        return out

    async def _summarize(
        self, http: httpx.AsyncClient, record: RawMessage
    ) -> PendingMessageSummary | None:
        """Summary for one record, or None when it is not pending or has no tx hash."""
        if not isinstance(record, dict):
            return None
        status = resolve_exec_status(record)
        if status != WAITING_STATUS:
            return None
        tx_hash = resolve_tx_hash(record)
        if tx_hash is None:
            self._log.debug("pending_message_without_hash")
            return None

        sender32 = resolve_sender(record)
        payload = resolve_payload(record)

        if sender32 is None or payload is None:
            doc = await self._scan.fetch_tx_document(http, tx_hash)
            if doc.ok and doc.value:
                guessed = extract_hex_candidates(doc.value)
                # Fill gaps only; API fields always win
                if sender32 is None:
                    sender32 = guessed.sender32
                if payload is None:
                    payload = guessed.payload
                self._log.debug(
                    "pending_message_enriched_from_page",
                    tx_hash=tx_hash,
                    sender_found=sender32 is not None,
                    payload_found=payload is not None,
                )

        return PendingMessageSummary(
            src_tx_hash=tx_hash,
            dst_eid=resolve_dst_eid(record),
            sender32=sender32,
            payload=payload,
            status_summary=status,
            lz_tx_page=self._scan.tx_page_url(tx_hash),
        )
