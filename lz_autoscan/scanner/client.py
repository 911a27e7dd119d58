"""
LayerZero Scan HTTP client — message listing and transaction pages.

Both calls degrade instead of raising: a non-2xx status or any transport
failure (timeout, DNS, connect) is logged as a warning and returned as an
unavailable UpstreamResult, so one flaky upstream never fails /pending.
No retries; the next request tries again from scratch.
"""

from __future__ import annotations

from typing import Any

import httpx

from lz_autoscan.scan_logging import get_logger
from lz_autoscan.scanner.models import RawMessage, UpstreamResult

logger = get_logger(__name__)

USER_AGENT = "auto-scan-worker/1.0"
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 50


class LayerZeroScanClient:
    """
    Read-only client for the LayerZero Scan explorer.

    Holds endpoints and transport settings only; callers open one
    httpx.AsyncClient per request via open() and pass it to each fetch.
    """

    def __init__(
        self,
        api_base: str,
        tx_base: str,
        *,
        request_timeout_sec: float = 5.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            api_base: LayerZero Scan API base (e.g. https://api.testnet.layerzeroscan.com).
            tx_base: Transaction page base (e.g. https://testnet.layerzeroscan.com/tx).
            request_timeout_sec: httpx timeout for each outbound request.
            transport: Optional httpx transport (tests pass httpx.MockTransport).
        """
        if not api_base.strip():
            raise ValueError("api_base must be non-empty")
        if not tx_base.strip():
            raise ValueError("tx_base must be non-empty")
        self._api_base = api_base.strip().rstrip("/")
        self._tx_base = tx_base.strip().rstrip("/")
        self._timeout = request_timeout_sec
        self._transport = transport

    @property
    def tx_base(self) -> str:
        return self._tx_base

    def open(self) -> httpx.AsyncClient:
        """New AsyncClient for one request cycle; use as `async with client.open() as http`."""
        return httpx.AsyncClient(
            timeout=httpx.Timeout(self._timeout),
            transport=self._transport,
            follow_redirects=True,
        )

    def tx_page_url(self, tx_hash: str) -> str:
        return f"{self._tx_base}/{tx_hash}"

    async def fetch_messages(
        self,
        http: httpx.AsyncClient,
        owner: str,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> UpstreamResult[list[RawMessage]]:
        """
        GET {api_base}/messages?address=&page=&limit= and return its `messages` array.

        owner must already be lowercased. Unavailable results carry an empty list.
        """
        if page < 1:
            raise ValueError("page must be >= 1")
        if limit < 1:
            raise ValueError("limit must be >= 1")

        url = f"{self._api_base}/messages"
        params = {"address": owner, "page": page, "limit": limit}
        try:
            resp = await http.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning("lz_api_error", url=url, error=str(e) or type(e).__name__)
            return UpstreamResult.unavailable([], f"LZ API request failed: {e}")

        if not resp.is_success:
            logger.warning("lz_api_error", url=url, status_code=resp.status_code)
            return UpstreamResult.unavailable([], f"LZ API {resp.status_code}")

        try:
            body: Any = resp.json()
        except ValueError as e:
            logger.warning("lz_api_error", url=url, error="invalid JSON body")
            return UpstreamResult.unavailable([], f"LZ API invalid JSON: {e}")

        messages = body.get("messages") if isinstance(body, dict) else None
        if not isinstance(messages, list):
            logger.debug("lz_api_no_messages", url=url, owner=owner)
            return UpstreamResult.available([])
        logger.debug("lz_api_messages_fetched", owner=owner, page=page, count=len(messages))
        return UpstreamResult.available(messages)

    async def fetch_tx_document(
        self,
        http: httpx.AsyncClient,
        tx_hash: str,
    ) -> UpstreamResult[str | None]:
        """GET the human-readable tx page. Unavailable results carry None."""
        url = self.tx_page_url(tx_hash)
        try:
            resp = await http.get(url, headers={"User-Agent": USER_AGENT})
        except httpx.HTTPError as e:
            logger.warning("lz_tx_page_unavailable", tx_hash=tx_hash, error=str(e) or type(e).__name__)
            return UpstreamResult.unavailable(None, f"tx page request failed: {e}")

        if not resp.is_success:
            logger.warning("lz_tx_page_unavailable", tx_hash=tx_hash, status_code=resp.status_code)
            return UpstreamResult.unavailable(None, f"tx page {resp.status_code}")
        return UpstreamResult.available(resp.text)
