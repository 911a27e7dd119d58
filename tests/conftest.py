"""
Pytest fixtures for LayerZero Auto-Scan tests.

Outbound HTTP goes through httpx.MockTransport backed by FakeLayerZeroScan,
so no test touches the network.
"""

from __future__ import annotations

from typing import Any

import httpx
import pytest

API_BASE = "https://api.lz.test"
TX_BASE = "https://scan.lz.test/tx"
OWNER = "0xabcdef0000000000000000000000000000000001"

SENDER32 = "0x" + "11" * 32
PAYLOAD = "0x" + "ab" * 64


class FakeLayerZeroScan:
    """
    In-memory LayerZero Scan: serves /messages and tx pages, records every request.

    Set messages_error / tx_errors to an exception to simulate transport failure,
    or messages_status / tx_status to a non-2xx code.
    """

    def __init__(self) -> None:
        self.messages: list[Any] = []
        self.messages_status = 200
        self.messages_error: Exception | None = None
        self.tx_pages: dict[str, str] = {}
        self.tx_status = 200
        self.tx_error: Exception | None = None
        self.requests: list[httpx.Request] = []

    @property
    def tx_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if str(r.url).startswith(TX_BASE)]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url.startswith(f"{API_BASE}/messages"):
            if self.messages_error is not None:
                raise self.messages_error
            return httpx.Response(self.messages_status, json={"messages": self.messages})
        if url.startswith(TX_BASE):
            if self.tx_error is not None:
                raise self.tx_error
            tx_hash = request.url.path.rsplit("/", 1)[-1]
            if tx_hash not in self.tx_pages:
                return httpx.Response(404, text="not found")
            return httpx.Response(self.tx_status, text=self.tx_pages[tx_hash])
        return httpx.Response(404)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def fake_scan() -> FakeLayerZeroScan:
    return FakeLayerZeroScan()


@pytest.fixture
def scan_client(fake_scan):
    from lz_autoscan.scanner import LayerZeroScanClient

    return LayerZeroScanClient(API_BASE, TX_BASE, transport=fake_scan.transport())


@pytest.fixture
def service(scan_client):
    from lz_autoscan.scanner import PendingMessageService

    return PendingMessageService(OWNER, scan_client)


@pytest.fixture
def settings():
    from lz_autoscan.config import Settings

    return Settings(owner=OWNER, lz_api_base=API_BASE, lz_tx_base=TX_BASE)


@pytest.fixture
def client(settings, service):
    """FastAPI TestClient over an app whose service talks to FakeLayerZeroScan."""
    from fastapi.testclient import TestClient

    from lz_autoscan.api_server.server import create_app

    return TestClient(create_app(settings, service=service))


@pytest.fixture(autouse=True)
def default_logging():
    """Tests that reconfigure structlog get the JSON/INFO default back afterwards."""
    yield
    from lz_autoscan.scan_logging import configure_logging

    configure_logging()
