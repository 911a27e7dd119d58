"""
FastAPI server — read-only view of pending LayerZero messages.

Exposes GET /pending returning WAITING messages sent by the configured owner.
Upstream outages degrade to an empty result (still 200); only unexpected
errors during orchestration produce a 500 with {ok: false, error}.
"""

from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

from lz_autoscan import __version__
from lz_autoscan.api_server.middleware import install_middleware
from lz_autoscan.config import Settings
from lz_autoscan.scan_logging import get_logger
from lz_autoscan.scanner import LayerZeroScanClient, PendingMessageService

logger = get_logger(__name__)

BANNER = "LayerZero auto-scan backend (no private keys). GET /pending"


# -----------------------------------------------------------------------------
# Response models
# -----------------------------------------------------------------------------

class PendingMessageModel(BaseModel):
    """One WAITING message in GET /pending results."""

    srcTxHash: str = Field(..., min_length=1, description="Source chain transaction hash")
    dstEid: Any = Field(None, description="Destination endpoint id, as LayerZero Scan sent it")
    sender32: str | None = Field(None, description="Sender as 0x-prefixed 32-byte hex")
    payload: str | None = Field(None, description="Message payload as 0x-prefixed hex")
    statusSummary: str = Field(..., description="Executor status, uppercase (always WAITING)")
    lzTxPage: str = Field(..., description="LayerZero Scan page for the transaction")


class PendingResponse(BaseModel):
    """GET /pending success body."""

    ok: bool = True
    owner: str
    count: int = Field(..., ge=0)
    results: list[PendingMessageModel] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str


# -----------------------------------------------------------------------------
# Dependencies
# -----------------------------------------------------------------------------

def build_service(settings: Settings) -> PendingMessageService:
    """Pending-message service wired to LayerZero Scan per settings."""
    scan = LayerZeroScanClient(
        settings.lz_api_base,
        settings.lz_tx_base,
        request_timeout_sec=settings.request_timeout_sec,
    )
    return PendingMessageService(settings.owner, scan)


def get_service(request: Request) -> PendingMessageService:
    """Dependency: the app-scoped pending-message service."""
    return request.app.state.pending_service


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------

def create_app(
    settings: Settings,
    service: PendingMessageService | None = None,
) -> FastAPI:
    """
    Build the FastAPI app for one watched owner.

    service overrides the default LayerZero Scan wiring (tests inject one
    backed by httpx.MockTransport).
    """
    app = FastAPI(
        title="LayerZero Auto-Scan API",
        description="Read-only API listing LayerZero messages awaiting execution for one owner.",
        version=__version__,
    )
    app.state.settings = settings
    app.state.pending_service = service or build_service(settings)
    install_middleware(app, settings.cors_origins)

    @app.get("/", response_class=PlainTextResponse)
    def index() -> str:
        """Service banner."""
        return BANNER

    @app.get("/health")
    def health() -> dict[str, str]:
        """Liveness probe: API is up."""
        return {"status": "ok"}

    @app.get(
        "/pending",
        response_model=PendingResponse,
        responses={500: {"model": ErrorResponse}},
    )
    async def pending(svc: PendingMessageService = Depends(get_service)) -> Any:
        """
        Messages sent by the owner whose executor status is WAITING.

        Each result carries sender32/payload from the API record, or from the
        tx page when the record omits them.
        """
        try:
            summaries = await svc.get_pending_messages()
            return PendingResponse(
                owner=svc.owner,
                count=len(summaries),
                results=[PendingMessageModel(**s.to_dict()) for s in summaries],
            )
        except Exception as e:
            logger.exception("pending_request_failed", owner=svc.owner, error=str(e))
            return JSONResponse(
                status_code=500,
                content=ErrorResponse(error=str(e)).model_dump(),
            )

    return app
