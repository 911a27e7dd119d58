"""
HTTP middleware — CORS and request logging.

Responsibilities:
- Allow browser dashboards on other origins to call GET /pending.
- Log one structured http_request line per request with status and timing.
"""

from __future__ import annotations

import time
from typing import Awaitable, Callable, Iterable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from lz_autoscan.scan_logging import get_logger

logger = get_logger(__name__)


def install_middleware(app: FastAPI, cors_origins: Iterable[str]) -> None:
    """Attach CORS and request logging to the app."""
    origins = list(cors_origins) or ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response
