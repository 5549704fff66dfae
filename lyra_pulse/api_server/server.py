"""
FastAPI server: HTTP surface of the baseline engine.

Mounts the stateless scoring router and the organization history router,
and maps PulseError kinds to JSON error responses:
{"error": code, "message": ..., "details": {...}}.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from lyra_pulse import __version__
from lyra_pulse.api_server.organizations import router as organizations_router
from lyra_pulse.api_server.routes import router as baseline_router
from lyra_pulse.baseline import dimension_catalog
from lyra_pulse.core.exceptions import (
    InconsistentCycleOrder,
    InsufficientData,
    PulseError,
    SnapshotNotFound,
)
from lyra_pulse.history import get_history
from lyra_pulse.pulse_logging import get_logger

logger = get_logger(__name__)

ERROR_STATUS: dict[type[PulseError], int] = {
    SnapshotNotFound: 404,
    InconsistentCycleOrder: 409,
    InsufficientData: 409,
}
DEFAULT_ERROR_STATUS = 422


def status_for(exc: PulseError) -> int:
    for kind, status in ERROR_STATUS.items():
        if isinstance(exc, kind):
            return status
    return DEFAULT_ERROR_STATUS


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build the process-wide history (and validate configuration) before serving."""
    history = get_history()
    logger.info("api_startup", version=__version__, scoring=history.config.to_dict())
    yield
    logger.info("api_shutdown")


app = FastAPI(
    title="Lyra Pulse Baseline API",
    description="Signal aggregation and scoring for AI-efficacy pulse cycles.",
    version=__version__,
    lifespan=lifespan,
)


@app.exception_handler(PulseError)
async def pulse_error_handler(request: Request, exc: PulseError) -> JSONResponse:
    status = status_for(exc)
    logger.warning(
        "request_rejected",
        path=request.url.path,
        status=status,
        error=exc.code,
        message=exc.message,
    )
    return JSONResponse(status_code=status, content=exc.to_dict())


@app.get("/health")
def health() -> dict[str, Any]:
    return {"status": "ok", "version": __version__}


@app.get("/dimensions")
def dimensions() -> dict[str, Any]:
    return {"dimensions": dimension_catalog()}


app.include_router(baseline_router)
app.include_router(organizations_router)
