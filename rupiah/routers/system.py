"""System router providing health and Prometheus metrics endpoints."""
from datetime import datetime, UTC

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .. import __version__
from ..config.observability import APP_START_TIME
from ..utils.api_shapes import success

router = APIRouter()
metrics_router = APIRouter()


@router.get("/health", tags=["System"])  # liveness
async def health():
    uptime_s = (datetime.now(UTC) - APP_START_TIME).total_seconds()
    return success({"ok": True, "version": __version__, "uptime_s": int(uptime_s)})


@metrics_router.get("/metrics", include_in_schema=False)
async def prometheus_metrics() -> Response:  # noqa: D401
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


__all__ = ["router", "metrics_router"]
