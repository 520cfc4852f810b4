"""
FastAPI application factory and configuration.
"""

import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from . import __version__
from .config.logsetup import bind_context, configure_logging
from .config.observability import record_request
from .config.settings import get_settings
from .routers.currency import router as currency_router
from .routers.system import metrics_router, router as system_router
from .utils.api_shapes import success
from .utils.errors import ERROR_CODES, DomainError, error_payload

logger = logging.getLogger(__name__)


class ResponseTimeMiddleware(BaseHTTPMiddleware):
    """Record request latency in a response header and in Prometheus metrics."""

    async def dispatch(self, request: Request, call_next):  # noqa: D401
        start_time = time.time()
        response = await call_next(request)
        duration_s = time.time() - start_time
        response.headers["X-Response-Time"] = f"{duration_s * 1000:.1f}ms"
        record_request(request.method, request.url.path, response.status_code, duration_s)
        return response


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Generate a per-request ID and attach it to the response and request state."""

    async def dispatch(self, request: Request, call_next):  # noqa: D401
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


def _request_logger(request: Request):
    return bind_context(
        logger,
        request_id=getattr(request.state, "request_id", None),
        path=str(request.url.path),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ARG001
    """Application lifespan management."""
    configure_logging()
    logger.info("Starting up Rupiah codec API %s", __version__)
    yield
    logger.info("Shutting down Rupiah codec API...")


def create_application() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    application_obj = FastAPI(
        title="Rupiah Codec",
        description="Format, parse and spell Indonesian Rupiah amounts",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        lifespan=lifespan,
    )

    setup_middleware(application_obj)
    setup_exception_handlers(application_obj)
    setup_routes(application_obj, settings.API_PREFIX)

    return application_obj


def setup_middleware(app: FastAPI) -> None:
    """Setup application middleware."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(ResponseTimeMiddleware)
    app.add_middleware(RequestIDMiddleware)


def setup_exception_handlers(app: FastAPI) -> None:
    """Setup global exception handlers."""

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        _request_logger(request).info("Domain error %s: %s", exc.code, exc.message)
        return JSONResponse(
            status_code=422,
            content=error_payload(exc.code, exc.message, details=exc.details, path=str(request.url.path)),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Handle validation errors with standardized response."""
        # Pydantic error contexts may hold exceptions; keep only JSON-safe fields.
        sanitized = [
            {k: v for k, v in err.items() if k in ("type", "loc", "msg")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=422,
            content=error_payload(
                ERROR_CODES["validation"], "Request validation failed",
                details=sanitized, path=str(request.url.path)),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions with standardized response."""
        return JSONResponse(
            status_code=exc.status_code,
            content=error_payload(ERROR_CODES["http"], str(exc.detail), path=str(request.url.path)),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        _request_logger(request).error("Unhandled exception: %s", exc, exc_info=True)
        return JSONResponse(
            status_code=500,
            content=error_payload(
                ERROR_CODES["internal"], "An unexpected error occurred", path=str(request.url.path)),
        )


def setup_routes(app: FastAPI, prefix: str) -> None:
    """Setup application routes."""

    @app.get("/")
    async def root():
        """Root endpoint with API information."""
        return success({
            "message": "Rupiah Codec",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        })

    # Unprefixed liveness for load balancers, plus the versioned one
    app.include_router(system_router)
    app.include_router(system_router, prefix=f"{prefix}/system")
    app.include_router(currency_router, prefix=f"{prefix}/currency", tags=["Currency"])
    # Exposes /metrics (Prometheus exposition format) without API prefix
    app.include_router(metrics_router)


# Create the application instance
app = create_application()


# Export for use in other modules
__all__ = ["app", "create_application"]
