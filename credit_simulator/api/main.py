"""FastAPI application factory"""

import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from credit_simulator.api.middleware import RequestIDMiddleware, MetricsMiddleware
from credit_simulator.api.v1 import simulations, criteria
from credit_simulator.api.v1.schemas import HealthResponse
from credit_simulator.api.v1.simulations import validation_error_response
from credit_simulator.infrastructure.database.init_db import init_db
from credit_simulator.infrastructure.observability.logging import setup_logging
from credit_simulator.config import settings

# Setup structured logging
setup_logging(settings.log_level)

API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.create_tables_on_startup:
        init_db()
    yield


async def api_not_found_handler(request: Request, exc: StarletteHTTPException):
    """Unknown /api routes answer in the API's error format"""
    if exc.status_code == 404 and request.url.path.startswith(API_PREFIX):
        return JSONResponse(status_code=404, content={"error": "Endpoint not found"})
    return await http_exception_handler(request, exc)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Unparseable bodies (malformed JSON) answer like field validation failures"""
    return validation_error_response([error["msg"] for error in exc.errors()])


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Credit Risk Simulator",
        description="Rule-based credit score simulation service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    started_at = time.time()

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.add_exception_handler(StarletteHTTPException, api_not_found_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Health check endpoint
    @app.get(f"{API_PREFIX}/health", response_model=HealthResponse)
    def health_check():
        return HealthResponse(
            status="healthy",
            service=settings.service_name,
            timestamp=datetime.now(timezone.utc).isoformat(),
            uptime=round(time.time() - started_at, 3),
        )

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(simulations.router, prefix=API_PREFIX, tags=["simulations"])
    app.include_router(criteria.router, prefix=API_PREFIX, tags=["criteria"])

    return app


app = create_app()
