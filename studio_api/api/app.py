# This file builds the FastAPI application and registers the studio and health routers.
# Startup creates the studios table and seeds sample data before any request is served.
# Middleware adds request IDs, timing headers, and Prometheus request metrics.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from studio_api.api.api_config import get_api_config
from studio_api.api.dependencies import get_database_client
from studio_api.api.error_handlers import register_error_handlers
from studio_api.api.routers.health import router as health_router
from studio_api.api.routers.studios import router as studios_router
from studio_api.api.seed import bootstrap_studio_table
from studio_api.common.logging import configure_logging

LOGGER = logging.getLogger("api")

UNMATCHED_ROUTE_LABEL = "unmatched"

API_HTTP_REQUESTS_TOTAL = Counter(
    "api_http_requests_total",
    "Total number of HTTP requests processed by the API.",
    ["method", "path", "status_code"],
)
API_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "api_http_request_duration_seconds",
    "API request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
API_HTTP_INFLIGHT_REQUESTS = Gauge(
    "api_http_inflight_requests",
    "Number of API requests currently being processed.",
    ["method"],
)


def _route_label(request: Request) -> str:
    # Label by route template so /studios/1 and /studios/2 share one series.
    route = request.scope.get("route")
    return getattr(route, "path", UNMATCHED_ROUTE_LABEL)


def create_app() -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = get_api_config()

    app = FastAPI(
        title=config.api_name,
        description="Create, read, update, delete, filter, and search recording studio listings.",
        version=config.app_version,
        openapi_tags=[
            {"name": "studios", "description": "Studio listings and filtered search."},
            {"name": "health", "description": "Service liveness, readiness, and version metadata."},
        ],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins,
        allow_credentials=not config.allow_any_origin,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        started = time.perf_counter()
        status_code = 500
        API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
            return response
        finally:
            path_label = _route_label(request)
            duration_s = time.perf_counter() - started
            API_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            API_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            API_HTTP_INFLIGHT_REQUESTS.labels(method=method_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.on_event("startup")
    def bootstrap_database() -> None:
        startup_config = get_api_config()
        db = get_database_client()
        seeded = bootstrap_studio_table(
            db,
            table_name=startup_config.studio_table_name,
            seed=startup_config.seed_sample_data,
        )
        LOGGER.info(
            "studio api ready environment=%s dialect=%s seeded=%d",
            startup_config.environment,
            db.dialect_name,
            seeded,
        )

    register_error_handlers(app)

    app.include_router(health_router, prefix=config.api_base_path)
    app.include_router(studios_router, prefix=config.api_base_path)

    return app


app = create_app()
