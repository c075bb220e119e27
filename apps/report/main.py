"""Report API Main Application.

분산 트레이싱 통합:
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (Detector API 호출)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from report.infrastructure.persistence_postgres.session import dispose_engine
from report.presentation.http.controllers import health_router, report_router
from report.presentation.http.errors import register_exception_handlers
from report.setup.config import get_settings
from report.setup.dependencies import get_detector_client
from report.setup.logging import configure_logging
from report.setup.tracing import (
    configure_tracing,
    instrument_fastapi,
    instrument_httpx,
    shutdown_tracing,
)

settings = get_settings()

configure_logging(
    service_name=settings.service_name,
    service_version=settings.service_version,
)
logger = logging.getLogger(__name__)

# OpenTelemetry 분산 트레이싱 설정
configure_tracing(enabled=settings.otel_enabled)
instrument_httpx()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """FastAPI 라이프스팬 이벤트."""
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")
    if settings.detector_api_key is None:
        logger.warning("ULTRALYTICS_API_KEY is not configured; classification will fail")
    yield
    logger.info(f"Shutting down {settings.service_name}")
    await get_detector_client().close()
    await dispose_engine()
    shutdown_tracing()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 생성."""
    app = FastAPI(
        title="Report API",
        description="Waste report submission with AI verification",
        version=settings.service_version,
        docs_url="/api/report/docs",
        redoc_url="/api/report/redoc",
        openapi_url="/api/report/openapi.json",
        lifespan=lifespan,
    )

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # OpenTelemetry FastAPI instrumentation
    instrument_fastapi(app)

    # Routers
    app.include_router(health_router)
    app.include_router(report_router, prefix="/api")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
