"""Report API 분산 트레이싱 (OpenTelemetry).

Report API → OTLP/HTTP → Jaeger Collector

계측 대상:
- FastAPI 요청 (/health, /ready 제외)
- HTTPX 호출 (Ultralytics detector)

Cloudinary SDK 는 requests 기반이라 계측하지 않습니다.
"""

from __future__ import annotations

import logging
import os

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased

from report.setup.constants import (
    DEFAULT_ENVIRONMENT,
    ENV_KEY_ENVIRONMENT,
    SERVICE_NAME,
    SERVICE_VERSION,
)

logger = logging.getLogger(__name__)

OTLP_ENDPOINT = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "http://localhost:4318")
SAMPLING_RATE = float(os.getenv("OTEL_SAMPLING_RATE", "1.0"))
EXCLUDED_URLS = "health,ready"

_provider: TracerProvider | None = None


def configure_tracing(enabled: bool = True) -> bool:
    """TracerProvider 등록. 이미 설정되었거나 비활성화면 아무것도 하지 않습니다.

    Returns:
        트레이싱 활성 여부
    """
    global _provider

    if not enabled:
        logger.info("tracing_disabled")
        return False
    if _provider is not None:
        return True

    resource = Resource.create(
        {
            "service.name": SERVICE_NAME,
            "service.version": SERVICE_VERSION,
            "deployment.environment": os.getenv(ENV_KEY_ENVIRONMENT, DEFAULT_ENVIRONMENT),
        }
    )
    provider = TracerProvider(
        resource=resource,
        sampler=ParentBased(TraceIdRatioBased(SAMPLING_RATE)),
    )
    provider.add_span_processor(
        BatchSpanProcessor(OTLPSpanExporter(endpoint=f"{OTLP_ENDPOINT}/v1/traces"))
    )
    trace.set_tracer_provider(provider)
    _provider = provider

    logger.info(
        "tracing_configured",
        extra={"endpoint": OTLP_ENDPOINT, "sampling_rate": SAMPLING_RATE},
    )
    return True


def instrument_fastapi(app: FastAPI) -> None:
    """FastAPI 앱 계측 (트레이싱 비활성 시 무시)."""
    if _provider is None:
        return
    FastAPIInstrumentor.instrument_app(
        app,
        excluded_urls=EXCLUDED_URLS,
        tracer_provider=_provider,
    )


def instrument_httpx() -> None:
    """전역 HTTPX 계측 (트레이싱 비활성 시 무시)."""
    if _provider is None:
        return
    instrumentor = HTTPXClientInstrumentor()
    if not instrumentor.is_instrumented_by_opentelemetry:
        instrumentor.instrument(tracer_provider=_provider)


def shutdown_tracing() -> None:
    """남은 스팬을 내보내고 provider 종료."""
    global _provider

    if _provider is None:
        return
    try:
        _provider.shutdown()
    except Exception as e:
        logger.error("tracing_shutdown_failed", extra={"error": str(e)})
    finally:
        _provider = None
