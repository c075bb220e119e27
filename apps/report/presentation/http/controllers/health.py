"""Health Check Controller."""

from __future__ import annotations

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from sqlalchemy import text

from report.application.common.exceptions import ClassificationServiceError
from report.setup.dependencies import GatewayDep, SessionDep, SettingsDep

router = APIRouter(tags=["health"])
logger = logging.getLogger(__name__)

# 1x1 PNG 샘플 (분류 파이프라인 점검용)
SAMPLE_IMAGE = (
    "data:image/jpeg;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8z8BQDwAEhQGAhKmMIQAAAABJRU5ErkJggg=="
)


@router.get("/health")
async def health(settings: SettingsDep) -> dict:
    """서비스 헬스 체크."""
    return {
        "status": "ok",
        "service": settings.service_name,
        "version": settings.service_version,
    }


@router.get("/ready")
async def ready(session: SessionDep, gateway: GatewayDep) -> JSONResponse:
    """서비스 준비 상태 체크.

    DB 연결과 분류 파이프라인(샘플 이미지)을 확인합니다.
    샘플 판정은 캐시되므로 반복 호출 시 Detector 를 다시 호출하지 않습니다.
    """
    try:
        await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.error("readiness_db_failed", extra={"error": str(e)})
        return JSONResponse(
            status_code=503,
            content={"error": "Database unavailable", "details": str(e)},
        )

    try:
        await gateway.classify(SAMPLE_IMAGE)
    except ClassificationServiceError as e:
        logger.error("readiness_ai_failed", extra={"error": e.message})
        return JSONResponse(
            status_code=503,
            content={"error": "AI service unavailable", "details": e.message},
        )

    return JSONResponse(
        status_code=200,
        content={"status": "ready", "db": "connected", "ai": "operational"},
    )
