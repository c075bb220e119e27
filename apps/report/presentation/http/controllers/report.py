"""Report API Controller.

메인 API 엔드포인트:
- POST /api/report: 신고 제출 (AI 검증 → 이미지 호스팅 → 저장 → 포인트 지급)
- POST /api/report/test-classify: 진단용 분류 (저장 없음)
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Header
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from report.application.common.exceptions import (
    ClassificationServiceError,
    RejectionCode,
    UnauthorizedError,
)
from report.application.common.image_payload import decode_image_payload, is_valid_image_payload
from report.application.submit.dto import SubmitReportRequest
from report.presentation.http.schemas import ClassifyTestRequest, ReportSubmitRequest
from report.setup.dependencies import GatewayDep, SettingsDep, SubmitCommandDep

router = APIRouter(prefix="/report", tags=["report"])
logger = logging.getLogger(__name__)

DEV_USER_ID = "dev-user"


# ─────────────────────────────────────────────────────────────────────────────
# User Authentication (Ext-Authz 연동)
# ─────────────────────────────────────────────────────────────────────────────


class User(BaseModel):
    """인증된 사용자 모델."""

    user_id: str
    role: str | None = None


def get_current_user(
    settings: SettingsDep,
    x_user_id: str | None = Header(None, alias="X-User-ID"),
    x_user_role: str | None = Header(None, alias="X-User-Role"),
) -> User:
    """Ext-Authz에서 주입된 사용자 정보 추출.

    Raises:
        UnauthorizedError: X-User-ID 헤더가 없는 경우 (401)
    """
    if not x_user_id:
        if settings.auth_disabled:
            return User(user_id=DEV_USER_ID, role=x_user_role)
        raise UnauthorizedError()
    return User(user_id=x_user_id, role=x_user_role)


CurrentUser = Annotated[User, Depends(get_current_user)]


def _is_decodable_image(image: str) -> bool:
    if not is_valid_image_payload(image):
        return False
    try:
        decode_image_payload(image)
    except ValueError:
        return False
    return True


# ─────────────────────────────────────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────────────────────────────────────


@router.post(
    "",
    status_code=201,
    summary="Submit a waste report",
    responses={
        201: {"description": "신고 생성"},
        400: {"description": "검증 실패 / 폐기물 아님 / 낮은 신뢰도"},
        413: {"description": "이미지 크기 초과"},
        503: {"description": "AI 검증 서비스 사용 불가"},
        504: {"description": "이미지 업로드 시간 초과"},
    },
)
async def submit_report(
    payload: ReportSubmitRequest,
    user: CurrentUser,
    command: SubmitCommandDep,
) -> JSONResponse:
    """폐기물 신고를 제출합니다.

    거절 시 SubmissionRejectedError 가 {message, code, ...} 응답으로 변환됩니다.
    """
    request = SubmitReportRequest(
        user_id=user.user_id,
        title=payload.title,
        image=payload.image,
        details=payload.details,
        address=payload.address,
        latitude=payload.latitude,
        longitude=payload.longitude,
        photo_timestamp=payload.photo_timestamp,
        report_type=payload.report_type,
        force_submit=payload.force_submit,
    )

    result = await command.execute(request)

    return JSONResponse(
        status_code=201,
        content={"message": "Report created successfully", **result.to_dict()},
    )


@router.post(
    "/test-classify",
    summary="Classify an image without persisting anything",
)
async def test_classify(
    payload: ClassifyTestRequest,
    user: CurrentUser,
    gateway: GatewayDep,
) -> JSONResponse:
    """운영 점검용 분류. 판정 결과를 그대로 반환합니다."""
    if not payload.image:
        return JSONResponse(
            status_code=400,
            content={"error": "No image provided", "code": "MISSING_IMAGE"},
        )

    if not _is_decodable_image(payload.image):
        return JSONResponse(
            status_code=RejectionCode.INVALID_IMAGE_FORMAT.status_code,
            content={
                "error": "Invalid image format",
                "code": RejectionCode.INVALID_IMAGE_FORMAT.value,
            },
        )

    try:
        verdict = await gateway.classify(payload.image)
    except ClassificationServiceError as e:
        logger.warning(
            "test_classification_failed",
            extra={"user_id": user.user_id, "error": e.message},
        )
        return JSONResponse(
            status_code=RejectionCode.SERVICE_UNAVAILABLE.status_code,
            content={
                "message": "Waste verification service unavailable",
                "code": RejectionCode.SERVICE_UNAVAILABLE.value,
                "error": e.message,
            },
        )

    return JSONResponse(status_code=200, content=verdict.to_dict())
