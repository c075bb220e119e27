"""Payload Validator - 제출 요청 로컬 검증.

외부 호출 없이 즉시 거절 여부를 판단합니다.
"""

from __future__ import annotations

from report.application.common.exceptions import RejectionCode, SubmissionRejectedError
from report.application.common.image_payload import (
    estimate_decoded_size,
    is_valid_image_payload,
)
from report.application.submit.dto import SubmitReportRequest

MAX_IMAGE_BYTES = 5 * 1024 * 1024


def _is_blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


class PayloadValidator:
    """신고 제출 페이로드 검증기."""

    def __init__(self, max_image_bytes: int = MAX_IMAGE_BYTES) -> None:
        self._max_image_bytes = max_image_bytes

    def validate(self, request: SubmitReportRequest) -> None:
        """검증 순서: 이미지 크기 → 필수 필드 → 이미지 형식.

        Raises:
            SubmissionRejectedError: IMAGE_TOO_LARGE, MISSING_FIELDS, INVALID_IMAGE_FORMAT
        """
        if request.image and estimate_decoded_size(request.image) > self._max_image_bytes:
            limit_mb = self._max_image_bytes // (1024 * 1024)
            raise SubmissionRejectedError(
                RejectionCode.IMAGE_TOO_LARGE,
                f"Image too large (max {limit_mb}MB)",
            )

        missing_fields = self.missing_fields(request)
        if missing_fields:
            raise SubmissionRejectedError(
                RejectionCode.MISSING_FIELDS,
                f"Missing required fields: {', '.join(missing_fields)}",
                missingFields=missing_fields,
            )

        if not is_valid_image_payload(request.image):
            raise SubmissionRejectedError(
                RejectionCode.INVALID_IMAGE_FORMAT,
                "Invalid image format",
            )

    @staticmethod
    def missing_fields(request: SubmitReportRequest) -> list[str]:
        """누락된 필수 필드 목록 (위도/경도는 location 하나로 보고)."""
        missing = [
            name
            for name in ("title", "image", "details", "address")
            if _is_blank(getattr(request, name))
        ]
        if _is_blank(request.latitude) or _is_blank(request.longitude):
            missing.append("location")
        return missing
