"""신고 제출 거절 예외.

클라이언트가 code 로 분기할 수 있도록 안정적인 코드를 제공합니다.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from report.application.common.exceptions.base import ApplicationError


class RejectionCode(str, Enum):
    """제출 거절 코드."""

    IMAGE_TOO_LARGE = "IMAGE_TOO_LARGE"
    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_IMAGE_FORMAT = "INVALID_IMAGE_FORMAT"
    SERVICE_UNAVAILABLE = "SERVICE_UNAVAILABLE"
    NOT_WASTE = "NOT_WASTE"
    LOW_CONFIDENCE = "LOW_CONFIDENCE"
    CLOUDINARY_TIMEOUT = "CLOUDINARY_TIMEOUT"
    CLOUDINARY_ERROR = "CLOUDINARY_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"

    @property
    def status_code(self) -> int:
        """코드에 대응하는 HTTP 상태."""
        return _STATUS_CODES[self]


_STATUS_CODES: dict[RejectionCode, int] = {
    RejectionCode.IMAGE_TOO_LARGE: 413,
    RejectionCode.MISSING_FIELDS: 400,
    RejectionCode.INVALID_IMAGE_FORMAT: 400,
    RejectionCode.SERVICE_UNAVAILABLE: 503,
    RejectionCode.NOT_WASTE: 400,
    RejectionCode.LOW_CONFIDENCE: 400,
    RejectionCode.CLOUDINARY_TIMEOUT: 504,
    RejectionCode.CLOUDINARY_ERROR: 500,
    RejectionCode.VALIDATION_ERROR: 400,
    RejectionCode.INTERNAL_SERVER_ERROR: 500,
}


class SubmissionRejectedError(ApplicationError):
    """신고 제출 거절.

    Attributes:
        code: 거절 코드
        details: 응답 본문에 함께 실릴 추가 필드 (missingFields, classification, error)
    """

    def __init__(self, code: RejectionCode, message: str, **details: Any) -> None:
        self.code = code
        self.details = details
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.code.status_code

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "code": self.code.value, **self.details}
