"""Classification 서비스 예외.

Orchestrator가 분기할 수 있는 유일한 세 가지 실패 유형입니다.
"""

from report.application.common.exceptions.base import ApplicationError


class ClassificationServiceError(ApplicationError):
    """Detector 호출 실패 베이스."""


class ServiceTimeoutError(ClassificationServiceError):
    """Detector 응답 대기 시간 초과."""

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"SERVICE_TIMEOUT: Request timed out after {timeout:g} seconds")


class ServiceUnreachableError(ClassificationServiceError):
    """Detector 서버 연결 불가 (DNS 실패, 연결 거부)."""

    def __init__(self, reason: str = "") -> None:
        message = "SERVICE_DOWN: API server is unreachable"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class ServiceError(ClassificationServiceError):
    """Detector 오류 응답 또는 기타 예외."""

    def __init__(self, message: str, status: int | None = None, body: str | None = None) -> None:
        self.status = status
        self.body = body
        super().__init__(f"SERVICE_ERROR: {message}")

    @classmethod
    def from_response(cls, status: int, body: str) -> "ServiceError":
        return cls(f"API_ERROR: {status} - {body}", status=status, body=body)
