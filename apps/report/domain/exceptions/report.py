"""Report 도메인 예외."""

from report.domain.exceptions.base import DomainError


class ReportValidationError(DomainError):
    """신고 레코드 스키마 검증 실패."""

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = errors
        detail = ", ".join(f"{field}: {reason}" for field, reason in errors.items())
        super().__init__(f"Report validation failed: {detail}")
