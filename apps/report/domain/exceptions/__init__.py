"""Report 도메인 예외."""

from report.domain.exceptions.base import DomainError
from report.domain.exceptions.report import ReportValidationError

__all__ = ["DomainError", "ReportValidationError"]
