"""Report 도메인 Enum."""

from report.domain.enums.report_type import ReportType
from report.domain.enums.submission_state import SubmissionState
from report.domain.enums.verification_level import VerificationLevel

__all__ = ["ReportType", "SubmissionState", "VerificationLevel"]
