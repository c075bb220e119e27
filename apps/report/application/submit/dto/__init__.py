"""Submit DTOs."""

from report.application.submit.dto.submission import (
    SubmissionWorkflow,
    SubmitReportRequest,
    SubmitReportResult,
)

__all__ = ["SubmissionWorkflow", "SubmitReportRequest", "SubmitReportResult"]
