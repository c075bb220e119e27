"""HTTP Schemas."""

from report.presentation.http.schemas.report import ClassifyTestRequest, ReportSubmitRequest

__all__ = ["ClassifyTestRequest", "ReportSubmitRequest"]
