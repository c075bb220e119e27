"""HTTP Controllers."""

from report.presentation.http.controllers.health import router as health_router
from report.presentation.http.controllers.report import router as report_router

__all__ = ["health_router", "report_router"]
