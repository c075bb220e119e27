"""Submit Commands."""

from report.application.submit.commands.submit_report import SubmitReportCommand

__all__ = ["SubmitReportCommand"]
