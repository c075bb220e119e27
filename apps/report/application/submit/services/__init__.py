"""Submit Services - Payload Validator, Report Factory."""

from report.application.submit.services.payload_validator import (
    MAX_IMAGE_BYTES,
    PayloadValidator,
)
from report.application.submit.services.report_factory import build_report

__all__ = ["MAX_IMAGE_BYTES", "PayloadValidator", "build_report"]
