"""Report 애플리케이션 예외."""

from report.application.common.exceptions.asset_host import AssetHostError
from report.application.common.exceptions.auth import UnauthorizedError
from report.application.common.exceptions.base import ApplicationError
from report.application.common.exceptions.classification import (
    ClassificationServiceError,
    ServiceError,
    ServiceTimeoutError,
    ServiceUnreachableError,
)
from report.application.common.exceptions.submission import (
    RejectionCode,
    SubmissionRejectedError,
)

__all__ = [
    "ApplicationError",
    "AssetHostError",
    "ClassificationServiceError",
    "RejectionCode",
    "ServiceError",
    "ServiceTimeoutError",
    "ServiceUnreachableError",
    "SubmissionRejectedError",
    "UnauthorizedError",
]
