"""Exception Handlers.

도메인/애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from report.application.common.exceptions.auth import UnauthorizedError
from report.application.common.exceptions.base import ApplicationError
from report.application.common.exceptions.submission import (
    RejectionCode,
    SubmissionRejectedError,
)
from report.domain.exceptions.base import DomainError
from report.domain.exceptions.report import ReportValidationError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(SubmissionRejectedError)
    async def submission_rejected_handler(request: Request, exc: SubmissionRejectedError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(UnauthorizedError)
    async def unauthorized_handler(request: Request, exc: UnauthorizedError):
        return JSONResponse(
            status_code=401,
            content={"detail": exc.message, "code": "UNAUTHORIZED"},
        )

    @app.exception_handler(ReportValidationError)
    async def report_validation_handler(request: Request, exc: ReportValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "message": "Validation Error",
                "code": RejectionCode.VALIDATION_ERROR.value,
                "errors": exc.errors,
            },
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("unhandled_error", extra={"path": request.url.path})
        return JSONResponse(
            status_code=500,
            content={
                "message": "Internal server error",
                "code": RejectionCode.INTERNAL_SERVER_ERROR.value,
            },
        )
