"""Asset Host 예외."""

from report.application.common.exceptions.base import ApplicationError


class AssetHostError(ApplicationError):
    """Asset Host 업로드/삭제 실패."""
