"""Report Store Port - 신고 저장소."""

from __future__ import annotations

from abc import ABC, abstractmethod

from report.domain.entities import Report


class ReportStore(ABC):
    """신고 저장 Port."""

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """신고 저장 (스키마 검증 포함).

        Raises:
            ReportValidationError: 스키마 검증 실패
        """
        raise NotImplementedError
