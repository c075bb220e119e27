"""SQLAlchemy implementation of report store."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from report.application.submit.ports import ReportStore
from report.domain.entities import Report

logger = logging.getLogger(__name__)


class SqlaReportStore(ReportStore):
    """신고 저장소 SQLAlchemy 구현.

    저장은 독립 트랜잭션으로 커밋됩니다 (포인트 지급과 분리).
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, report: Report) -> Report:
        """스키마 검증 후 신고를 저장합니다."""
        report.validate()

        self._session.add(report)
        try:
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise

        logger.debug("report_saved", extra={"report_id": str(report.id)})
        return report
