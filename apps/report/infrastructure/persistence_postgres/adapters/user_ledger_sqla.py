"""SQLAlchemy implementation of user ledger."""

from __future__ import annotations

from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from report.application.submit.ports import UserLedger
from report.infrastructure.persistence_postgres.mappings import user_ledger_table


class SqlaUserLedger(UserLedger):
    """사용자 포인트 원장 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def award(self, user_id: str, points: int) -> None:
        """신고 수/포인트를 원자적으로 증가시킵니다 (행이 없으면 생성)."""
        stmt = insert(user_ledger_table).values(
            user_id=user_id,
            report_count=1,
            points=points,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[user_ledger_table.c.user_id],
            set_={
                "report_count": user_ledger_table.c.report_count + 1,
                "points": user_ledger_table.c.points + points,
            },
        )
        try:
            await self._session.execute(stmt)
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise
