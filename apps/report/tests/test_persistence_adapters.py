"""SQLAlchemy Adapter Tests.

실제 DB 없이 AsyncSession Mock 으로 커밋/롤백 동작을 검증합니다.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql

from report.domain.entities import Report
from report.domain.exceptions import ReportValidationError
from report.domain.value_objects import AiVerification, ClassificationVerdict
from report.infrastructure.persistence_postgres.adapters import SqlaReportStore, SqlaUserLedger
from report.infrastructure.persistence_postgres.mappings.types import AiVerificationType


@pytest.fixture
def session() -> MagicMock:
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.execute = AsyncMock()
    return session


def make_report(**overrides) -> Report:
    fields = {
        "user_id": "user-1",
        "title": "Overflowing bin",
        "details": "Bags piled next to the bin",
        "address": "1 Park Ave",
        "image_url": "https://cdn.example.test/a.jpg",
        "public_id": "reports/a",
        "longitude": 126.978,
        "latitude": 37.5665,
    }
    fields.update(overrides)
    return Report(**fields)


class TestSqlaReportStore:
    """SqlaReportStore.save() 테스트."""

    @pytest.mark.anyio
    async def test_save_commits(self, session):
        report = make_report()

        saved = await SqlaReportStore(session).save(report)

        assert saved is report
        session.add.assert_called_once_with(report)
        session.commit.assert_awaited_once()

    @pytest.mark.anyio
    async def test_invalid_report_is_not_added(self, session):
        with pytest.raises(ReportValidationError):
            await SqlaReportStore(session).save(make_report(title=""))

        session.add.assert_not_called()
        session.commit.assert_not_awaited()

    @pytest.mark.anyio
    async def test_commit_failure_rolls_back(self, session):
        session.commit.side_effect = ConnectionError("db down")

        with pytest.raises(ConnectionError):
            await SqlaReportStore(session).save(make_report())

        session.rollback.assert_awaited_once()


class TestSqlaUserLedger:
    """SqlaUserLedger.award() 테스트."""

    @pytest.mark.anyio
    async def test_award_upserts(self, session):
        await SqlaUserLedger(session).award("user-1", 20)

        stmt = session.execute.await_args.args[0]
        sql = str(stmt.compile(dialect=postgresql.dialect()))
        assert "INSERT INTO report.user_ledger" in sql
        assert "ON CONFLICT (user_id) DO UPDATE" in sql
        session.commit.assert_awaited_once()

    @pytest.mark.anyio
    async def test_failure_rolls_back(self, session):
        session.execute.side_effect = ConnectionError("db down")

        with pytest.raises(ConnectionError):
            await SqlaUserLedger(session).award("user-1", 10)

        session.rollback.assert_awaited_once()


class TestAiVerificationType:
    def test_bind_and_result_round_trip(self):
        column_type = AiVerificationType()
        summary = AiVerification.from_verdict(ClassificationVerdict.from_confidence(0.7))

        stored = column_type.process_bind_param(summary, None)

        assert stored == {"isWaste": True, "confidence": 0.7, "verification": "medium_confidence"}
        assert column_type.process_result_value(stored, None) == summary
        assert column_type.process_bind_param(None, None) is None
