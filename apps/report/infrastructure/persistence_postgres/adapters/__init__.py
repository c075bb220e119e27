"""SQLAlchemy adapters."""

from report.infrastructure.persistence_postgres.adapters.report_store_sqla import SqlaReportStore
from report.infrastructure.persistence_postgres.adapters.user_ledger_sqla import SqlaUserLedger

__all__ = ["SqlaReportStore", "SqlaUserLedger"]
