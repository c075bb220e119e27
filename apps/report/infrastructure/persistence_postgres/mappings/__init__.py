"""ORM mappings."""

from report.infrastructure.persistence_postgres.mappings.registry import (
    mapper_registry,
    metadata,
)
from report.infrastructure.persistence_postgres.mappings.report import (
    reports_table,
    start_report_mapper,
)
from report.infrastructure.persistence_postgres.mappings.user_ledger import user_ledger_table

_mappers_started = False


def start_mappers() -> None:
    """모든 imperative mapper 등록 (중복 호출 안전)."""
    global _mappers_started
    if _mappers_started:
        return
    start_report_mapper()
    _mappers_started = True


__all__ = [
    "mapper_registry",
    "metadata",
    "reports_table",
    "start_mappers",
    "user_ledger_table",
]
