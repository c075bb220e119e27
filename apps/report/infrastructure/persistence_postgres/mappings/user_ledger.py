"""User Ledger table - report.user_ledger."""

from __future__ import annotations

from sqlalchemy import Column, Integer, String, Table

from report.infrastructure.persistence_postgres.constants import USER_LEDGER_TABLE
from report.infrastructure.persistence_postgres.mappings.registry import metadata

# 사용자별 신고 수/포인트 (엔티티 없이 테이블로만 접근)
user_ledger_table = Table(
    USER_LEDGER_TABLE,
    metadata,
    Column("user_id", String(64), primary_key=True),
    Column("report_count", Integer, nullable=False, server_default="0"),
    Column("points", Integer, nullable=False, server_default="0"),
)
