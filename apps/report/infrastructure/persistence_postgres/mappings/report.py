"""Report ORM mapping - Imperative mapping for report.reports table."""

from __future__ import annotations

from sqlalchemy import Column, DateTime, Float, Index, String, Table, Text
from sqlalchemy.dialects.postgresql import UUID

from report.domain.entities import Report
from report.infrastructure.persistence_postgres.constants import REPORTS_TABLE
from report.infrastructure.persistence_postgres.mappings.registry import (
    mapper_registry,
    metadata,
)
from report.infrastructure.persistence_postgres.mappings.types import AiVerificationType

# report.reports 테이블 정의
reports_table = Table(
    REPORTS_TABLE,
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("user_id", String(64), nullable=False, index=True),
    Column("title", Text, nullable=False),
    Column("details", Text, nullable=False),
    Column("address", Text, nullable=False),
    Column("image_url", String(500), nullable=False),
    Column("public_id", String(255), nullable=False),
    Column("longitude", Float, nullable=False),
    Column("latitude", Float, nullable=False),
    Column("report_type", Text, nullable=False),
    Column("photo_timestamp", DateTime(timezone=True), nullable=False),
    Column("ai_verification", AiVerificationType, nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Index("ix_reports_location", "longitude", "latitude"),
)


def start_report_mapper() -> None:
    """Report 엔티티를 report.reports 테이블에 매핑합니다."""
    mapper_registry.map_imperatively(Report, reports_table)
