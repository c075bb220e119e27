"""Shared metadata and mapper registry."""

from sqlalchemy import MetaData
from sqlalchemy.orm import registry

from report.infrastructure.persistence_postgres.constants import REPORT_SCHEMA

# report 스키마용 메타데이터
metadata = MetaData(schema=REPORT_SCHEMA)
mapper_registry = registry(metadata=metadata)
