"""Custom column types."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON
from sqlalchemy.types import TypeDecorator

from report.domain.value_objects import AiVerification


class AiVerificationType(TypeDecorator):
    """AiVerification ↔ JSON 컬럼 변환."""

    impl = JSON
    cache_ok = True

    def process_bind_param(self, value: AiVerification | None, dialect: Any) -> dict | None:
        if value is None:
            return None
        return value.to_dict()

    def process_result_value(self, value: dict | None, dialect: Any) -> AiVerification | None:
        if value is None:
            return None
        return AiVerification.from_dict(value)
