"""Report Entity."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import UUID, uuid4

from report.domain.enums import ReportType
from report.domain.exceptions import ReportValidationError
from report.domain.value_objects import AiVerification, GeoPoint


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Report:
    """폐기물 신고 엔티티.

    reports 테이블에 매핑됩니다.

    Attributes:
        user_id: 신고한 사용자 ID
        title: 제목 (trim 적용)
        details: 상세 설명 (trim 적용)
        address: 주소 (trim 적용)
        image_url: Asset Host 공개 URL
        public_id: Asset Host 삭제용 식별자
        longitude: 경도
        latitude: 위도
        report_type: 신고 유형 (기본 standard, 목록 외 값 허용)
        photo_timestamp: 촬영 시각 (기본 현재 시각)
        ai_verification: AI 검증 요약 (강제 제출 시 None)
    """

    user_id: str
    title: str
    details: str
    address: str
    image_url: str
    public_id: str
    longitude: float
    latitude: float
    report_type: str = ReportType.STANDARD.value
    photo_timestamp: datetime = field(default_factory=_utcnow)
    ai_verification: AiVerification | None = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)

    @property
    def location(self) -> GeoPoint:
        return GeoPoint(longitude=self.longitude, latitude=self.latitude)

    def validate(self) -> None:
        """스키마 검증.

        Raises:
            ReportValidationError: 필드 제약 위반
        """
        errors: dict[str, str] = {}

        for name, value in (
            ("title", self.title),
            ("details", self.details),
            ("address", self.address),
        ):
            if not value:
                errors[name] = "required"

        if not self.user_id:
            errors["user"] = "required"
        if not self.image_url:
            errors["image"] = "required"

        if not all(math.isfinite(v) for v in (self.longitude, self.latitude)):
            errors["location"] = "coordinates must be finite numbers"
        elif not self.location.is_valid:
            errors["location"] = "coordinates out of range"

        if errors:
            raise ReportValidationError(errors)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 응답용)."""
        return {
            "id": str(self.id),
            "title": self.title,
            "image": self.image_url,
            "publicId": self.public_id,
            "details": self.details,
            "address": self.address,
            "reportType": self.report_type,
            "location": self.location.to_geojson(),
            "photoTimestamp": self.photo_timestamp.isoformat(),
            "user": self.user_id,
            "aiVerification": self.ai_verification.to_dict() if self.ai_verification else None,
            "createdAt": self.created_at.isoformat(),
        }
