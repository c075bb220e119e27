"""Report Factory - 제출 요청으로부터 Report 엔티티 생성."""

from __future__ import annotations

from datetime import datetime, timezone

from report.application.submit.dto import SubmitReportRequest
from report.domain.entities import Report
from report.domain.enums import ReportType
from report.domain.exceptions import ReportValidationError
from report.domain.value_objects import AiVerification, ClassificationVerdict, HostedAsset


def _parse_coordinate(name: str, value: float | str | None) -> float:
    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise ReportValidationError({name: f"invalid number: {value!r}"}) from e


def _parse_timestamp(value: datetime | str | None) -> datetime:
    if value is None or value == "":
        return datetime.now(timezone.utc)
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as e:
            raise ReportValidationError({"photoTimestamp": f"invalid date: {value!r}"}) from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def build_report(
    request: SubmitReportRequest,
    asset: HostedAsset,
    verdict: ClassificationVerdict | None,
) -> Report:
    """Report 엔티티 생성.

    - title/details/address 앞뒤 공백 제거
    - photo_timestamp 미지정 시 현재 시각 (UTC)
    - report_type 미지정 시 standard
    - 분류를 건너뛴 경우 ai_verification 은 None

    Raises:
        ReportValidationError: 좌표/시각 파싱 실패
    """
    return Report(
        user_id=request.user_id,
        title=(request.title or "").strip(),
        details=(request.details or "").strip(),
        address=(request.address or "").strip(),
        image_url=asset.secure_url,
        public_id=asset.public_id,
        longitude=_parse_coordinate("longitude", request.longitude),
        latitude=_parse_coordinate("latitude", request.latitude),
        report_type=request.report_type or ReportType.STANDARD.value,
        photo_timestamp=_parse_timestamp(request.photo_timestamp),
        ai_verification=AiVerification.from_verdict(verdict) if verdict else None,
    )
