"""Points Policy - 신고 유형별 포인트 정책."""

from __future__ import annotations

from report.domain.enums import ReportType

REPORT_POINTS: dict[str, int] = {
    ReportType.STANDARD.value: 10,
    ReportType.HAZARDOUS.value: 20,
    ReportType.LARGE.value: 15,
}
DEFAULT_REPORT_POINTS = 10


class PointsPolicy:
    """신고 보상 포인트 정책."""

    def __init__(
        self,
        points_map: dict[str, int] | None = None,
        default_points: int = DEFAULT_REPORT_POINTS,
    ) -> None:
        self._points_map = dict(points_map or REPORT_POINTS)
        self._default_points = default_points

    def points_for(self, report_type: str | None) -> int:
        """유형에 해당하는 포인트 반환 (알 수 없는 유형은 기본값)."""
        if not report_type:
            return self._default_points
        return self._points_map.get(report_type, self._default_points)
