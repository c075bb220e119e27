"""Report 도메인 서비스."""

from report.domain.services.points_policy import PointsPolicy

__all__ = ["PointsPolicy"]
