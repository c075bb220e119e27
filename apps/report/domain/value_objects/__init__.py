"""Report 도메인 Value Objects."""

from report.domain.value_objects.ai_verification import AiVerification
from report.domain.value_objects.classification_verdict import ClassificationVerdict
from report.domain.value_objects.geo_point import GeoPoint
from report.domain.value_objects.hosted_asset import HostedAsset

__all__ = ["AiVerification", "ClassificationVerdict", "GeoPoint", "HostedAsset"]
