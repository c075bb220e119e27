"""GeoJSON Point Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class GeoPoint:
    """경도/위도 좌표 (GeoJSON Point)."""

    longitude: float
    latitude: float

    @property
    def is_valid(self) -> bool:
        """WGS84 범위 내 좌표인지 확인."""
        return -180.0 <= self.longitude <= 180.0 and -90.0 <= self.latitude <= 90.0

    def to_geojson(self) -> dict[str, Any]:
        return {"type": "Point", "coordinates": [self.longitude, self.latitude]}

    @classmethod
    def from_geojson(cls, data: dict[str, Any]) -> GeoPoint:
        longitude, latitude = data["coordinates"]
        return cls(longitude=float(longitude), latitude=float(latitude))
