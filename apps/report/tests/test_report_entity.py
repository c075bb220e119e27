"""Report Entity / Factory / PointsPolicy Tests."""

from datetime import datetime, timezone

import pytest

from report.application.submit.dto import SubmitReportRequest
from report.application.submit.services import build_report
from report.domain.entities import Report
from report.domain.exceptions import ReportValidationError
from report.domain.services import PointsPolicy
from report.domain.value_objects import ClassificationVerdict, GeoPoint, HostedAsset

ASSET = HostedAsset(secure_url="https://cdn.example.test/a.jpg", public_id="reports/a")


def make_report(**overrides) -> Report:
    fields = {
        "user_id": "user-1",
        "title": "Overflowing bin",
        "details": "Bags piled next to the bin",
        "address": "1 Park Ave",
        "image_url": ASSET.secure_url,
        "public_id": ASSET.public_id,
        "longitude": 126.978,
        "latitude": 37.5665,
    }
    fields.update(overrides)
    return Report(**fields)


class TestReportValidate:
    """Report.validate() 테스트."""

    def test_valid_report(self):
        make_report().validate()

    def test_defaults(self):
        report = make_report()

        assert report.report_type == "standard"
        assert report.ai_verification is None
        assert report.photo_timestamp.tzinfo is not None

    def test_collects_all_errors(self):
        report = make_report(title="", address="", latitude=95.0)

        with pytest.raises(ReportValidationError) as exc_info:
            report.validate()

        assert set(exc_info.value.errors) == {"title", "address", "location"}

    def test_accepts_unlisted_report_type_and_long_text(self):
        make_report(report_type="furniture", details="d" * 5000).validate()

    @pytest.mark.parametrize(
        ("longitude", "latitude"),
        [(181.0, 0.0), (0.0, -90.5), (float("nan"), 0.0), (float("inf"), 10.0)],
    )
    def test_rejects_bad_coordinates(self, longitude, latitude):
        with pytest.raises(ReportValidationError) as exc_info:
            make_report(longitude=longitude, latitude=latitude).validate()

        assert "location" in exc_info.value.errors

    def test_zero_coordinates_are_valid(self):
        make_report(longitude=0.0, latitude=0.0).validate()

    def test_to_dict(self):
        report = make_report()
        data = report.to_dict()

        assert data["id"] == str(report.id)
        assert data["image"] == ASSET.secure_url
        assert data["publicId"] == ASSET.public_id
        assert data["user"] == "user-1"
        assert data["location"] == {"type": "Point", "coordinates": [126.978, 37.5665]}
        assert data["aiVerification"] is None


class TestGeoPoint:
    def test_geojson_round_trip(self):
        point = GeoPoint(longitude=10.5, latitude=-3.25)
        assert GeoPoint.from_geojson(point.to_geojson()) == point


class TestBuildReport:
    """build_report() 테스트."""

    def make_request(self, **overrides) -> SubmitReportRequest:
        fields = {
            "user_id": "user-1",
            "title": "  Broken glass  ",
            "details": " Shards on the crossing ",
            "address": " 5 Elm St ",
            "latitude": "0",
            "longitude": 0,
        }
        fields.update(overrides)
        return SubmitReportRequest(**fields)

    def test_trims_text_and_parses_coordinates(self):
        report = build_report(self.make_request(), ASSET, None)

        assert report.title == "Broken glass"
        assert report.details == "Shards on the crossing"
        assert report.address == "5 Elm St"
        assert (report.latitude, report.longitude) == (0.0, 0.0)
        assert report.report_type == "standard"
        assert report.ai_verification is None

    def test_parses_iso_timestamp_with_z(self):
        report = build_report(
            self.make_request(photo_timestamp="2024-05-01T10:00:00Z"), ASSET, None
        )
        assert report.photo_timestamp == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)

    def test_naive_timestamp_is_utc(self):
        report = build_report(
            self.make_request(photo_timestamp=datetime(2024, 5, 1, 10, 0)), ASSET, None
        )
        assert report.photo_timestamp.tzinfo == timezone.utc

    def test_invalid_timestamp(self):
        with pytest.raises(ReportValidationError) as exc_info:
            build_report(self.make_request(photo_timestamp="yesterday"), ASSET, None)

        assert "photoTimestamp" in exc_info.value.errors

    def test_ai_verification_from_verdict(self):
        verdict = ClassificationVerdict.from_confidence(0.9)

        report = build_report(self.make_request(), ASSET, verdict)

        assert report.ai_verification is not None
        assert report.ai_verification.to_dict() == {
            "isWaste": True,
            "confidence": 0.9,
            "verification": "high_confidence",
        }


class TestPointsPolicy:
    """PointsPolicy 테스트."""

    @pytest.mark.parametrize(
        ("report_type", "points"),
        [("standard", 10), ("hazardous", 20), ("large", 15), (None, 10), ("unknown", 10)],
    )
    def test_points_for(self, report_type, points):
        assert PointsPolicy().points_for(report_type) == points

    def test_custom_policy(self):
        policy = PointsPolicy(points_map={"standard": 1}, default_points=0)

        assert policy.points_for("standard") == 1
        assert policy.points_for("large") == 0
