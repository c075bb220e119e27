"""Detector adapters."""

from report.infrastructure.detector.ultralytics_client import UltralyticsDetectorClient

__all__ = ["UltralyticsDetectorClient"]
