"""Classify Services - Fingerprint, Single Flight, Classification Gateway."""

from report.application.classify.services.classification_gateway import (
    ClassificationGateway,
    extract_detections,
    max_waste_confidence,
)
from report.application.classify.services.fingerprint import fingerprint
from report.application.classify.services.single_flight import SingleFlight

__all__ = [
    "ClassificationGateway",
    "SingleFlight",
    "extract_detections",
    "fingerprint",
    "max_waste_confidence",
]
