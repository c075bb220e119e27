"""Classify Ports - Detector Client, Verdict Cache."""

from report.application.classify.ports.detector_client import DetectorClient
from report.application.classify.ports.verdict_cache import VerdictCache

__all__ = ["DetectorClient", "VerdictCache"]
