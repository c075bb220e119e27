"""Report 도메인 엔티티."""

from report.domain.entities.report import Report

__all__ = ["Report"]
