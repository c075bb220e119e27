"""Submit DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any
from uuid import UUID

from report.domain.entities import Report
from report.domain.enums import SubmissionState
from report.domain.value_objects import ClassificationVerdict, HostedAsset


@dataclass
class SubmitReportRequest:
    """신고 제출 요청 DTO."""

    user_id: str
    title: str | None = None
    image: str | None = None
    details: str | None = None
    address: str | None = None
    latitude: float | str | None = None
    longitude: float | str | None = None
    photo_timestamp: datetime | str | None = None
    report_type: str | None = None
    force_submit: bool = False


@dataclass
class SubmitReportResult:
    """신고 제출 결과 DTO."""

    report: Report
    points_earned: int
    classification: ClassificationVerdict | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "report": self.report.to_dict(),
            "pointsEarned": self.points_earned,
            "classification": self.classification.to_dict() if self.classification else None,
        }


@dataclass
class SubmissionWorkflow:
    """요청 단위 제출 워크플로우 상태 (영속화하지 않음)."""

    image: str | None
    force_submit: bool = False
    state: SubmissionState = SubmissionState.VALIDATING
    verdict: ClassificationVerdict | None = None
    asset: HostedAsset | None = None
    report_id: UUID | None = None
    history: list[SubmissionState] = field(default_factory=list)

    def advance(self, state: SubmissionState) -> None:
        """다음 단계로 전이."""
        if self.state.is_terminal:
            raise RuntimeError(f"Workflow already finished in state {self.state.value}")
        self.history.append(self.state)
        self.state = state

    def reject(self) -> None:
        if not self.state.is_terminal:
            self.advance(SubmissionState.REJECTED)
