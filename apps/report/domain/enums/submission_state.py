"""Submission Workflow State Enum."""

from enum import Enum


class SubmissionState(str, Enum):
    """신고 제출 워크플로우 상태.

    COMPLETED, REJECTED 가 종료 상태입니다.
    """

    VALIDATING = "validating"
    CLASSIFYING = "classifying"
    HOSTING = "hosting"
    PERSISTING = "persisting"
    AWARDING = "awarding"
    COMPLETED = "completed"
    REJECTED = "rejected"

    @property
    def is_terminal(self) -> bool:
        """종료 상태 여부."""
        return self in (SubmissionState.COMPLETED, SubmissionState.REJECTED)
