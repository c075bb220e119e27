"""AI Verification Level Enum."""

from enum import Enum


class VerificationLevel(str, Enum):
    """AI 검증 등급.

    폐기물로 판정된 경우에만 medium/high 등급이 부여됩니다.
    """

    UNVERIFIED = "unverified"
    MEDIUM_CONFIDENCE = "medium_confidence"
    HIGH_CONFIDENCE = "high_confidence"
