"""AI Verification Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from report.domain.enums import VerificationLevel
from report.domain.value_objects.classification_verdict import ClassificationVerdict


@dataclass(frozen=True, slots=True)
class AiVerification:
    """신고에 저장되는 AI 검증 요약.

    ClassificationVerdict 의 일부 필드만 보존합니다.
    """

    is_waste: bool
    confidence: float
    verification: VerificationLevel

    @classmethod
    def from_verdict(cls, verdict: ClassificationVerdict) -> AiVerification:
        return cls(
            is_waste=verdict.is_waste,
            confidence=verdict.confidence,
            verification=verdict.verification,
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AiVerification:
        return cls(
            is_waste=bool(data.get("isWaste", False)),
            confidence=float(data.get("confidence", 0.0)),
            verification=VerificationLevel(data.get("verification", "unverified")),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "isWaste": self.is_waste,
            "confidence": self.confidence,
            "verification": self.verification.value,
        }
