"""Classification Verdict Value Object.

Detector가 돌려준 폐기물 클래스 신뢰도로부터 판정 결과를 유도합니다.

임계값:
- 0.25 이상: 폐기물 (detector의 conf 파라미터와 동일)
- 0.65 이상: medium_confidence
- 0.85 이상: high_confidence
- 0.7 초과 0.85 미만: 사람 검토 필요 (needs_improvement)
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from report.domain.enums import VerificationLevel

WASTE_THRESHOLD = 0.25
MEDIUM_CONFIDENCE_THRESHOLD = 0.65
HIGH_CONFIDENCE_THRESHOLD = 0.85
REVIEW_LOWER_BOUND = 0.7

DEFAULT_MODEL_VERSION = "YOLOv8"


@dataclass(frozen=True, slots=True)
class ClassificationVerdict:
    """폐기물 분류 판정 Value Object.

    Attributes:
        is_waste: 폐기물 여부
        label: "waste" | "non-waste"
        confidence: 폐기물 클래스 최대 신뢰도 (0.0 ~ 1.0)
        verification: 검증 등급
        is_high_confidence: confidence >= 0.85
        is_verified_waste: 폐기물이면서 high confidence
        needs_improvement: 경계 구간 (사람 검토 대상)
        model_version: detector 모델 식별자
        cache_hit: 캐시에서 제공된 결과인지 여부
    """

    is_waste: bool
    label: str
    confidence: float
    verification: VerificationLevel
    is_high_confidence: bool
    is_verified_waste: bool
    needs_improvement: bool
    model_version: str = DEFAULT_MODEL_VERSION
    cache_hit: bool = False

    @classmethod
    def from_confidence(
        cls,
        confidence: float,
        model_version: str = DEFAULT_MODEL_VERSION,
    ) -> ClassificationVerdict:
        """폐기물 클래스 최대 신뢰도로부터 판정 생성.

        is_verified_waste 는 is_high_confidence 만으로 추론하지 않고
        항상 is_waste 와 함께 계산합니다.
        """
        confidence = min(max(float(confidence), 0.0), 1.0)

        is_waste = confidence >= WASTE_THRESHOLD
        is_high_confidence = confidence >= HIGH_CONFIDENCE_THRESHOLD

        verification = VerificationLevel.UNVERIFIED
        if is_waste:
            if is_high_confidence:
                verification = VerificationLevel.HIGH_CONFIDENCE
            elif confidence >= MEDIUM_CONFIDENCE_THRESHOLD:
                verification = VerificationLevel.MEDIUM_CONFIDENCE

        return cls(
            is_waste=is_waste,
            label="waste" if is_waste else "non-waste",
            confidence=confidence,
            verification=verification,
            is_high_confidence=is_high_confidence,
            is_verified_waste=is_waste and is_high_confidence,
            needs_improvement=(
                is_waste and REVIEW_LOWER_BOUND < confidence < HIGH_CONFIDENCE_THRESHOLD
            ),
            model_version=model_version,
            cache_hit=False,
        )

    def with_cache_hit(self, cache_hit: bool) -> ClassificationVerdict:
        """cache_hit 플래그만 바꾼 사본 반환."""
        if self.cache_hit == cache_hit:
            return self
        return replace(self, cache_hit=cache_hit)

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환 (API 응답용, camelCase)."""
        return {
            "isWaste": self.is_waste,
            "label": self.label,
            "confidence": self.confidence,
            "verification": self.verification.value,
            "isHighConfidence": self.is_high_confidence,
            "isVerifiedWaste": self.is_verified_waste,
            "modelVersion": self.model_version,
            "needsImprovement": self.needs_improvement,
            "cacheHit": self.cache_hit,
        }
