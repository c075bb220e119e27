"""Classification Gateway - 원격 detector 기반 폐기물 판정.

흐름:
1. 이미지 fingerprint → 캐시 조회 (hit 시 즉시 반환)
2. 동일 fingerprint 동시 요청은 single-flight 로 병합
3. detector 호출 (30초 제한, 초과 시 호출 취소)
4. 응답 파싱 → 폐기물 클래스(0) 최대 신뢰도 → 판정 유도
5. 캐시 저장 (TTL 5분)

실패는 ServiceTimeoutError / ServiceUnreachableError / ServiceError 세 가지로만 전달됩니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from report.application.classify.ports import DetectorClient, VerdictCache
from report.application.classify.services.fingerprint import fingerprint
from report.application.classify.services.single_flight import SingleFlight
from report.application.common.exceptions import (
    ClassificationServiceError,
    ServiceError,
    ServiceTimeoutError,
)
from report.application.common.image_payload import decode_image_payload
from report.domain.value_objects import ClassificationVerdict
from report.domain.value_objects.classification_verdict import DEFAULT_MODEL_VERSION

logger = logging.getLogger(__name__)

DEFAULT_DETECTION_TIMEOUT = 30.0
DEFAULT_CACHE_TTL = 300
WASTE_CLASS_INDEX = 0


def extract_detections(data: Any) -> list[dict[str, Any]]:
    """detector 응답에서 탐지 목록 추출.

    지원 형식:
    - {"images": [{"results": [...]}]}
    - {"predictions": [{"detections": [...]}]}

    어느 형식에도 맞지 않으면 빈 목록을 반환합니다.
    """
    if not isinstance(data, dict):
        return []

    for outer_key, inner_key in (("images", "results"), ("predictions", "detections")):
        outer = data.get(outer_key)
        if not isinstance(outer, list) or not outer or not isinstance(outer[0], dict):
            continue
        detections = outer[0].get(inner_key)
        if isinstance(detections, list):
            return [d for d in detections if isinstance(d, dict)]

    return []


def max_waste_confidence(detections: list[dict[str, Any]]) -> float:
    """폐기물 클래스 탐지 중 최대 신뢰도 (없으면 0)."""
    confidences = []
    for detection in detections:
        cls = detection.get("class")
        if isinstance(cls, bool) or cls != WASTE_CLASS_INDEX:
            continue
        confidence = detection.get("confidence")
        if isinstance(confidence, (int, float)) and not isinstance(confidence, bool):
            confidences.append(float(confidence))
    return max(confidences, default=0.0)


class ClassificationGateway:
    """원격 detector 게이트웨이.

    캐시는 생성자로 주입됩니다 (테스트에서 clock 제어 가능).
    """

    def __init__(
        self,
        detector: DetectorClient,
        cache: VerdictCache,
        timeout: float = DEFAULT_DETECTION_TIMEOUT,
        cache_ttl: float = DEFAULT_CACHE_TTL,
        model_version: str = DEFAULT_MODEL_VERSION,
    ):
        """초기화.

        Args:
            detector: 객체 탐지 API 클라이언트
            cache: 판정 캐시
            timeout: detector 응답 대기 제한 (초)
            cache_ttl: 캐시 TTL (초)
            model_version: 판정에 기록할 모델 식별자
        """
        self._detector = detector
        self._cache = cache
        self._timeout = timeout
        self._cache_ttl = cache_ttl
        self._model_version = model_version
        self._single_flight: SingleFlight[ClassificationVerdict] = SingleFlight(
            cancelled_error=lambda: ServiceError("in-flight classification was cancelled")
        )

    async def classify(self, image: bytes | str) -> ClassificationVerdict:
        """이미지 분류.

        Args:
            image: 원본 바이트 또는 base64/data URI 문자열

        Returns:
            ClassificationVerdict

        Raises:
            ServiceTimeoutError: detector 응답 시간 초과
            ServiceUnreachableError: detector 연결 불가
            ServiceError: 오류 응답 또는 기타 실패
        """
        if isinstance(image, str):
            try:
                raw = decode_image_payload(image)
            except ValueError as e:
                raise ServiceError(str(e)) from e
        else:
            raw = image

        key = fingerprint(raw)

        cached = await self._cache.get(key)
        if cached is not None:
            logger.info(
                "classification_cache_hit",
                extra={"fingerprint": key, "confidence": cached.confidence},
            )
            return cached

        verdict, is_leader = await self._single_flight.do(
            key, lambda: self._classify_uncached(key, raw)
        )
        if not is_leader:
            return verdict.with_cache_hit(True)
        return verdict

    async def _classify_uncached(self, key: str, raw: bytes) -> ClassificationVerdict:
        """detector 호출 → 판정 → 캐시 저장."""
        try:
            data = await asyncio.wait_for(self._detector.detect(raw), timeout=self._timeout)
        except asyncio.TimeoutError as e:
            logger.error(
                "classification_timeout",
                extra={"fingerprint": key, "timeout": self._timeout},
            )
            raise ServiceTimeoutError(self._timeout) from e
        except ClassificationServiceError as e:
            logger.error(
                "classification_failed",
                extra={"fingerprint": key, "error": e.message},
            )
            raise
        except Exception as e:
            logger.exception("classification_unexpected_error", extra={"fingerprint": key})
            raise ServiceError(str(e)) from e

        detections = extract_detections(data)
        verdict = ClassificationVerdict.from_confidence(
            max_waste_confidence(detections),
            model_version=self._model_version,
        )

        await self._cache.put(key, verdict, self._cache_ttl)

        logger.info(
            "classification_completed",
            extra={
                "fingerprint": key,
                "detections": len(detections),
                "is_waste": verdict.is_waste,
                "confidence": verdict.confidence,
                "verification": verdict.verification.value,
            },
        )
        return verdict
