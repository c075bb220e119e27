"""Verdict Cache Port - 분류 결과 캐시."""

from __future__ import annotations

from abc import ABC, abstractmethod

from report.domain.value_objects import ClassificationVerdict


class VerdictCache(ABC):
    """Fingerprint → ClassificationVerdict 캐시 Port."""

    @abstractmethod
    async def get(self, fingerprint: str) -> ClassificationVerdict | None:
        """캐시된 판정 조회.

        Returns:
            cache_hit=True 로 표시된 판정 또는 None
        """
        raise NotImplementedError

    @abstractmethod
    async def put(
        self,
        fingerprint: str,
        verdict: ClassificationVerdict,
        ttl_seconds: float,
    ) -> None:
        """판정 저장. 기존 키는 교체되고 만료 시각이 재설정됩니다."""
        raise NotImplementedError
