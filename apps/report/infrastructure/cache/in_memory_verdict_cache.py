"""In-Memory Verdict Cache - 분류 결과 로컬 캐싱.

동일한 이미지(fingerprint)에 대해 분류 결과를 캐싱합니다.
Detector 호출 비용 절감 및 응답 시간 단축.

Cache-Aside 패턴:
1. 캐시 조회
2. Cache Hit → 즉시 반환 (cache_hit=True)
3. Cache Miss → Detector 호출 → 결과 캐싱 (cache_hit=False)

크기 기반 eviction은 없습니다. 만료 항목은 조회/저장 시 정리되므로
메모리 사용량은 5분 동안 제출된 서로 다른 이미지 수에 비례합니다.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from threading import Lock

from report.application.classify.ports import VerdictCache
from report.domain.value_objects import ClassificationVerdict

logger = logging.getLogger(__name__)

DEFAULT_TTL = 300  # 5분


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """캐시 항목."""

    fingerprint: str
    verdict: ClassificationVerdict
    expires_at: float


class InMemoryVerdictCache(VerdictCache):
    """Thread-safe 인메모리 판정 캐시.

    Args:
        clock: 단조 증가 시계 (테스트에서 교체 가능)
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    async def get(self, fingerprint: str) -> ClassificationVerdict | None:
        """캐시된 판정 조회 (만료 시 삭제 후 None)."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(fingerprint)
            if entry is None:
                return None
            if entry.expires_at <= now:
                del self._entries[fingerprint]
                logger.debug("verdict_cache_expired", extra={"fingerprint": fingerprint})
                return None
        return entry.verdict.with_cache_hit(True)

    async def put(
        self,
        fingerprint: str,
        verdict: ClassificationVerdict,
        ttl_seconds: float = DEFAULT_TTL,
    ) -> None:
        """판정 저장 (기존 키는 교체, 만료 시각 재설정)."""
        now = self._clock()
        entry = CacheEntry(
            fingerprint=fingerprint,
            verdict=verdict.with_cache_hit(False),
            expires_at=now + ttl_seconds,
        )
        with self._lock:
            self._purge_expired(now)
            self._entries[fingerprint] = entry
        logger.debug(
            "verdict_cache_set",
            extra={"fingerprint": fingerprint, "ttl": ttl_seconds},
        )

    def purge_expired(self) -> int:
        """만료 항목 정리. 삭제된 개수 반환."""
        with self._lock:
            return self._purge_expired(self._clock())

    def _purge_expired(self, now: float) -> int:
        expired = [key for key, entry in self._entries.items() if entry.expires_at <= now]
        for key in expired:
            del self._entries[key]
        return len(expired)
