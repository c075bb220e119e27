"""InMemoryVerdictCache Tests.

TTL 만료는 주입한 시계로 결정적으로 검증합니다.
"""

import pytest

from report.domain.value_objects import ClassificationVerdict
from report.infrastructure.cache import InMemoryVerdictCache


class TestInMemoryVerdictCache:
    """InMemoryVerdictCache 테스트."""

    @pytest.fixture
    def cache(self, fake_clock) -> InMemoryVerdictCache:
        return InMemoryVerdictCache(clock=fake_clock)

    @pytest.mark.anyio
    async def test_miss_returns_none(self, cache):
        assert await cache.get("unknown") is None

    @pytest.mark.anyio
    async def test_hit_marks_cache_hit(self, cache, waste_verdict):
        """캐시에서 나온 판정은 cache_hit=True."""
        await cache.put("fp", waste_verdict, 300)

        cached = await cache.get("fp")

        assert cached is not None
        assert cached.cache_hit is True
        assert cached.confidence == waste_verdict.confidence
        assert cached.verification == waste_verdict.verification

    @pytest.mark.anyio
    async def test_put_stores_cache_hit_false(self, cache, waste_verdict):
        """cache_hit=True 로 들어온 판정도 저장 시 False 로 정규화."""
        await cache.put("fp", waste_verdict.with_cache_hit(True), 300)

        assert cache._entries["fp"].verdict.cache_hit is False

    @pytest.mark.anyio
    async def test_entry_expires_after_ttl(self, cache, fake_clock, waste_verdict):
        """TTL 경과 후 조회 시 None + 항목 삭제."""
        await cache.put("fp", waste_verdict, 300)

        fake_clock.advance(299)
        assert await cache.get("fp") is not None

        fake_clock.advance(1)
        assert await cache.get("fp") is None
        assert len(cache) == 0

    @pytest.mark.anyio
    async def test_put_replaces_and_resets_expiry(self, cache, fake_clock):
        """같은 키 재저장 시 값 교체 + 만료 재설정."""
        await cache.put("fp", ClassificationVerdict.from_confidence(0.3), 300)
        fake_clock.advance(200)
        await cache.put("fp", ClassificationVerdict.from_confidence(0.95), 300)
        fake_clock.advance(200)

        cached = await cache.get("fp")

        assert cached is not None
        assert cached.confidence == 0.95

    @pytest.mark.anyio
    async def test_put_purges_expired_entries(self, cache, fake_clock, waste_verdict):
        """저장 시 만료 항목 정리."""
        await cache.put("old", waste_verdict, 10)
        fake_clock.advance(11)
        await cache.put("new", waste_verdict, 10)

        assert len(cache) == 1

    @pytest.mark.anyio
    async def test_purge_expired_returns_count(self, cache, fake_clock, waste_verdict):
        await cache.put("a", waste_verdict, 10)
        await cache.put("b", waste_verdict, 100)
        fake_clock.advance(50)

        assert cache.purge_expired() == 1
        assert len(cache) == 1
