"""Verdict cache adapters."""

from report.infrastructure.cache.in_memory_verdict_cache import CacheEntry, InMemoryVerdictCache

__all__ = ["CacheEntry", "InMemoryVerdictCache"]
