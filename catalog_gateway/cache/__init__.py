"""
Cache layer: in-memory store, resource facades, warming and background jobs.
"""
from catalog_gateway.cache.keys import CacheKeys
from catalog_gateway.cache.policy import TTLPolicy
from catalog_gateway.cache.resources import CachedResult, CategoryCache, ResourceCache, VideoCache
from catalog_gateway.cache.scheduler import PeriodicTask
from catalog_gateway.cache.store import CacheEntry, CacheStats, CacheStore
from catalog_gateway.cache.warmup import WarmupReport, preload_critical_data, warm_cache

__all__ = [
    "CacheEntry",
    "CacheKeys",
    "CacheStats",
    "CacheStore",
    "CachedResult",
    "CategoryCache",
    "PeriodicTask",
    "ResourceCache",
    "TTLPolicy",
    "VideoCache",
    "WarmupReport",
    "preload_critical_data",
    "warm_cache",
]
