"""
Pydantic schemas for API responses
"""
from catalog_gateway.schemas.cache import (
    CachedResponse,
    CacheEntryStats,
    CacheStatsResponse,
    SweepResponse,
    WarmupOutcomeResponse,
    WarmupResponse,
)

__all__ = [
    "CachedResponse",
    "CacheEntryStats",
    "CacheStatsResponse",
    "SweepResponse",
    "WarmupOutcomeResponse",
    "WarmupResponse",
]
