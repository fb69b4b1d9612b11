"""
Cache Pydantic schemas for API responses
"""
from typing import Any, List, Optional

from pydantic import BaseModel


class CachedResponse(BaseModel):
    """Ответ чтения через кэш."""

    data: Any = None
    from_cache: bool


class CacheEntryStats(BaseModel):
    """Статистика одной записи."""

    key: str
    hits: int
    age: float
    ttl: float


class CacheStatsResponse(BaseModel):
    """Снимок кэша: размер, ёмкость, записи."""

    size: int
    capacity: int
    entries: List[CacheEntryStats]


class SweepResponse(BaseModel):
    """Результат ручной очистки просроченных записей."""

    removed: int
    size: int


class WarmupOutcomeResponse(BaseModel):
    name: str
    success: bool
    from_cache: bool = False
    error: Optional[str] = None


class WarmupResponse(BaseModel):
    """Итог прогрева кэша."""

    succeeded: int
    failed: int
    outcomes: List[WarmupOutcomeResponse]
