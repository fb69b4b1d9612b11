"""
In-memory response cache: bounded key/value store with per-entry TTL,
hit counting and least-used eviction.
"""
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from catalog_gateway.monitoring.metrics import (
    track_cache_size,
    track_eviction,
    track_expired,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_CAPACITY = 100
DEFAULT_TTL = 300.0  # 5 minutes


@dataclass
class CacheEntry(Generic[T]):
    """Запись кэша: значение, время создания, TTL и счётчик попаданий."""

    value: T
    created_at: float
    ttl: float
    hits: int = 0

    def age(self, now: float) -> float:
        return now - self.created_at

    def is_expired(self, now: float) -> bool:
        # ttl <= 0 means the entry is dead on arrival
        return self.ttl <= 0 or self.age(now) > self.ttl


@dataclass
class EntryStats:
    key: str
    hits: int
    age: float
    ttl: float


@dataclass
class CacheStats:
    """Снимок состояния кэша для наблюдаемости и тестов."""

    size: int
    capacity: int
    entries: List[EntryStats] = field(default_factory=list)


class CacheStore:
    """
    Кэш фиксированной ёмкости с TTL и вытеснением наименее используемых записей.

    Промах не является ошибкой: get() возвращает None. Просроченные записи
    удаляются лениво при чтении и периодически через sweep_expired().
    Вытеснение выбирает запись с минимальным числом попаданий (LFU-подобно);
    при равенстве вытесняется самая ранняя по порядку вставки.

    Хранилище не потокобезопасно: рассчитано на один event loop.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        default_ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if capacity < 1:
            raise ValueError(f"Cache capacity must be at least 1, got {capacity}")
        self.capacity = capacity
        self.default_ttl = default_ttl
        self._clock = clock
        self._entries: Dict[str, CacheEntry[Any]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def set(self, key: str, value: Any, ttl: Optional[float] = None) -> None:
        """
        Вставка или перезапись значения.

        Новая запись при заполненном кэше сначала освобождает место.
        Перезапись существующего ключа никогда не вызывает вытеснение
        и сбрасывает счётчик попаданий.
        """
        ttl = self.default_ttl if ttl is None else ttl
        if key in self._entries:
            del self._entries[key]
        elif len(self._entries) >= self.capacity:
            self._make_room()

        self._entries[key] = CacheEntry(value=value, created_at=self._clock(), ttl=ttl)
        logger.debug("Cache set key=%s ttl=%s", key, ttl)
        track_cache_size(len(self._entries))

    def get(self, key: str) -> Optional[Any]:
        """Получение живого значения с увеличением счётчика попаданий."""
        entry = self._live_entry(key)
        if entry is None:
            return None
        entry.hits += 1
        return entry.value

    def has(self, key: str) -> bool:
        """Проверка наличия живой записи без учёта попадания."""
        return self._live_entry(key) is not None

    def delete(self, key: str) -> bool:
        """Удаление ключа (идемпотентно)."""
        removed = self._entries.pop(key, None) is not None
        if removed:
            track_cache_size(len(self._entries))
        return removed

    def delete_prefix(self, prefix: str) -> int:
        """Удаление всех ключей с указанным префиксом."""
        keys = [key for key in self._entries if key.startswith(prefix)]
        for key in keys:
            del self._entries[key]
        if keys:
            track_cache_size(len(self._entries))
        return len(keys)

    def clear(self) -> None:
        """Полная очистка."""
        self._entries.clear()
        track_cache_size(0)

    def sweep_expired(self) -> int:
        """Удаление всех просроченных записей независимо от обращений."""
        removed = self._remove_expired()
        if removed:
            logger.info("Cache sweep removed %d expired entries", removed)
        track_expired("sweep", removed)
        track_cache_size(len(self._entries))
        return removed

    def stats(self) -> CacheStats:
        now = self._clock()
        return CacheStats(
            size=len(self._entries),
            capacity=self.capacity,
            entries=[
                EntryStats(key=key, hits=entry.hits, age=entry.age(now), ttl=entry.ttl)
                for key, entry in self._entries.items()
            ],
        )

    def _live_entry(self, key: str) -> Optional[CacheEntry[Any]]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._entries[key]
            logger.debug("Cache entry expired key=%s", key)
            track_expired("lazy")
            track_cache_size(len(self._entries))
            return None
        return entry

    def _remove_expired(self) -> int:
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
        return len(expired)

    def _make_room(self) -> None:
        # Expired entries are already logically absent, drop them before evicting a live one.
        removed = self._remove_expired()
        track_expired("capacity", removed)
        if len(self._entries) < self.capacity:
            return
        self._evict_least_used()

    def _evict_least_used(self) -> None:
        victim: Optional[str] = None
        least_hits: Optional[int] = None
        for key, entry in self._entries.items():
            if least_hits is None or entry.hits < least_hits:
                victim, least_hits = key, entry.hits
        if victim is not None:
            del self._entries[victim]
            logger.info("Cache evicted key=%s hits=%d", victim, least_hits)
            track_eviction()
