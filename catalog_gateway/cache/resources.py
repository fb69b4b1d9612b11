"""
Cache-aside facades over the backend client, one per resource family.
"""
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Generic, Iterable, Optional, TypeVar

from catalog_gateway.cache import keys
from catalog_gateway.cache.keys import CacheKeys
from catalog_gateway.cache.policy import TTLPolicy
from catalog_gateway.cache.store import CacheStore
from catalog_gateway.client.backend_client import BackendClient
from catalog_gateway.monitoring.metrics import track_cache_lookup, track_invalidation

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TRENDING_LIMIT = 10
DEFAULT_RECOMMENDATIONS_LIMIT = 8


@dataclass
class CachedResult(Generic[T]):
    """Результат чтения через кэш."""

    data: T
    from_cache: bool


class ResourceCache:
    """
    Базовый фасад: чтение через кэш и инвалидация ключей после мутаций.

    Ошибки fetch пробрасываются без изменений и не кэшируются.
    Параллельные промахи по одному ключу не объединяются: каждый вызов
    делает свой запрос, последняя запись побеждает.
    """

    def __init__(self, store: CacheStore, client: BackendClient, policy: TTLPolicy) -> None:
        self.store = store
        self.client = client
        self.policy = policy

    async def _read_through(
        self,
        family: str,
        key: str,
        fetch: Callable[[], Awaitable[T]],
        ttl: float,
    ) -> CachedResult[T]:
        cached = self.store.get(key)
        if cached is not None:
            logger.debug("Cache hit key=%s", key, extra={"cache_key": key})
            track_cache_lookup(family, hit=True)
            return CachedResult(data=cached, from_cache=True)

        logger.debug("Cache miss key=%s", key, extra={"cache_key": key})
        track_cache_lookup(family, hit=False)
        data = await fetch()
        # None means "absent" to the store, an empty body is never cached
        if data is not None:
            self.store.set(key, data, ttl)
        return CachedResult(data=data, from_cache=False)

    def _invalidate(
        self,
        family: str,
        keys_: Iterable[str] = (),
        prefixes: Iterable[str] = (),
    ) -> int:
        removed = 0
        for key in keys_:
            removed += int(self.store.delete(key))
        for prefix in prefixes:
            removed += self.store.delete_prefix(prefix)
        logger.info("Invalidated %d cache keys after %s mutation", removed, family)
        track_invalidation(family, removed)
        return removed


class VideoCache(ResourceCache):
    """Видео: списки, тренды, отдельные записи, рекомендации."""

    async def get_all(self, params: Optional[Dict[str, Any]] = None) -> CachedResult[Any]:
        return await self._read_through(
            keys.VIDEOS,
            CacheKeys.videos(params),
            lambda: self.client.list_videos(params),
            self.policy.video_list,
        )

    async def get_trending(self, limit: Optional[int] = None) -> CachedResult[Any]:
        limit = limit or DEFAULT_TRENDING_LIMIT
        return await self._read_through(
            keys.TRENDING,
            CacheKeys.trending(limit),
            lambda: self.client.get_trending(limit),
            self.policy.trending,
        )

    async def get_by_id(self, video_id: str) -> CachedResult[Any]:
        return await self._read_through(
            keys.VIDEO,
            CacheKeys.video(video_id),
            lambda: self.client.get_video(video_id),
            self.policy.video,
        )

    async def get_recommendations(
        self, video_id: str, limit: Optional[int] = None
    ) -> CachedResult[Any]:
        limit = limit or DEFAULT_RECOMMENDATIONS_LIMIT
        return await self._read_through(
            keys.RECOMMENDATIONS,
            CacheKeys.recommendations(video_id, limit),
            lambda: self.client.get_recommendations(video_id, limit),
            self.policy.recommendations,
        )

    async def like(self, video_id: str) -> Any:
        """Лайк: сбрасывает запись видео и все тренды (лайки влияют на рейтинг)."""
        result = await self.client.like_video(video_id)
        self._invalidate(
            keys.VIDEO,
            keys_=[CacheKeys.video(video_id)],
            prefixes=[CacheKeys.family_prefix(keys.TRENDING)],
        )
        return result

    async def create(self, data: Dict[str, Any]) -> Any:
        result = await self.client.create_video(data)
        self._invalidate(keys.VIDEOS, prefixes=self._listing_prefixes())
        return result

    async def update(self, video_id: str, data: Dict[str, Any]) -> Any:
        result = await self.client.update_video(video_id, data)
        self._invalidate_video(video_id)
        return result

    async def delete(self, video_id: str) -> Any:
        result = await self.client.delete_video(video_id)
        self._invalidate_video(video_id)
        return result

    async def get_admin_videos(self, params: Optional[Dict[str, Any]] = None) -> Any:
        # Admin views are never cached.
        return await self.client.list_admin_videos(params)

    def _invalidate_video(self, video_id: str) -> int:
        return self._invalidate(
            keys.VIDEO,
            keys_=[CacheKeys.video(video_id)],
            prefixes=[
                f"{CacheKeys.family_prefix(keys.RECOMMENDATIONS)}{video_id}:",
                *self._listing_prefixes(),
            ],
        )

    @staticmethod
    def _listing_prefixes():
        return [
            CacheKeys.family_prefix(keys.VIDEOS),
            CacheKeys.family_prefix(keys.TRENDING),
        ]


class CategoryCache(ResourceCache):
    """Категории: справочные данные, меняются редко."""

    async def get_all(self) -> CachedResult[Any]:
        return await self._read_through(
            keys.CATEGORIES,
            CacheKeys.categories(),
            self.client.list_categories,
            self.policy.categories,
        )

    async def create(self, data: Dict[str, Any]) -> Any:
        result = await self.client.create_category(data)
        self._invalidate_categories()
        return result

    async def update(self, category_id: str, data: Dict[str, Any]) -> Any:
        result = await self.client.update_category(category_id, data)
        self._invalidate_categories()
        return result

    async def delete(self, category_id: str) -> Any:
        result = await self.client.delete_category(category_id)
        self._invalidate_categories()
        return result

    async def toggle(self, category_id: str) -> Any:
        result = await self.client.toggle_category(category_id)
        self._invalidate_categories()
        return result

    async def get_by_slug(self, slug: str) -> Any:
        return await self.client.get_category(slug)

    async def get_admin_categories(self) -> Any:
        return await self.client.list_admin_categories()

    def _invalidate_categories(self) -> int:
        return self._invalidate(keys.CATEGORIES, keys_=[CacheKeys.categories()])
