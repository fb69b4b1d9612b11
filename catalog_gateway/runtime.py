"""
Composition root: builds the cache store, backend client and facades,
and owns the lifecycle of the background jobs.
"""
import logging
from typing import List, Optional

import httpx

from catalog_gateway.cache.resources import CategoryCache, VideoCache
from catalog_gateway.cache.scheduler import PeriodicTask
from catalog_gateway.cache.store import CacheStore
from catalog_gateway.cache.warmup import WarmupReport, preload_critical_data, warm_cache
from catalog_gateway.client.backend_client import BackendClient
from catalog_gateway.config import Settings

logger = logging.getLogger(__name__)


class GatewayRuntime:
    """Контейнер зависимостей шлюза: один кэш на процесс, без глобального состояния."""

    def __init__(
        self,
        settings: Settings,
        store: CacheStore,
        client: BackendClient,
    ) -> None:
        self.settings = settings
        self.store = store
        self.client = client
        policy = settings.ttl_policy()
        self.videos = VideoCache(store, client, policy)
        self.categories = CategoryCache(store, client, policy)
        self.jobs: List[PeriodicTask] = []

        if settings.CACHE_SWEEP_INTERVAL > 0:
            self.jobs.append(
                PeriodicTask("cache-sweep", settings.CACHE_SWEEP_INTERVAL, store.sweep_expired)
            )
        if settings.CACHE_WARM_INTERVAL > 0:
            self.jobs.append(
                PeriodicTask("cache-warm", settings.CACHE_WARM_INTERVAL, self.warm)
            )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "GatewayRuntime":
        store = CacheStore(
            capacity=settings.CACHE_CAPACITY,
            default_ttl=settings.CACHE_DEFAULT_TTL,
        )
        client = BackendClient(
            base_url=settings.backend_base_url,
            timeout=settings.BACKEND_TIMEOUT,
            token=settings.BACKEND_API_TOKEN,
            transport=transport,
        )
        return cls(settings, store, client)

    async def start(self) -> None:
        """Запуск фоновых задач и предзагрузка критичных данных."""
        for job in self.jobs:
            job.start()
        if self.settings.CACHE_PRELOAD_ON_STARTUP:
            await self.preload()

    async def stop(self) -> None:
        for job in self.jobs:
            await job.stop()
        await self.client.close()
        self.store.clear()

    async def preload(self) -> WarmupReport:
        return await preload_critical_data(self.videos, self.categories)

    async def warm(self) -> WarmupReport:
        return await warm_cache(self.videos, self.categories)
