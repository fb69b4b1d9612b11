"""
Pytest configuration and fixtures for catalog gateway tests
"""
import os
from unittest.mock import AsyncMock, MagicMock

import pytest

# Set test environment variables BEFORE any imports
os.environ['BACKEND_API_URL'] = 'http://backend.test'
os.environ['CACHE_PRELOAD_ON_STARTUP'] = 'false'
os.environ['CACHE_SWEEP_INTERVAL'] = '0'
os.environ['LOG_JSON'] = 'false'


class FakeClock:
    """Управляемые монотонные часы для проверки TTL."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    """Изолированный кэш с управляемыми часами."""
    from catalog_gateway.cache.store import CacheStore

    return CacheStore(capacity=100, default_ttl=300, clock=clock)


@pytest.fixture
def policy():
    from catalog_gateway.cache.policy import TTLPolicy

    return TTLPolicy()


@pytest.fixture
def backend():
    """Мок клиента бэкенда: все методы AsyncMock."""
    client = MagicMock()
    for name in (
        "list_videos", "get_trending", "get_recommendations", "get_video",
        "create_video", "update_video", "delete_video", "like_video",
        "list_admin_videos", "list_categories", "get_category",
        "create_category", "update_category", "delete_category",
        "list_admin_categories", "toggle_category",
    ):
        setattr(client, name, AsyncMock())
    return client


@pytest.fixture
def video_cache(store, backend, policy):
    from catalog_gateway.cache.resources import VideoCache

    return VideoCache(store, backend, policy)


@pytest.fixture
def category_cache(store, backend, policy):
    from catalog_gateway.cache.resources import CategoryCache

    return CategoryCache(store, backend, policy)


@pytest.fixture
def test_settings():
    from catalog_gateway.config import Settings

    return Settings(
        BACKEND_API_URL="http://backend.test",
        CACHE_CAPACITY=10,
        CACHE_SWEEP_INTERVAL=0,
        CACHE_PRELOAD_ON_STARTUP=False,
        ENABLE_METRICS=False,
    )
