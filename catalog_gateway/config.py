from functools import lru_cache
from typing import List, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from catalog_gateway.cache.policy import TTLPolicy


class Settings(BaseSettings):
    """Настройки приложения"""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    DEBUG: bool = True
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Catalog Gateway"
    VERSION: str = "1.0.0"

    # Backend REST API
    BACKEND_API_URL: str = "http://localhost:5000"
    BACKEND_TIMEOUT: float = 30.0
    BACKEND_API_TOKEN: Optional[str] = None

    # Response cache
    CACHE_CAPACITY: int = Field(default=100, ge=1)
    CACHE_DEFAULT_TTL: float = 300.0  # 5 minutes
    CACHE_SWEEP_INTERVAL: float = 300.0  # 0 disables the sweep task
    CACHE_PRELOAD_ON_STARTUP: bool = True
    CACHE_WARM_INTERVAL: float = 0.0  # 0 disables periodic warming

    # TTL per resource family (seconds)
    CACHE_TTL_TRENDING: float = 90.0
    CACHE_TTL_VIDEO_LIST: float = 180.0
    CACHE_TTL_RECOMMENDATIONS: float = 600.0
    CACHE_TTL_VIDEO: float = 900.0
    CACHE_TTL_CATEGORIES: float = 1800.0

    # Monitoring
    ENABLE_METRICS: bool = True

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    @model_validator(mode="after")
    def _check_ttl_ordering(self) -> "Settings":
        """TTL семейств должны сохранять относительный порядок."""
        self.ttl_policy().validate_ordering()
        return self

    @property
    def backend_base_url(self) -> str:
        """Базовый URL REST API бэкенда"""
        return f"{self.BACKEND_API_URL.rstrip('/')}/api"

    def ttl_policy(self) -> TTLPolicy:
        return TTLPolicy(
            trending=self.CACHE_TTL_TRENDING,
            video_list=self.CACHE_TTL_VIDEO_LIST,
            recommendations=self.CACHE_TTL_RECOMMENDATIONS,
            video=self.CACHE_TTL_VIDEO,
            categories=self.CACHE_TTL_CATEGORIES,
        )


@lru_cache()
def get_settings() -> Settings:
    """Получить настройки (кэшированные)"""
    return Settings()
