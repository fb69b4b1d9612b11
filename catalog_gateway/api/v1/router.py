"""
API v1 Router
"""
from fastapi import APIRouter

from catalog_gateway.api.v1.cache import router as cache_router
from catalog_gateway.api.v1.categories import router as categories_router
from catalog_gateway.api.v1.health import router as health_router
from catalog_gateway.api.v1.videos import router as videos_router

api_router = APIRouter()

# Подключение роутеров
api_router.include_router(health_router, prefix="/health", tags=["Health"])
api_router.include_router(videos_router, prefix="/videos", tags=["Videos"])
api_router.include_router(categories_router, prefix="/categories", tags=["Categories"])
api_router.include_router(cache_router, prefix="/cache", tags=["Cache"])
