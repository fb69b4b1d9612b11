"""
Health check endpoints
"""
from fastapi import APIRouter, Depends

from catalog_gateway.api.dependencies import get_store
from catalog_gateway.cache.store import CacheStore

router = APIRouter()


@router.get("/")
async def health_check(store: CacheStore = Depends(get_store)):
    """Проверка здоровья приложения"""
    return {
        "success": True,
        "status": "healthy",
        "cache": {"size": len(store), "capacity": store.capacity},
    }
