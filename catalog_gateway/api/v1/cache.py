"""
Cache administration endpoints: stats, clear, sweep, warm
"""
from dataclasses import asdict

from fastapi import APIRouter, Depends, status

from catalog_gateway.api.dependencies import get_runtime, get_store
from catalog_gateway.cache.store import CacheStore
from catalog_gateway.runtime import GatewayRuntime
from catalog_gateway.schemas.cache import CacheStatsResponse, SweepResponse, WarmupResponse

router = APIRouter()


@router.get("/stats", response_model=CacheStatsResponse)
async def cache_stats(store: CacheStore = Depends(get_store)):
    """Размер, ёмкость и статистика по ключам."""
    return asdict(store.stats())


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_cache(store: CacheStore = Depends(get_store)):
    store.clear()


@router.post("/sweep", response_model=SweepResponse)
async def sweep_cache(store: CacheStore = Depends(get_store)):
    removed = store.sweep_expired()
    return SweepResponse(removed=removed, size=len(store))


@router.post("/warm", response_model=WarmupResponse)
async def warm(runtime: GatewayRuntime = Depends(get_runtime)):
    """Прогрев кэша; ошибки отдельных задач попадают в отчёт."""
    report = await runtime.warm()
    return WarmupResponse(
        succeeded=report.succeeded,
        failed=report.failed,
        outcomes=[asdict(o) for o in report.outcomes],
    )
