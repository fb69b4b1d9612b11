"""
FastAPI dependencies: resolve cache facades from the application runtime.
"""
from typing import Any, Dict

from fastapi import Depends, Request, Response

from catalog_gateway.cache.resources import CachedResult, CategoryCache, VideoCache
from catalog_gateway.cache.store import CacheStore
from catalog_gateway.runtime import GatewayRuntime
from catalog_gateway.schemas.cache import CachedResponse


def get_runtime(request: Request) -> GatewayRuntime:
    return request.app.state.runtime


def get_store(runtime: GatewayRuntime = Depends(get_runtime)) -> CacheStore:
    return runtime.store


def get_video_cache(runtime: GatewayRuntime = Depends(get_runtime)) -> VideoCache:
    return runtime.videos


def get_category_cache(runtime: GatewayRuntime = Depends(get_runtime)) -> CategoryCache:
    return runtime.categories


def query_params(request: Request) -> Dict[str, Any]:
    """
    Параметры запроса; целые числа приводятся к int, чтобы ключи кэша совпадали.

    Повторяющиеся параметры (?tag=a&tag=b) собираются в список.
    """
    params: Dict[str, Any] = {}
    for name, value in request.query_params.multi_items():
        # ASCII digits only: str.isdigit() also accepts "²", which int() rejects
        value = int(value) if value.isascii() and value.isdigit() else value
        if name not in params:
            params[name] = value
        elif isinstance(params[name], list):
            params[name].append(value)
        else:
            params[name] = [params[name], value]
    return params


def cached_response(result: CachedResult, response: Response) -> CachedResponse:
    response.headers["X-Cache"] = "HIT" if result.from_cache else "MISS"
    return CachedResponse(data=result.data, from_cache=result.from_cache)
