"""
Categories API
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response, status

from catalog_gateway.api.dependencies import cached_response, get_category_cache
from catalog_gateway.cache.resources import CategoryCache
from catalog_gateway.schemas.cache import CachedResponse

router = APIRouter()


@router.get("", response_model=CachedResponse)
async def list_categories(
    response: Response,
    categories: CategoryCache = Depends(get_category_cache),
):
    """Список категорий (самый длинный TTL)."""
    result = await categories.get_all()
    return cached_response(result, response)


@router.get("/admin/all")
async def admin_categories(categories: CategoryCache = Depends(get_category_cache)):
    return await categories.get_admin_categories()


@router.get("/{slug}")
async def get_category(slug: str, categories: CategoryCache = Depends(get_category_cache)):
    return await categories.get_by_slug(slug)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_category(
    data: Dict[str, Any] = Body(...),
    categories: CategoryCache = Depends(get_category_cache),
):
    return await categories.create(data)


@router.put("/{category_id}")
async def update_category(
    category_id: str,
    data: Dict[str, Any] = Body(...),
    categories: CategoryCache = Depends(get_category_cache),
):
    return await categories.update(category_id, data)


@router.delete("/{category_id}")
async def delete_category(
    category_id: str,
    categories: CategoryCache = Depends(get_category_cache),
):
    return await categories.delete(category_id)


@router.patch("/{category_id}/toggle")
async def toggle_category(
    category_id: str,
    categories: CategoryCache = Depends(get_category_cache),
):
    return await categories.toggle(category_id)
