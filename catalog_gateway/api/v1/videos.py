"""
Videos API: cached reads and invalidating mutations
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Response, status

from catalog_gateway.api.dependencies import cached_response, get_video_cache, query_params
from catalog_gateway.cache.resources import VideoCache
from catalog_gateway.schemas.cache import CachedResponse

router = APIRouter()


@router.get("", response_model=CachedResponse)
async def list_videos(
    response: Response,
    params: Dict[str, Any] = Depends(query_params),
    videos: VideoCache = Depends(get_video_cache),
):
    """Список видео (параметры запроса передаются бэкенду как есть)."""
    result = await videos.get_all(params or None)
    return cached_response(result, response)


@router.get("/trending", response_model=CachedResponse)
async def trending_videos(
    response: Response,
    limit: Optional[int] = Query(None, ge=1, le=100),
    videos: VideoCache = Depends(get_video_cache),
):
    """Популярные видео."""
    result = await videos.get_trending(limit)
    return cached_response(result, response)


@router.get("/admin/all")
async def admin_videos(
    params: Dict[str, Any] = Depends(query_params),
    videos: VideoCache = Depends(get_video_cache),
):
    """Админский список (без кэша)."""
    return await videos.get_admin_videos(params or None)


@router.get("/{video_id}", response_model=CachedResponse)
async def get_video(
    video_id: str,
    response: Response,
    videos: VideoCache = Depends(get_video_cache),
):
    result = await videos.get_by_id(video_id)
    return cached_response(result, response)


@router.get("/{video_id}/recommendations", response_model=CachedResponse)
async def video_recommendations(
    video_id: str,
    response: Response,
    limit: Optional[int] = Query(None, ge=1, le=100),
    videos: VideoCache = Depends(get_video_cache),
):
    result = await videos.get_recommendations(video_id, limit)
    return cached_response(result, response)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_video(
    data: Dict[str, Any] = Body(...),
    videos: VideoCache = Depends(get_video_cache),
):
    return await videos.create(data)


@router.put("/{video_id}")
async def update_video(
    video_id: str,
    data: Dict[str, Any] = Body(...),
    videos: VideoCache = Depends(get_video_cache),
):
    return await videos.update(video_id, data)


@router.delete("/{video_id}")
async def delete_video(
    video_id: str,
    videos: VideoCache = Depends(get_video_cache),
):
    return await videos.delete(video_id)


@router.post("/{video_id}/like")
async def like_video(
    video_id: str,
    videos: VideoCache = Depends(get_video_cache),
):
    """Лайк видео: после успешного ответа бэкенда сбрасывает связанные ключи."""
    return await videos.like(video_id)
