"""
Async client for the video catalog REST backend (httpx)
"""
import logging
from typing import Any, Dict, Optional

import httpx

from catalog_gateway.client.exceptions import BackendResponseError, BackendUnavailableError

logger = logging.getLogger(__name__)


class BackendClient:
    """Клиент REST API каталога: видео и категории."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        token: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        headers = {"Content-Type": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers=headers,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
    ) -> Any:
        """
        Выполнение запроса к бэкенду.

        Returns:
            Декодированное JSON-тело ответа (None для пустого тела)

        Raises:
            BackendUnavailableError: сетевая ошибка или таймаут
            BackendResponseError: статус ответа вне 2xx
        """
        if params:
            params = {k: v for k, v in params.items() if v is not None}
        try:
            response = await self._client.request(method, path, params=params or None, json=json)
        except httpx.HTTPError as e:
            logger.warning("Backend request failed: %s %s: %s", method, path, e)
            raise BackendUnavailableError(f"Backend unavailable: {e}") from e

        if response.is_error:
            message = _error_message(response)
            logger.warning(
                "Backend returned %d for %s %s: %s", response.status_code, method, path, message
            )
            raise BackendResponseError(message, status_code=response.status_code)

        if not response.content:
            return None
        return response.json()

    # Videos

    async def list_videos(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("GET", "/videos", params=params)

    async def get_trending(self, limit: Optional[int] = None) -> Any:
        return await self._request("GET", "/videos/trending", params={"limit": limit})

    async def get_recommendations(self, video_id: str, limit: Optional[int] = None) -> Any:
        return await self._request(
            "GET", f"/videos/{video_id}/recommendations", params={"limit": limit}
        )

    async def get_video(self, video_id: str) -> Any:
        return await self._request("GET", f"/videos/{video_id}")

    async def create_video(self, data: Dict[str, Any]) -> Any:
        return await self._request("POST", "/videos", json=data)

    async def update_video(self, video_id: str, data: Dict[str, Any]) -> Any:
        return await self._request("PUT", f"/videos/{video_id}", json=data)

    async def delete_video(self, video_id: str) -> Any:
        return await self._request("DELETE", f"/videos/{video_id}")

    async def like_video(self, video_id: str) -> Any:
        return await self._request("POST", f"/videos/{video_id}/like")

    async def list_admin_videos(self, params: Optional[Dict[str, Any]] = None) -> Any:
        return await self._request("GET", "/videos/admin/all", params=params)

    # Categories

    async def list_categories(self) -> Any:
        return await self._request("GET", "/categories")

    async def get_category(self, slug: str) -> Any:
        return await self._request("GET", f"/categories/{slug}")

    async def create_category(self, data: Dict[str, Any]) -> Any:
        return await self._request("POST", "/categories", json=data)

    async def update_category(self, category_id: str, data: Dict[str, Any]) -> Any:
        return await self._request("PUT", f"/categories/{category_id}", json=data)

    async def delete_category(self, category_id: str) -> Any:
        return await self._request("DELETE", f"/categories/{category_id}")

    async def list_admin_categories(self) -> Any:
        return await self._request("GET", "/categories/admin/all")

    async def toggle_category(self, category_id: str) -> Any:
        return await self._request("PATCH", f"/categories/{category_id}/toggle")


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or body)
    return str(body)
