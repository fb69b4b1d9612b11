"""
Deterministic cache keys per resource family.
"""
import json
from typing import Any, Mapping, Optional

VIDEOS = "videos"
TRENDING = "trending"
VIDEO = "video"
RECOMMENDATIONS = "rec"
CATEGORIES = "categories"


def serialize_params(params: Optional[Mapping[str, Any]]) -> str:
    """Стабильная сериализация параметров (ключи отсортированы)."""
    return json.dumps(params, sort_keys=True, separators=(",", ":"), default=str)


class CacheKeys:
    """Генераторы ключей: одинаковые запросы всегда дают одинаковый ключ."""

    @staticmethod
    def videos(params: Optional[Mapping[str, Any]] = None) -> str:
        return f"{VIDEOS}:{serialize_params(params)}"

    @staticmethod
    def video(video_id: str) -> str:
        return f"{VIDEO}:{video_id}"

    @staticmethod
    def categories() -> str:
        return CATEGORIES

    @staticmethod
    def trending(limit: int) -> str:
        return f"{TRENDING}:{limit}"

    @staticmethod
    def recommendations(video_id: str, limit: int) -> str:
        return f"{RECOMMENDATIONS}:{video_id}:{limit}"

    @staticmethod
    def family_prefix(family: str) -> str:
        """Префикс для инвалидации всех ключей семейства."""
        return f"{family}:"
