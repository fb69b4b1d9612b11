"""
TTL policy per resource family.
"""
from dataclasses import dataclass, fields
from typing import List, Tuple

# (shorter, longer): the first family must always expire strictly before the second.
TTL_ORDERING: List[Tuple[str, str]] = [
    ("trending", "video_list"),
    ("video_list", "recommendations"),
    ("video_list", "video"),
    ("recommendations", "categories"),
    ("video", "categories"),
]


@dataclass(frozen=True)
class TTLPolicy:
    """Время жизни (секунды) для каждого семейства ресурсов."""

    trending: float = 90.0
    video_list: float = 180.0
    recommendations: float = 600.0
    video: float = 900.0
    categories: float = 1800.0

    def validate_ordering(self) -> None:
        """
        Проверка относительного порядка TTL.

        Raises:
            ValueError: если волатильное семейство живёт не меньше стабильного
        """
        for shorter, longer in TTL_ORDERING:
            if getattr(self, shorter) >= getattr(self, longer):
                raise ValueError(
                    f"TTL for '{shorter}' ({getattr(self, shorter)}s) must be "
                    f"shorter than TTL for '{longer}' ({getattr(self, longer)}s)"
                )

    def as_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}
