"""
Best-effort cache warming: concurrent read-throughs for hot resources.
"""
import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Dict, List, Optional

from catalog_gateway.cache.resources import CategoryCache, VideoCache

logger = logging.getLogger(__name__)

FIRST_PAGE_PARAMS = {"page": 1, "limit": 16}
PRELOAD_TRENDING_LIMIT = 8


@dataclass
class WarmupOutcome:
    name: str
    success: bool
    from_cache: bool = False
    error: Optional[str] = None


@dataclass
class WarmupReport:
    """Итог прогрева: результат по каждой задаче."""

    outcomes: List[WarmupOutcome] = field(default_factory=list)

    @property
    def succeeded(self) -> int:
        return sum(1 for o in self.outcomes if o.success)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.success)


async def run_warmup(tasks: Dict[str, Awaitable[Any]]) -> WarmupReport:
    """
    Запуск задач прогрева с семантикой all-settled.

    Ошибка одной задачи не отменяет остальные и не пробрасывается:
    она логируется и попадает в отчёт.
    """
    names = list(tasks)
    results = await asyncio.gather(*tasks.values(), return_exceptions=True)

    report = WarmupReport()
    for name, result in zip(names, results):
        if isinstance(result, asyncio.CancelledError):
            raise result
        if isinstance(result, Exception):
            logger.warning("Cache warmup task %s failed: %s", name, result)
            report.outcomes.append(WarmupOutcome(name=name, success=False, error=str(result)))
        else:
            report.outcomes.append(
                WarmupOutcome(
                    name=name,
                    success=True,
                    from_cache=bool(getattr(result, "from_cache", False)),
                )
            )

    logger.info(
        "Cache warmup finished: %d succeeded, %d failed", report.succeeded, report.failed
    )
    return report


async def preload_critical_data(videos: VideoCache, categories: CategoryCache) -> WarmupReport:
    """Предзагрузка критичных данных: категории и тренды."""
    return await run_warmup({
        "categories": categories.get_all(),
        "trending": videos.get_trending(PRELOAD_TRENDING_LIMIT),
    })


async def warm_cache(videos: VideoCache, categories: CategoryCache) -> WarmupReport:
    """Фоновый прогрев: категории, тренды и первая страница видео."""
    return await run_warmup({
        "categories": categories.get_all(),
        "trending": videos.get_trending(PRELOAD_TRENDING_LIMIT),
        "videos": videos.get_all(dict(FIRST_PAGE_PARAMS)),
    })
