"""
Periodic background jobs for the cache: expiry sweep and warming.
"""
import asyncio
import inspect
import logging
from typing import Any, Awaitable, Callable, Optional, Union

logger = logging.getLogger(__name__)

Job = Callable[[], Union[Any, Awaitable[Any]]]


class PeriodicTask:
    """
    Фоновая задача, вызывающая job каждые interval секунд.

    Запускается и останавливается владельцем жизненного цикла приложения.
    Ошибка одного запуска логируется и не останавливает цикл.
    """

    def __init__(self, name: str, interval: float, job: Job) -> None:
        if interval <= 0:
            raise ValueError(f"Interval for {name} must be positive, got {interval}")
        self.name = name
        self.interval = interval
        self._job = job
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Запуск цикла в текущем event loop."""
        if self.running:
            return
        self._task = asyncio.create_task(self._loop(), name=f"periodic:{self.name}")
        logger.info("Periodic task %s started (interval=%ss)", self.name, self.interval)

    async def stop(self) -> None:
        """Остановка цикла и ожидание отмены."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.info("Periodic task %s stopped", self.name)

    async def run_once(self) -> Any:
        result = self._job()
        if inspect.isawaitable(result):
            result = await result
        return result

    async def _loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                await self.run_once()
            except Exception as e:
                logger.error("Periodic task %s failed: %s", self.name, e, exc_info=True)
