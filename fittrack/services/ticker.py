"""
Источники тиков для таймеров тренировки.

Сессия тренировки не знает про реальное время: она получает фабрику тикеров
и реагирует на вызовы колбэка. AsyncioTicker тикает раз в интервал на
текущем event loop, ManualTicker - только по команде (тесты, воспроизведение).
"""
import asyncio
import logging
from typing import Callable, Optional, Protocol

from fittrack.core.config import settings

logger = logging.getLogger(__name__)

TickCallback = Callable[[], None]


class Ticker(Protocol):
    @property
    def running(self) -> bool: ...

    def start(self, callback: TickCallback) -> None: ...

    def stop(self) -> None: ...


class AsyncioTicker:
    def __init__(self, interval: float = None):
        self.interval = interval if interval is not None else settings.TICK_INTERVAL_SECONDS
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self, callback: TickCallback) -> None:
        self.stop()
        self._task = asyncio.get_running_loop().create_task(self._run(callback))

    def stop(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def _run(self, callback: TickCallback) -> None:
        loop = asyncio.get_running_loop()
        # Дедлайны по монотонным часам loop, чтобы тики не накапливали дрейф
        deadline = loop.time()
        while True:
            deadline += self.interval
            await asyncio.sleep(max(0.0, deadline - loop.time()))
            try:
                callback()
            except Exception:
                # Ошибка одного тика не останавливает таймер
                logger.exception("Ошибка в обработчике тика")


class ManualTicker:
    def __init__(self):
        self._callback: Optional[TickCallback] = None

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, callback: TickCallback) -> None:
        self._callback = callback

    def stop(self) -> None:
        self._callback = None

    def advance(self, ticks: int = 1) -> None:
        for _ in range(ticks):
            # Колбэк может остановить тикер посреди серии
            if self._callback is None:
                break
            self._callback()
