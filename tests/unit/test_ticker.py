"""
Модульные тесты для источников тиков.

- ManualTicker: тики только по advance, остановка из колбэка
- AsyncioTicker: тикает на event loop и перестаёт после stop
- AsyncioTicker: исключение в колбэке логируется, тики продолжаются
"""

import asyncio
import logging

import pytest

from fittrack.services.ticker import AsyncioTicker, ManualTicker

pytestmark = pytest.mark.unit


def test_manual_ticker_fires_only_on_advance():
    ticks = []
    ticker = ManualTicker()
    ticker.advance(3)
    assert ticks == []

    ticker.start(lambda: ticks.append(1))
    ticker.advance(3)
    assert len(ticks) == 3


def test_manual_ticker_stopped_by_callback():
    ticker = ManualTicker()
    ticks = []

    def on_tick():
        ticks.append(1)
        if len(ticks) == 2:
            ticker.stop()

    ticker.start(on_tick)
    ticker.advance(10)

    assert len(ticks) == 2
    assert ticker.running is False


@pytest.mark.asyncio
async def test_asyncio_ticker_ticks_until_stopped():
    ticks = []
    ticker = AsyncioTicker(interval=0.01)

    ticker.start(lambda: ticks.append(1))
    assert ticker.running is True
    await asyncio.sleep(0.1)
    ticker.stop()
    count = len(ticks)
    await asyncio.sleep(0.05)

    assert count >= 3
    assert len(ticks) == count
    assert ticker.running is False


@pytest.mark.asyncio
async def test_asyncio_ticker_restart_replaces_task():
    first, second = [], []
    ticker = AsyncioTicker(interval=0.01)

    ticker.start(lambda: first.append(1))
    ticker.start(lambda: second.append(1))
    await asyncio.sleep(0.05)
    ticker.stop()

    assert first == []
    assert len(second) >= 1


@pytest.mark.asyncio
async def test_asyncio_ticker_survives_failing_callback(caplog):
    ticks = []
    ticker = AsyncioTicker(interval=0.01)

    def on_tick():
        ticks.append(1)
        if len(ticks) == 1:
            raise RuntimeError("listener failed")

    with caplog.at_level(logging.ERROR, logger="fittrack.services.ticker"):
        ticker.start(on_tick)
        await asyncio.sleep(0.1)
        assert ticker.running is True
        ticker.stop()

    assert len(ticks) >= 2
    assert "Ошибка в обработчике тика" in caplog.text
