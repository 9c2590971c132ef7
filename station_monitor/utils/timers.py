"""
Page-scoped timers
- Periodic and one-shot timers feed a single queue
- One consumer (the page's background event) applies every tick, so state
  is only touched from one coroutine
- Leaving the scope cancels and awaits every timer task, whatever the exit path
"""
from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, List, Optional, Set

logger = logging.getLogger(__name__)


class TimerScope:
    """Async context manager owning a group of named timers.

    Usage in a Reflex background event::

        async with TimerScope() as timers:
            timers.every(1.0, "clock")
            timers.every(5.0, "pulse")
            async for name in timers:
                async with self:
                    ...
    """

    # Live timer tasks across all scopes (leak check for tests and logs)
    _live: Set[asyncio.Task] = set()

    def __init__(self, name: str = "timers"):
        self.name = name
        self._queue: Optional[asyncio.Queue] = None
        self._tasks: List[asyncio.Task] = []
        self._closed = False

    async def __aenter__(self) -> "TimerScope":
        self._queue = asyncio.Queue()
        self._closed = False
        logger.debug(f"Timer scope '{self.name}' opened")
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
        return False

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def every(self, interval: float, name: str) -> asyncio.Task:
        """Emit `name` every `interval` seconds until the scope closes."""
        if interval <= 0:
            raise ValueError(f"Timer interval must be positive, got {interval}")
        return self._spawn(self._periodic(interval, name), name)

    def after(self, delay: float, name: str) -> asyncio.Task:
        """Emit `name` once after `delay` seconds unless the scope closes first."""
        return self._spawn(self._once(max(0.0, delay), name), name)

    def _spawn(self, coro, name: str) -> asyncio.Task:
        if self._queue is None or self._closed:
            coro.close()
            raise RuntimeError(f"Timer scope '{self.name}' is not open")
        task = asyncio.create_task(coro, name=f"{self.name}:{name}")
        self._tasks.append(task)
        TimerScope._live.add(task)
        task.add_done_callback(self._forget)
        return task

    def _forget(self, task: asyncio.Task) -> None:
        TimerScope._live.discard(task)
        if task in self._tasks:
            self._tasks.remove(task)

    async def _periodic(self, interval: float, name: str):
        while True:
            await asyncio.sleep(interval)
            self._queue.put_nowait(name)

    async def _once(self, delay: float, name: str):
        await asyncio.sleep(delay)
        self._queue.put_nowait(name)

    # ------------------------------------------------------------------
    # Consumption
    # ------------------------------------------------------------------

    def __aiter__(self) -> AsyncIterator[str]:
        return self._ticks()

    async def _ticks(self) -> AsyncIterator[str]:
        while not self._closed:
            yield await self._queue.get()

    @property
    def active_count(self) -> int:
        return sum(1 for t in self._tasks if not t.done())

    @classmethod
    def live_count(cls) -> int:
        return sum(1 for t in cls._live if not t.done())

    async def close(self) -> None:
        """Cancel every timer of this scope and wait for them to finish."""
        self._closed = True
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._tasks.clear()
        logger.debug(f"Timer scope '{self.name}' closed ({len(tasks)} timers cancelled)")
