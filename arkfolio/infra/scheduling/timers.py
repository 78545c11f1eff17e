"""
Timer schedulers for the carousel autoplay loop.

``AsyncioTimerScheduler`` runs callbacks on the running event loop.
``VirtualTimerScheduler`` keeps its own millisecond clock that only moves
when ``advance`` is called, so autoplay can be driven tick by tick.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from arkfolio.application.ports import SchedulerPort, TimerHandle
from arkfolio.infra.config.logging_config import get_logger


class _AsyncioHandle(TimerHandle):
    def __init__(self, handle: asyncio.TimerHandle):
        self._handle = handle

    def cancel(self) -> None:
        self._handle.cancel()


class AsyncioTimerScheduler(SchedulerPort):
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        return _AsyncioHandle(self.loop.call_later(delay_ms / 1000.0, callback))

    def now_ms(self) -> float:
        return self.loop.time() * 1000.0


@dataclass(order=True)
class _VirtualTimer(TimerHandle):
    deadline: float
    seq: int
    callback: Callable[[], None] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class VirtualTimerScheduler(SchedulerPort):
    """Deterministic scheduler with a manually advanced clock."""

    def __init__(self, start_ms: float = 0.0):
        self._now = start_ms
        self._queue: List[_VirtualTimer] = []
        self._seq = itertools.count()
        self._log = get_logger("scheduling.virtual")

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle:
        timer = _VirtualTimer(self._now + delay_ms, next(self._seq), callback)
        heapq.heappush(self._queue, timer)
        return timer

    def now_ms(self) -> float:
        return self._now

    @property
    def pending_deadlines(self) -> List[float]:
        return sorted(t.deadline for t in self._queue if not t.cancelled)

    def next_deadline(self) -> Optional[float]:
        deadlines = self.pending_deadlines
        return deadlines[0] if deadlines else None

    def advance(self, ms: float) -> int:
        """
        Move the clock forward, firing every timer that falls due in order.

        Timers scheduled by a firing callback run in the same call if their
        deadline is still within the window.

        Returns:
            int: Number of callbacks fired.
        """
        if ms < 0:
            raise ValueError("Cannot move the clock backwards")

        target = self._now + ms
        fired = 0
        while self._queue and self._queue[0].deadline <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = timer.deadline
            timer.cancelled = True
            timer.callback()
            fired += 1
        self._now = target
        if fired:
            self._log.debug("virtual.advance", now_ms=self._now, fired=fired)
        return fired
