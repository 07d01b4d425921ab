from __future__ import annotations

import asyncio
import heapq
import itertools
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .._core import Handle, Scheduler, get_config, get_logger

logger = get_logger(__name__)

_MS = 1000.0


class ThreadScheduler:
    """Run callbacks on `threading.Timer` threads, against `time.monotonic`.

    A callback that raises is logged and does not take the timer thread down with a traceback on stderr.
    """

    __slots__ = ()

    def now(self) -> float:
        return time.monotonic() * _MS

    def schedule(self, callback: Callable[[], Any], delay_ms: float) -> Handle:
        def _run() -> None:
            try:
                callback()
            except Exception:
                logger.exception("scheduler.callback_failed", callback=repr(callback))

        timer = threading.Timer(max(delay_ms, 0.0) / _MS, _run)
        timer.daemon = True
        timer.start()
        return timer


class AsyncioScheduler:
    """Run callbacks on an asyncio event loop with `loop.call_later`.

    Without an explicit loop, the loop running at call time is used.

    Failures in callbacks go to the loop's exception handler.

    Args:
        loop (asyncio.AbstractEventLoop | None): The loop to schedule on.
    """

    __slots__ = ("_loop",)

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def _resolve(self) -> asyncio.AbstractEventLoop:
        return self._loop if self._loop is not None else asyncio.get_running_loop()

    def now(self) -> float:
        return self._resolve().time() * _MS

    def schedule(self, callback: Callable[[], Any], delay_ms: float) -> Handle:
        return self._resolve().call_later(max(delay_ms, 0.0) / _MS, callback)


@dataclass(slots=True, order=True)
class ManualTimer:
    """A callback registered on a `ManualScheduler`."""

    due: float
    seq: int
    callback: Callable[[], Any] = field(compare=False)
    cancelled: bool = field(default=False, compare=False)

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Virtual clock: nothing runs until `advance` moves time forward.

    Due callbacks fire in scheduled time order, ties in registration order.

    Callbacks scheduled while advancing fire in the same call if they fall due before its end.

    Exceptions raised by a callback propagate out of `advance`.

    Args:
        start (float): Initial clock value, in milliseconds.

    Example:
    ```python
    >>> import underbar as ub
    >>> clock = ub.ManualScheduler()
    >>> handle = ub.delay(print, 100, "done", scheduler=clock)
    >>> clock.advance(99)
    >>> clock.advance(1)
    done

    ```
    """

    __slots__ = ("_now", "_queue", "_seq")

    def __init__(self, start: float = 0.0) -> None:
        self._now = start
        self._queue: list[ManualTimer] = []
        self._seq = itertools.count()

    def now(self) -> float:
        return self._now

    def schedule(self, callback: Callable[[], Any], delay_ms: float) -> ManualTimer:
        timer = ManualTimer(self._now + max(delay_ms, 0.0), next(self._seq), callback)
        heapq.heappush(self._queue, timer)
        return timer

    @property
    def pending(self) -> list[ManualTimer]:
        """The timers still waiting to fire, earliest first."""
        return sorted(timer for timer in self._queue if not timer.cancelled)

    def advance(self, ms: float) -> None:
        """Move the clock forward by **ms** and fire every callback falling due."""
        target = self._now + ms
        fired = 0
        while self._queue and self._queue[0].due <= target:
            timer = heapq.heappop(self._queue)
            if timer.cancelled:
                continue
            self._now = timer.due
            fired += 1
            timer.callback()
        self._now = target
        logger.debug("scheduler.advanced", now=target, fired=fired)


_THREADS = ThreadScheduler()


def resolve_scheduler(scheduler: Scheduler | None = None) -> Scheduler:
    """Pick the scheduler for a decorator call.

    An explicit scheduler wins, then `Config.scheduler`, then the running asyncio loop, then timer threads.
    """
    if scheduler is not None:
        return scheduler
    configured = get_config().scheduler
    if configured is not None:
        return configured
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return _THREADS
    return AsyncioScheduler(loop)
