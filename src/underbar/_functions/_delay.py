from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from .._core import Handle, Scheduler, get_logger, require_callable, require_wait
from ._schedulers import resolve_scheduler

logger = get_logger(__name__)


@dataclass(slots=True)
class DelayHandle:
    """Cancellation handle returned by `delay`."""

    handle: Handle
    name: str

    def cancel(self) -> None:
        """Prevent the delayed call if it has not run yet."""
        self.handle.cancel()
        logger.debug("delay.cancelled", func=self.name)


def delay(
    func: Callable[..., Any],
    wait_ms: float,
    *args: Any,
    scheduler: Scheduler | None = None,
) -> DelayHandle:
    """Call `func(*args)` once, **wait_ms** milliseconds from now.

    Returns immediately, the eventual return value of **func** is discarded.

    Args:
        func (Callable[..., Any]): The function to call later.
        wait_ms (float): Delay in milliseconds.
        *args (Any): Positional arguments for **func**.
        scheduler (Scheduler | None): Timer facility to use. Defaults to `resolve_scheduler()`.

    Returns:
        DelayHandle: Handle whose `cancel()` drops the pending call.

    Example:
    ```python
    >>> import underbar as ub
    >>> clock = ub.ManualScheduler()
    >>> handle = ub.delay(print, 500, "a", "b", scheduler=clock)
    >>> clock.advance(500)
    a b
    >>> handle = ub.delay(print, 500, "never", scheduler=clock)
    >>> handle.cancel()
    >>> clock.advance(500)

    ```
    """
    require_callable(func, "func")
    require_wait(wait_ms)
    name = getattr(func, "__qualname__", repr(func))

    def _call() -> None:
        func(*args)

    handle = resolve_scheduler(scheduler).schedule(_call, wait_ms)
    logger.debug("delay.scheduled", func=name, wait_ms=wait_ms)
    return DelayHandle(handle, name)
