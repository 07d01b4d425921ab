from __future__ import annotations

import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import wraps
from typing import Any

from .._core import Scheduler, get_logger, require_callable, require_wait
from ._schedulers import resolve_scheduler

logger = get_logger(__name__)


@dataclass(slots=True)
class _ThrottleState:
    last_call: float | None = None
    waiting: bool = False
    result: Any = None
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)
    lock: threading.RLock = field(default_factory=threading.RLock)


def throttle[**P, R](
    func: Callable[P, R], wait_ms: float, *, scheduler: Scheduler | None = None
) -> Callable[P, R | None]:
    """Wrap **func** so it runs at most once per **wait_ms** window.

    - A call made when **func** has not run for more than **wait_ms** runs it immediately and opens a new window.
    - A call made inside the window schedules one trailing run at the end of the window, unless one is already pending.
    - Further calls inside the window only replace the arguments the trailing run will use.

    Every call returns the most recent result of **func**, which is stale until the trailing run happens.

    Before the first run, that result is `None`.

    The scheduler is fixed when the wrapper is created.

    Args:
        func (Callable[P, R]): The function to throttle.
        wait_ms (float): Window length in milliseconds.
        scheduler (Scheduler | None): Timer facility to use. Defaults to `resolve_scheduler()`.

    Returns:
        Callable[P, R | None]: The throttled wrapper.

    Example:
    ```python
    >>> import underbar as ub
    >>> clock = ub.ManualScheduler()
    >>> calls = []
    >>> tick = ub.throttle(lambda n: calls.append(n) or n, 100, scheduler=clock)
    >>> tick(1), tick(2), tick(3)
    (1, 1, 1)
    >>> clock.advance(100)
    >>> calls
    [1, 3]

    ```
    """
    require_callable(func, "func")
    require_wait(wait_ms)
    clock = resolve_scheduler(scheduler)
    state = _ThrottleState()
    name = getattr(func, "__qualname__", repr(func))

    def _trailing() -> None:
        with state.lock:
            state.waiting = False
            state.last_call = clock.now()
            state.result = func(*state.args, **state.kwargs)
        logger.debug("throttle.fired", func=name, at=state.last_call)

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R | None:
        with state.lock:
            now = clock.now()
            if state.last_call is None or now - state.last_call > wait_ms:
                state.last_call = now
                state.result = func(*args, **kwargs)
                return state.result
            state.args, state.kwargs = args, kwargs
            if not state.waiting:
                state.waiting = True
                remaining = wait_ms - (now - state.last_call)
                clock.schedule(_trailing, remaining)
                logger.debug("throttle.deferred", func=name, remaining_ms=remaining)
            return state.result

    return wrapper
