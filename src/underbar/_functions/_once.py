from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps

from .._core import require_callable


@dataclass(slots=True)
class _OnceState[R]:
    fired: bool = False
    result: R | None = None


def once[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Wrap **func** so it runs at most one time.

    The first call forwards its arguments and caches the result.

    Every later call returns that result without calling **func**, whatever its arguments.

    If the first call raises, nothing is cached and the next call tries again.

    Args:
        func (Callable[P, R]): The function to wrap.

    Returns:
        Callable[P, R]: The wrapper.

    Example:
    ```python
    >>> import underbar as ub
    >>> init = ub.once(lambda name: f"ready: {name}")
    >>> init("db")
    'ready: db'
    >>> init("cache")
    'ready: db'

    ```
    """
    require_callable(func, "func")
    state: _OnceState[R] = _OnceState()

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        if not state.fired:
            state.result = func(*args, **kwargs)
            state.fired = True
        return state.result  # type: ignore[return-value]

    return wrapper
