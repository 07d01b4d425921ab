from __future__ import annotations

from collections import OrderedDict
from collections.abc import Callable, Hashable, MutableMapping
from functools import wraps
from typing import Any

import cytoolz as cz

from .._core import (
    OMITTED,
    ContractError,
    get_config,
    get_logger,
    require_callable,
    strict_key,
)

logger = get_logger(__name__)


class LRUCache[K, V](OrderedDict[K, V]):
    """Mapping holding at most **maxsize** entries, dropping the least recently read first.

    Args:
        maxsize (int): Maximum number of entries.
    """

    def __init__(self, maxsize: int) -> None:
        super().__init__()
        self.maxsize = maxsize

    def __getitem__(self, key: K) -> V:
        value = super().__getitem__(key)
        self.move_to_end(key)
        return value

    def __setitem__(self, key: K, value: V) -> None:
        super().__setitem__(key, value)
        self.move_to_end(key)
        while len(self) > self.maxsize:
            evicted, _ = self.popitem(last=False)
            logger.debug("memoize.evicted", key=repr(evicted), maxsize=self.maxsize)


def _memo_key(args: tuple[Any, ...], kwargs: dict[str, Any]) -> Hashable:  # noqa: ARG001
    return strict_key(args[0])


def _new_cache(maxsize: int | None) -> MutableMapping[Hashable, Any]:
    if maxsize is None:
        return {}
    if maxsize <= 0:
        msg = f"maxsize must be a positive integer or None, got {maxsize!r}"
        raise ValueError(msg)
    return LRUCache(maxsize)


def memoize[A: Hashable, R](
    func: Callable[[A], R], *, maxsize: int | None = OMITTED  # type: ignore[assignment]
) -> Callable[[A], R]:
    """Cache the results of a single-argument function by argument.

    The first call with a given argument runs **func** and stores the result, even `None`.

    Later calls with a strictly equal argument return the stored result.

    The cache never evicts unless **maxsize** is set, then the least recently used entry goes first.

    The cache is reachable as `wrapper.cache`.

    Args:
        func (Callable[[A], R]): Function taking exactly one hashable argument.
        maxsize (int | None): Bound on the number of cached results. Defaults to `Config.memoize_maxsize`.

    Returns:
        Callable[[A], R]: The caching wrapper.

    Raises:
        ContractError: When the wrapper is called with an unhashable argument.

    Example:
    ```python
    >>> import underbar as ub
    >>> calls = []
    >>> square = ub.memoize(lambda n: calls.append(n) or n * n)
    >>> square(4), square(4), square(True)
    (16, 16, 1)
    >>> calls
    [4, True]

    ```
    """
    require_callable(func, "func")
    bound = get_config().memoize_maxsize if maxsize is OMITTED else maxsize
    cache = _new_cache(bound)
    memoized = cz.functoolz.memoize(func, cache=cache, key=_memo_key)

    @wraps(func)
    def wrapper(argument: A) -> R:
        try:
            hash(argument)
        except TypeError as err:
            msg = f"memoize needs a hashable argument, got {type(argument).__name__}"
            raise ContractError(msg) from err
        return memoized(argument)

    wrapper.cache = cache  # type: ignore[attr-defined]
    return wrapper
