from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Protocol, runtime_checkable


class SupportsDunderLT[T](Protocol):
    def __lt__(self, other: T, /) -> bool: ...


class SupportsDunderGT[T](Protocol):
    def __gt__(self, other: T, /) -> bool: ...


class SupportsKeysAndGetItem[K, V](Protocol):
    def keys(self) -> Iterable[K]: ...
    def __getitem__(self, key: K, /) -> V: ...


type SupportsRichComparison[T] = SupportsDunderLT[T] | SupportsDunderGT[T]


# timing


@runtime_checkable
class Handle(Protocol):
    """A pending scheduled callback."""

    def cancel(self) -> None: ...


@runtime_checkable
class Scheduler(Protocol):
    """Timer facility used by `delay` and `throttle`.

    Times are expressed in milliseconds.
    """

    def now(self) -> float: ...
    def schedule(self, callback: Callable[[], Any], delay_ms: float) -> Handle: ...
