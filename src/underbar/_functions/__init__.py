from ._delay import DelayHandle, delay
from ._memoize import LRUCache, memoize
from ._once import once
from ._schedulers import (
    AsyncioScheduler,
    ManualScheduler,
    ManualTimer,
    ThreadScheduler,
    resolve_scheduler,
)
from ._throttle import throttle

__all__ = [
    "AsyncioScheduler",
    "DelayHandle",
    "LRUCache",
    "ManualScheduler",
    "ManualTimer",
    "ThreadScheduler",
    "delay",
    "memoize",
    "once",
    "resolve_scheduler",
    "throttle",
]
