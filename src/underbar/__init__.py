from ._algebra import (
    difference,
    flatten,
    intersection,
    shuffle,
    sort_by,
    swap,
    zip,  # noqa: A004
)
from ._collection import (
    Collection,
    KeyedMapping,
    OrderedSequence,
    as_collection,
    each,
    is_sequence,
)
from ._core import (
    Config,
    ContractError,
    Handle,
    Scheduler,
    configure_logging,
    get_config,
    renamed,
    set_config,
    strict_equals,
)
from ._functions import (
    AsyncioScheduler,
    DelayHandle,
    LRUCache,
    ManualScheduler,
    ThreadScheduler,
    delay,
    memoize,
    once,
    resolve_scheduler,
    throttle,
)
from ._objects import defaults, extend, first, last
from ._ops import (
    contains,
    every,
    filter,  # noqa: A004
    get_property,
    index_of,
    invoke,
    map,  # noqa: A004
    pluck,
    reduce,
    reject,
    some,
    uniq,
)

indexOf = renamed(index_of, "indexOf")  # noqa: N816
sortBy = renamed(sort_by, "sortBy")  # noqa: N816

__all__ = [
    "AsyncioScheduler",
    "Collection",
    "Config",
    "ContractError",
    "DelayHandle",
    "Handle",
    "KeyedMapping",
    "LRUCache",
    "ManualScheduler",
    "OrderedSequence",
    "Scheduler",
    "ThreadScheduler",
    "as_collection",
    "configure_logging",
    "contains",
    "defaults",
    "delay",
    "difference",
    "each",
    "every",
    "extend",
    "filter",
    "first",
    "flatten",
    "get_config",
    "get_property",
    "indexOf",
    "index_of",
    "intersection",
    "invoke",
    "is_sequence",
    "last",
    "map",
    "memoize",
    "once",
    "pluck",
    "reduce",
    "reject",
    "resolve_scheduler",
    "set_config",
    "shuffle",
    "some",
    "sortBy",
    "sort_by",
    "strict_equals",
    "swap",
    "throttle",
    "uniq",
    "zip",
]
