from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from ._format import dict_repr, iter_repr

if TYPE_CHECKING:
    from ._protocols import Scheduler


@dataclass(slots=True, frozen=True)
class Config:
    """Process-wide settings read by the wrappers and the decorators.

    Attributes:
        max_items (int): Items shown by collection reprs before eliding.
        depth (int): Nesting depth shown by collection reprs.
        width (int): Line width used when formatting mappings.
        memoize_maxsize (int | None): Default bound of `memoize` caches, `None` for unbounded.
        scheduler (Scheduler | None): Scheduler used by `delay` and `throttle` when none is passed.
    """

    max_items: int = 20
    depth: int = 3
    width: int = 80
    memoize_maxsize: int | None = None
    scheduler: Scheduler | None = None

    def dict_repr(self, v: Mapping[Any, Any]) -> str:
        return dict_repr(v, self.max_items, self.depth, self.width)

    def iter_repr(self, v: Sequence[Any]) -> str:
        return iter_repr(v, self.max_items, self.depth)


_CONFIG = Config()


def get_config() -> Config:
    """Return the active `Config`."""
    return _CONFIG


def set_config(**changes: Any) -> Config:
    """Replace fields of the active `Config` and return the new one.

    Args:
        **changes (Any): Field names and their new values.

    Returns:
        Config: The configuration now in effect.

    Raises:
        TypeError: If a name is not a `Config` field.

    Example:
    ```python
    >>> import underbar as ub
    >>> previous = ub.get_config()
    >>> ub.set_config(max_items=2).max_items
    2
    >>> ub.as_collection([1, 2, 3])
    OrderedSequence(1, 2, ...)
    >>> ub.set_config(max_items=previous.max_items).max_items
    20

    ```
    """
    global _CONFIG  # noqa: PLW0603
    known = {field.name for field in fields(Config)}
    unknown = changes.keys() - known
    if unknown:
        msg = f"unknown config field(s): {', '.join(sorted(unknown))}"
        raise TypeError(msg)
    _CONFIG = replace(_CONFIG, **changes)
    return _CONFIG
