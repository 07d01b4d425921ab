import itertools
from collections.abc import Mapping, Sequence
from pprint import pformat
from typing import Any


def _ellipsis(size: int, max_items: int) -> str:
    return "..." if size > max_items else ""


def dict_repr(
    v: Mapping[Any, Any],
    max_items: int = 20,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    shown = dict(itertools.islice(v.items(), max_items))
    text = pformat(shown, depth=depth, width=width, compact=compact)
    return text + _ellipsis(len(v), max_items)


def iter_repr(v: Sequence[Any], max_items: int = 20, depth: int = 3) -> str:
    shown = [pformat(item, depth=depth, width=10_000) for item in v[:max_items]]
    if len(v) > max_items:
        shown.append(_ellipsis(len(v), max_items))
    return ", ".join(shown)
