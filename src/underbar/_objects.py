"""Positional accessors and key copying between mappings."""

from __future__ import annotations

from collections.abc import MutableMapping, Sequence
from typing import Any, overload

import more_itertools as mit

from ._collection import as_collection, each
from ._core import SupportsKeysAndGetItem


@overload
def first[T](array: Sequence[T], n: None = None) -> T | None: ...
@overload
def first[T](array: Sequence[T], n: int) -> list[T]: ...
def first[T](array: Sequence[T], n: int | None = None) -> T | None | list[T]:
    """Return the first element, or a list of the first **n** elements.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.first([5, 4, 3])
    5
    >>> ub.first([5, 4, 3], 2)
    [5, 4]
    >>> ub.first([]) is None
    True

    ```
    """
    values = as_collection(array)
    if n is None:
        return mit.first(values, None)
    return mit.take(n, values)


@overload
def last[T](array: Sequence[T], n: None = None) -> T | None: ...
@overload
def last[T](array: Sequence[T], n: int) -> list[T]: ...
def last[T](array: Sequence[T], n: int | None = None) -> T | None | list[T]:
    """Return the last element, or a list of the last **n** elements.

    Asking for more elements than there are returns them all.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.last([5, 4, 3])
    3
    >>> ub.last([5, 4, 3], 2)
    [4, 3]
    >>> ub.last([5, 4, 3], 10)
    [5, 4, 3]

    ```
    """
    values = as_collection(array)
    if n is None:
        return mit.last(values, None)
    return list(mit.tail(n, values))


def extend[M: MutableMapping[Any, Any]](
    obj: M, *sources: SupportsKeysAndGetItem[Any, Any]
) -> M:
    """Copy every key of every source onto **obj**, later sources winning.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.extend({"a": 1}, {"b": 2}, {"a": 3})
    {'a': 3, 'b': 2}

    ```
    """

    def _copy(source: SupportsKeysAndGetItem[Any, Any]) -> None:
        for key in source.keys():
            obj[key] = source[key]

    each(sources, _copy)
    return obj


def defaults[M: MutableMapping[Any, Any]](
    obj: M, *sources: SupportsKeysAndGetItem[Any, Any]
) -> M:
    """Fill in the keys missing from **obj**, earlier sources winning.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.defaults({"flavor": "chocolate"}, {"flavor": "vanilla", "sprinkles": "lots"})
    {'flavor': 'chocolate', 'sprinkles': 'lots'}

    ```
    """

    def _fill(source: SupportsKeysAndGetItem[Any, Any]) -> None:
        for key in source.keys():
            if key not in obj:
                obj[key] = source[key]

    each(sources, _fill)
    return obj
