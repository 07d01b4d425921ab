"""Multi-sequence and ordering operations."""

from __future__ import annotations

import itertools
import random
from collections.abc import Callable, MutableSequence, Sequence
from typing import Any

from ._collection import as_collection, each, is_sequence
from ._core import ContractError, SupportsRichComparison
from ._ops import contains, get_property, index_of


def _require_mutable(array: object, operation: str) -> None:
    if not isinstance(array, MutableSequence):
        msg = f"{operation} works in place and needs a mutable sequence, got {type(array).__name__}"
        raise ContractError(msg)


def swap[T](array: MutableSequence[T], i: int, j: int) -> MutableSequence[T]:
    """Exchange the items at **i** and **j** in place and return the same list.

    Example:
    ```python
    >>> import underbar as ub
    >>> data = [1, 2, 3]
    >>> ub.swap(data, 0, 2) is data
    True
    >>> data
    [3, 2, 1]

    ```
    """
    _require_mutable(array, "swap")
    array[i], array[j] = array[j], array[i]
    return array


def shuffle[T](
    array: Sequence[T], *, rng: random.Random | None = None, uniform: bool = False
) -> list[T]:
    """Return a shuffled copy of **array**, leaving the input untouched.

    By default each position `i` is swapped with a partner drawn from the whole range `[0, len)`.

    This is not a uniform permutation, some orders come out more often than others.

    Pass `uniform=True` to draw the partner from `[i, len)` instead (Fisher-Yates).

    Args:
        array (Sequence[T]): The values to shuffle.
        rng (random.Random | None): Source of randomness. Defaults to the `random` module.
        uniform (bool): Use the unbiased draw. Defaults to `False`.

    Returns:
        list[T]: A new list holding a permutation of **array**.

    Example:
    ```python
    >>> import random
    >>> import underbar as ub
    >>> data = [1, 2, 3, 4]
    >>> sorted(ub.shuffle(data, rng=random.Random(7)))
    [1, 2, 3, 4]
    >>> data
    [1, 2, 3, 4]

    ```
    """
    source = rng if rng is not None else random
    shuffled = list(as_collection(array))
    size = len(shuffled)
    for i in range(size):
        low = i if uniform else 0
        swap(shuffled, i, source.randrange(low, size))
    return shuffled


def _precedes(left: Any, right: Any) -> bool:
    if left is None:
        return right is not None
    if right is None:
        return False
    return left < right


def sort_by[T](
    collection: MutableSequence[T],
    iterator: Callable[[T], SupportsRichComparison[Any] | None] | str | int,
) -> MutableSequence[T]:
    """Sort **collection** in place by the key **iterator** produces, and return it.

    **iterator** is either a key function or a property name read from each element.

    `None` keys come before any other key.

    This is a selection sort, equal keys are not guaranteed to keep their relative order.

    Args:
        collection (MutableSequence[T]): The list to sort.
        iterator (Callable[[T], SupportsRichComparison[Any] | None] | str | int): The key.

    Returns:
        MutableSequence[T]: **collection** itself.

    Example:
    ```python
    >>> import underbar as ub
    >>> people = [{"name": "curly", "age": 50}, {"name": "moe", "age": 30}]
    >>> ub.pluck(ub.sort_by(people, "age"), "name")
    ['moe', 'curly']
    >>> ub.sort_by([3, None, 1], lambda x: x)
    [None, 1, 3]

    ```
    """
    _require_mutable(collection, "sort_by")
    if callable(iterator):
        key = iterator
    else:
        key = lambda item: get_property(item, iterator)  # noqa: E731

    def _min_index(start: int) -> int:
        best = start
        best_key = key(collection[start])
        for index in range(start + 1, len(collection)):
            candidate = key(collection[index])
            if _precedes(candidate, best_key):
                best, best_key = index, candidate
        return best

    for i in range(len(collection)):
        swap(collection, i, _min_index(i))
    return collection


def zip(*arrays: Sequence[Any]) -> list[list[Any]]:  # noqa: A001
    """Group the items sharing an index across **arrays**.

    Shorter arrays are padded with `None` up to the longest one.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.zip([1, 2, 3], [4, 5])
    [[1, 4], [2, 5], [3, None]]
    >>> ub.zip()
    []

    ```
    """
    columns = [list(as_collection(array)) for array in arrays]
    return [list(row) for row in itertools.zip_longest(*columns, fillvalue=None)]


def flatten(nested: Sequence[Any]) -> list[Any]:
    """Flatten arbitrarily nested sequences, depth first, left to right.

    Strings and mappings are leaves.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.flatten([1, [2, (3, [4])], {"a": [5]}, "xy"])
    [1, 2, 3, 4, {'a': [5]}, 'xy']

    ```
    """
    flat: list[Any] = []

    def _enter(value: Any) -> None:
        if is_sequence(value):
            each(value, _enter)
        else:
            flat.append(value)

    each(nested, _enter)
    return flat


def intersection(*arrays: Sequence[Any]) -> list[Any]:
    """Return the distinct values found in every one of **arrays**.

    Values keep the order in which they first appear in the first array.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.intersection([1, 2, 3], [2, 3, 4], [2, 3, 5])
    [2, 3]
    >>> ub.intersection([1, 1, 2], [1, 2])
    [1, 2]

    ```
    """
    if not arrays:
        return []
    first, *others = arrays
    shared: list[Any] = []
    failed: list[Any] = []

    def _in_all_others(value: Any) -> bool:
        return all(contains(other, value) for other in others)

    def _visit(value: Any) -> None:
        if index_of(shared, value) != -1 or index_of(failed, value) != -1:
            return
        (shared if _in_all_others(value) else failed).append(value)

    each(first, _visit)
    return shared


def difference(array: Sequence[Any], *others: Sequence[Any]) -> list[Any]:
    """Return the items of **array** found in none of **others**.

    Order and duplicates of **array** are kept.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.difference([1, 2, 3, 4], [2, 4])
    [1, 3]
    >>> ub.difference([1, 1, 5, 2], [2], [3])
    [1, 1, 5]

    ```
    """
    kept: list[Any] = []

    def _visit(value: Any) -> None:
        if not any(contains(other, value) for other in others):
            kept.append(value)

    each(array, _visit)
    return kept
