"""Collection operations, all expressed through `each`."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from ._collection import as_collection, each, is_sequence
from ._core import OMITTED, ContractError, require_callable, strict_equals


def get_property(value: Any, name: Any) -> Any:
    """Read **name** from **value** the way a property lookup would.

    Mappings are read by key, sequences and strings by integer index, anything else by attribute.

    Missing properties read as `None`.
    """
    if isinstance(value, Mapping):
        return value.get(name)
    if isinstance(name, int):
        if is_sequence(value) or isinstance(value, str):
            return value[name] if -len(value) <= name < len(value) else None
        return None
    if isinstance(name, str):
        return getattr(value, name, None)
    return None


def index_of(array: Sequence[Any], target: Any) -> int:
    """Return the index of the first element strictly equal to **target**, or -1.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.index_of([10, 20, 30, 20], 20)
    1
    >>> ub.index_of([1, 2], True)
    -1

    ```
    """
    found = -1

    def _visit(value: Any, index: int) -> None:
        nonlocal found
        if found == -1 and strict_equals(value, target):
            found = index

    each(array, _visit)
    return found


def filter(collection: Any, iterator: Callable[[Any], object]) -> list[Any]:  # noqa: A001
    """Return the elements for which **iterator** is truthy, in traversal order.

    Args:
        collection (Any): A sequence or a mapping (its values are tested).
        iterator (Callable[[Any], object]): Predicate called with each value.

    Returns:
        list[Any]: The passing values.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.filter([1, 2, 3, 4], lambda x: x % 2 == 0)
    [2, 4]
    >>> ub.filter({"a": 1, "b": 2}, lambda x: x > 1)
    [2]

    ```
    """
    require_callable(iterator, "iterator")
    passed: list[Any] = []

    def _visit(value: Any) -> None:
        if iterator(value):
            passed.append(value)

    each(collection, _visit)
    return passed


def reject(collection: Any, iterator: Callable[[Any], object]) -> list[Any]:
    """Return the elements for which **iterator** is falsy.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.reject([1, 2, 3, 4], lambda x: x % 2 == 0)
    [1, 3]

    ```
    """
    require_callable(iterator, "iterator")
    return filter(collection, lambda value: not iterator(value))


def uniq(array: Sequence[Any]) -> list[Any]:
    """Return the first occurrence of each distinct value, in original order.

    Values are compared with `strict_equals`, so unhashable values are fine.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.uniq([1, 2, 1, 3, 2])
    [1, 2, 3]
    >>> ub.uniq([1, True, 1.0, [0], [0]])
    [1, True, [0]]

    ```
    """
    seen: list[Any] = []

    def _visit(value: Any) -> None:
        if index_of(seen, value) == -1:
            seen.append(value)

    each(array, _visit)
    return seen


def map(array: Any, iterator: Callable[[Any], Any]) -> list[Any]:  # noqa: A001
    """Return `iterator(value)` for each element, same length and order.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.map([1, 2, 3], lambda x: x * 10)
    [10, 20, 30]

    ```
    """
    require_callable(iterator, "iterator")
    mapped: list[Any] = []
    each(array, lambda value: mapped.append(iterator(value)))
    return mapped


def pluck(array: Any, property_name: Any) -> list[Any]:
    """Extract **property_name** from every element.

    Example:
    ```python
    >>> import underbar as ub
    >>> people = [{"name": "moe", "age": 30}, {"name": "curly", "age": 50}]
    >>> ub.pluck(people, "age")
    [30, 50]

    ```
    """
    return map(array, lambda value: get_property(value, property_name))


def invoke(
    items: Any, method_or_name: Callable[..., Any] | str, args: Sequence[Any] = ()
) -> list[Any]:
    """Call a method on every element and collect the results.

    A callable is applied with the element as receiver, i.e. `func(item, *args)`.

    A string names a method looked up on each element and called with `*args`.

    Args:
        items (Any): The elements to call on.
        method_or_name (Callable[..., Any] | str): The function, or the method name.
        args (Sequence[Any]): Extra positional arguments for every call.

    Returns:
        list[Any]: The per-element results.

    Raises:
        ContractError: If **method_or_name** is neither callable nor a string.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.invoke(["a", "b"], "upper")
    ['A', 'B']
    >>> ub.invoke([[3, 1, 2]], sorted)
    [[1, 2, 3]]
    >>> ub.invoke(["a-b", "c-d"], "split", ["-"])
    [['a', 'b'], ['c', 'd']]

    ```
    """
    match method_or_name:
        case str():
            return map(items, lambda item: getattr(item, method_or_name)(*args))
        case _ if callable(method_or_name):
            return map(items, lambda item: method_or_name(item, *args))
        case _:
            msg = (
                "method_or_name must be a callable or a method name, "
                f"got {type(method_or_name).__name__}"
            )
            raise ContractError(msg)


def reduce(
    collection: Any, iterator: Callable[[Any, Any], Any], initial: Any = OMITTED
) -> Any:
    """Fold **collection** left to right with `iterator(accumulator, value)`.

    **Warning** ⚠️
        When **initial** is omitted the fold starts from `0`, not from the first element.

    Args:
        collection (Any): A sequence or a mapping.
        iterator (Callable[[Any, Any], Any]): Combines the accumulator with the next value.
        initial (Any): Starting accumulator. Defaults to `0`.

    Returns:
        Any: The final accumulator.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.reduce([1, 2, 3], lambda total, n: total + n)
    6
    >>> ub.reduce(["a", "b"], lambda acc, s: acc + s, "")
    'ab'

    ```
    """
    require_callable(iterator, "iterator")
    accumulator = 0 if initial is OMITTED else initial

    def _visit(value: Any) -> None:
        nonlocal accumulator
        accumulator = iterator(accumulator, value)

    each(collection, _visit)
    return accumulator


def contains(collection: Any, target: Any) -> bool:
    """Return True if any element is strictly equal to **target**.

    Every element is visited, even after a match.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.contains([1, 2, 3], 3)
    True
    >>> ub.contains({"a": 1}, "a")
    False

    ```
    """
    return reduce(
        collection,
        lambda found, value: True if found else strict_equals(value, target),
        False,
    )


def every(collection: Any, iterator: Callable[[Any], object] | None = None) -> bool:
    """Return True if **iterator** is truthy for all elements.

    Without an iterator the answer is always True, whatever the elements.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.every([2, 4], lambda x: x % 2 == 0)
    True
    >>> ub.every([0, None])
    True
    >>> ub.every([], lambda x: False)
    True

    ```
    """
    if iterator is None:
        return True
    require_callable(iterator, "iterator")
    return reduce(
        collection,
        lambda passed, value: passed and bool(iterator(value)),
        True,
    )


def some(collection: Any, iterator: Callable[[Any], object] | None = None) -> bool:
    """Return True if **iterator** is truthy for at least one element.

    The default iterator tests the truthiness of the value itself.

    An empty collection always gives False.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.some([0, 3])
    True
    >>> ub.some([1, 3], lambda x: x % 2 == 0)
    False
    >>> ub.some([], lambda x: True)
    False

    ```
    """
    wrapped = as_collection(collection)
    if len(wrapped) == 0:
        return False
    predicate = bool if iterator is None else iterator
    require_callable(predicate, "iterator")
    return not every(wrapped, lambda value: not predicate(value))
