"""Iteration kernel: the two collection shapes and the `each` traversal."""

from __future__ import annotations

import inspect
from abc import abstractmethod
from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any, TypeGuard

import cytoolz as cz

from ._core import CommonBase, ContractError, get_config, require_callable

type Iteratee = Callable[..., object]

_MAX_ARGS = 3
_STRINGS = (str, bytes, bytearray)


def is_sequence(data: object) -> TypeGuard[Sequence[Any]]:
    """Return True for ordered sequences, excluding strings and bytes."""
    return isinstance(data, Sequence) and not isinstance(data, _STRINGS)


def _arity(func: Callable[..., object]) -> int | None:
    try:
        params = inspect.signature(func).parameters.values()
    except (TypeError, ValueError):
        return None
    count = 0
    for param in params:
        match param.kind:
            case param.VAR_POSITIONAL:
                return _MAX_ARGS
            case param.POSITIONAL_ONLY | param.POSITIONAL_OR_KEYWORD:
                count += 1
            case _:
                pass
    return min(count, _MAX_ARGS)


def _fit_unknown(iterator: Iteratee) -> Callable[[Any, Any, Any], object]:
    """Call with all three arguments, or with the value alone if that is refused."""

    def _call(value: Any, key: Any, coll: Any) -> object:
        try:
            return iterator(value, key, coll)
        except TypeError:
            return iterator(value)

    return _call


def _fit(iterator: Iteratee) -> Callable[[Any, Any, Any], object]:
    """Adapt **iterator** so it can always be called with (value, key, collection)."""
    match _arity(iterator):
        case None:
            return _fit_unknown(iterator)
        case 0:
            return lambda _value, _key, _coll: iterator()
        case 1:
            return lambda value, _key, _coll: iterator(value)
        case 2:
            return lambda value, key, _coll: iterator(value, key)
        case _:
            return iterator


class Collection[T, K, D](CommonBase[D]):
    """Either shape of collection, exposing a uniform traversal."""

    __slots__ = ()

    @abstractmethod
    def each(self, iterator: Iteratee) -> None:
        """Call `iterator(value, key, collection)` once per element."""

    @abstractmethod
    def __len__(self) -> int: ...

    @abstractmethod
    def __iter__(self) -> Iterator[T]: ...

    @abstractmethod
    def keys(self) -> list[K]: ...


class OrderedSequence[T](Collection[T, int, Sequence[T]]):
    """An integer-indexed sequence, traversed in index order.

    Args:
        data (Sequence[T]): The sequence to wrap.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().iter_repr(self._inner)})"

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self) -> Iterator[T]:
        return iter(self._inner)

    def keys(self) -> list[int]:
        return list(range(len(self._inner)))

    def each(self, iterator: Iteratee) -> None:
        require_callable(iterator, "iterator")
        call = _fit(iterator)
        data = self._inner
        for index in range(len(data)):
            call(data[index], index, data)


class KeyedMapping[K, V](Collection[V, K, Mapping[K, V]]):
    """A key-value mapping, traversed in key insertion order.

    Args:
        data (Mapping[K, V]): The mapping to wrap.
    """

    __slots__ = ()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({get_config().dict_repr(self._inner)})"

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self) -> Iterator[V]:
        return iter(self._inner.values())

    def keys(self) -> list[K]:
        return list(self._inner.keys())

    def each(self, iterator: Iteratee) -> None:
        require_callable(iterator, "iterator")
        call = _fit(iterator)
        data = self._inner
        for key in self.keys():
            call(data[key], key, data)


def as_collection(data: Any) -> OrderedSequence[Any] | KeyedMapping[Any, Any]:
    """Wrap **data** in the collection shape it belongs to.

    Mappings become a `KeyedMapping`, sequences an `OrderedSequence`.
    Any other non-string iterable (a set, a generator) is first materialised into a tuple.

    Args:
        data (Any): The raw collection, or an already wrapped one.

    Returns:
        OrderedSequence[Any] | KeyedMapping[Any, Any]: The wrapped collection.

    Raises:
        ContractError: If **data** is a string, a scalar or `None`.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.as_collection({"a": 1})
    KeyedMapping({'a': 1})
    >>> ub.as_collection(x * 2 for x in range(3))
    OrderedSequence(0, 2, 4)

    ```
    """
    match data:
        case OrderedSequence() | KeyedMapping():
            return data
        case Mapping():
            return KeyedMapping(data)
        case _ if is_sequence(data):
            return OrderedSequence(data)
        case _ if cz.itertoolz.isiterable(data) and not isinstance(data, _STRINGS):
            return OrderedSequence(tuple(data))
        case _:
            msg = f"expected a sequence or a mapping, got {type(data).__name__}"
            raise ContractError(msg)


def each(collection: Any, iterator: Iteratee) -> None:
    """Call `iterator(value, key, collection)` for every element of **collection**.

    Sequences are visited in index order with the integer index as key.

    Mappings are visited in insertion order with the mapping key.

    The iterator may accept fewer than three positional parameters, the extra ones are then not passed.

    Its return value is ignored.

    Args:
        collection (Any): A sequence or a mapping.
        iterator (Iteratee): Callback invoked once per element.

    Example:
    ```python
    >>> import underbar as ub
    >>> ub.each(["a", "b"], lambda value, index: print(index, value))
    0 a
    1 b
    >>> ub.each({"x": 1}, lambda value, key, obj: print(key, value, obj))
    x 1 {'x': 1}

    ```
    """
    as_collection(collection).each(iterator)
