from __future__ import annotations

from abc import ABC
from collections.abc import Callable
from typing import Concatenate, Final, Self


class Pipeable:
    """Mixin class providing pipeable methods for fluent chaining."""

    __slots__ = ()

    def into[**P, R](
        self,
        func: Callable[Concatenate[Self, P], R],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> R:
        """Convert `Self` to `R`.

        Conceptually, this allow to do `x.into(f)` instead of `f(x)`, hence keeping a fluent chaining style.

        Args:
            func (Callable[Concatenate[Self, P], R]): Function for conversion.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            R: The converted value.

        Example:
        ```python
        >>> import underbar as ub
        >>> ub.as_collection([1, 2, 3]).into(lambda c: ub.reduce(c, lambda a, b: a + b))
        6

        ```
        """
        return func(self, *args, **kwargs)

    def inspect[**P](
        self,
        func: Callable[Concatenate[Self, P], object],
        *args: P.args,
        **kwargs: P.kwargs,
    ) -> Self:
        """Pass `Self` to **func** to perform side effects without altering the data.

        Args:
            func (Callable[Concatenate[Self, P], object]): Function to apply to the instance for side effects.
            *args (P.args): Positional arguments to pass to **func**.
            **kwargs (P.kwargs): Keyword arguments to pass to **func**.

        Returns:
            Self: The instance itself for chaining.

        Example:
        ```python
        >>> import underbar as ub
        >>> ub.as_collection([1, 2]).inspect(print).inner()
        OrderedSequence(1, 2)
        [1, 2]

        ```
        """
        func(self, *args, **kwargs)
        return self


class CommonBase[T](ABC, Pipeable):
    """Base class for all wrappers.

    Holds the wrapped data and gives it back unchanged through `inner()`.

    Args:
        data (T): The underlying data to wrap.
    """

    _inner: T

    __slots__ = ("_inner",)

    def __init__(self, data: T) -> None:
        self._inner = data

    def inner(self) -> T:
        """Get the underlying data.

        Returns:
            T: The underlying data, exactly as it was given.
        """
        return self._inner


class _Omitted:
    """Marker for an argument the caller did not pass."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<omitted>"


OMITTED: Final = _Omitted()
