from collections.abc import Hashable
from typing import Any


def strict_equals(left: Any, right: Any) -> bool:
    """Compare two values without coercion.

    Identical objects are always equal, and booleans never equal numbers.

    Example:
    ```python
    >>> from underbar import strict_equals
    >>> strict_equals(1, 1.0)
    True
    >>> strict_equals(True, 1)
    False
    >>> strict_equals("1", 1)
    False

    ```
    """
    if left is right:
        return True
    if isinstance(left, bool) is not isinstance(right, bool):
        return False
    return bool(left == right)


def strict_key(value: Hashable) -> tuple[bool, Hashable]:
    """Hashable key that keeps `strict_equals`-distinct values apart in a dict."""
    return (isinstance(value, bool), value)
