from typing import Any


class ContractError(TypeError):
    """An argument breaks the calling contract of an operation."""


def require_callable(value: Any, name: str) -> None:
    if not callable(value):
        msg = f"{name} must be callable, got {type(value).__name__}"
        raise ContractError(msg)


def require_wait(wait_ms: float) -> None:
    if wait_ms < 0:
        msg = f"wait must be non-negative, got {wait_ms!r}"
        raise ContractError(msg)
