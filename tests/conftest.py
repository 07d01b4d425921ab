"""Shared fixtures for the underbar test suite."""

from collections.abc import Iterator

import pytest

import underbar as ub
from tests._spies import CallSpy


@pytest.fixture
def clock() -> ub.ManualScheduler:
    """Virtual clock starting at 0ms."""
    return ub.ManualScheduler()


@pytest.fixture
def restore_config() -> Iterator[ub.Config]:
    """Give back the configuration a test started with."""
    previous = ub.get_config()
    yield previous
    ub.set_config(
        max_items=previous.max_items,
        depth=previous.depth,
        width=previous.width,
        memoize_maxsize=previous.memoize_maxsize,
        scheduler=previous.scheduler,
    )


@pytest.fixture
def spy() -> CallSpy:
    """A call-counting spy returning `None`."""
    return CallSpy()
