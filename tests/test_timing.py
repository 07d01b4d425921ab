"""Tests for delay, throttle and the schedulers."""

import asyncio
import threading

import pytest

import underbar as ub
from tests._spies import CallSpy


class TestManualScheduler:
    def test_fires_in_time_order(self, clock: ub.ManualScheduler) -> None:
        """Test callbacks run by due time, ties in registration order."""
        order: list[str] = []
        clock.schedule(lambda: order.append("late"), 30)
        clock.schedule(lambda: order.append("early"), 10)
        clock.schedule(lambda: order.append("early-2"), 10)
        clock.advance(30)
        assert order == ["early", "early-2", "late"]

    def test_clock_moves_to_due_time(self, clock: ub.ManualScheduler) -> None:
        """Test now() reads the due time inside a callback, the target after."""
        seen: list[float] = []
        clock.schedule(lambda: seen.append(clock.now()), 25)
        clock.advance(40)
        assert seen == [25]
        assert clock.now() == 40

    def test_nested_scheduling(self, clock: ub.ManualScheduler) -> None:
        """Test callbacks scheduled while advancing run if they fall due."""
        order: list[float] = []

        def chain() -> None:
            order.append(clock.now())
            if len(order) < 3:
                clock.schedule(chain, 10)

        clock.schedule(chain, 10)
        clock.advance(25)
        assert order == [10, 20]
        clock.advance(5)
        assert order == [10, 20, 30]

    def test_cancel_and_pending(self, clock: ub.ManualScheduler, spy: CallSpy) -> None:
        """Test cancelled timers are neither pending nor fired."""
        keep = clock.schedule(spy, 5)
        drop = clock.schedule(spy, 1)
        drop.cancel()
        assert clock.pending == [keep]
        clock.advance(10)
        assert spy.count == 1
        assert clock.pending == []


class TestDelay:
    def test_calls_with_arguments_after_wait(
        self, clock: ub.ManualScheduler, spy: CallSpy
    ) -> None:
        """Test the call happens once the wait elapses, with the extra arguments."""
        ub.delay(spy, 500, "a", "b", scheduler=clock)
        clock.advance(499)
        assert spy.count == 0
        clock.advance(1)
        assert spy.calls == [(("a", "b"), {})]

    def test_returns_immediately(self, clock: ub.ManualScheduler) -> None:
        """Test delay returns a handle, not the function's result."""
        handle = ub.delay(lambda: 42, 10, scheduler=clock)
        assert isinstance(handle, ub.DelayHandle)
        assert isinstance(handle, ub.Handle)

    def test_cancel(self, clock: ub.ManualScheduler, spy: CallSpy) -> None:
        """Test a cancelled delay never runs."""
        handle = ub.delay(spy, 100, scheduler=clock)
        handle.cancel()
        clock.advance(1_000)
        assert spy.count == 0

    def test_zero_wait_still_deferred(
        self, clock: ub.ManualScheduler, spy: CallSpy
    ) -> None:
        """Test a zero wait does not call synchronously."""
        ub.delay(spy, 0, scheduler=clock)
        assert spy.count == 0
        clock.advance(0)
        assert spy.count == 1

    def test_contract(self, clock: ub.ManualScheduler) -> None:
        """Test bad arguments fail at the call site."""
        with pytest.raises(ub.ContractError):
            ub.delay("nope", 10, scheduler=clock)  # type: ignore[arg-type]
        with pytest.raises(ub.ContractError, match="non-negative"):
            ub.delay(print, -1, scheduler=clock)

    def test_configured_scheduler(
        self,
        clock: ub.ManualScheduler,
        spy: CallSpy,
        restore_config: ub.Config,  # noqa: ARG002
    ) -> None:
        """Test Config.scheduler is used when none is passed."""
        ub.set_config(scheduler=clock)
        ub.delay(spy, 10)
        clock.advance(10)
        assert spy.count == 1

    def test_thread_scheduler(self) -> None:
        """Test the default scheduler outside an event loop uses timer threads."""
        done = threading.Event()
        assert isinstance(ub.resolve_scheduler(), ub.ThreadScheduler)
        ub.delay(done.set, 5)
        assert done.wait(timeout=2)

    def test_asyncio_scheduler(self) -> None:
        """Test the default scheduler inside an event loop uses call_later."""

        async def main() -> list[str]:
            seen: list[str] = []
            assert isinstance(ub.resolve_scheduler(), ub.AsyncioScheduler)
            ub.delay(seen.append, 5, "fired")
            await asyncio.sleep(0.05)
            return seen

        assert asyncio.run(main()) == ["fired"]


class TestThrottle:
    def test_first_call_immediate(self, clock: ub.ManualScheduler) -> None:
        """Test the first call runs synchronously and returns its result."""
        spy = CallSpy(result="r")
        wrapped = ub.throttle(spy, 100, scheduler=clock)
        assert wrapped() == "r"
        assert spy.count == 1

    def test_second_call_in_window_is_deferred(
        self, clock: ub.ManualScheduler, spy: CallSpy
    ) -> None:
        """Test one immediate call plus exactly one trailing call for the remaining window."""
        wrapped = ub.throttle(spy, 100, scheduler=clock)
        wrapped()
        clock.advance(30)
        wrapped()
        assert spy.count == 1
        assert [timer.due for timer in clock.pending] == [100]
        clock.advance(70)
        assert spy.count == 2

    def test_at_most_one_pending(self, clock: ub.ManualScheduler, spy: CallSpy) -> None:
        """Test a burst inside the window schedules a single trailing call."""
        wrapped = ub.throttle(spy, 100, scheduler=clock)
        for _ in range(10):
            wrapped()
            clock.advance(5)
        assert len(clock.pending) == 1
        clock.advance(100)
        assert spy.count == 2

    def test_never_more_than_two_in_first_window(
        self, clock: ub.ManualScheduler, spy: CallSpy
    ) -> None:
        """Test any call pattern yields at most two runs within 100ms."""
        wrapped = ub.throttle(spy, 100, scheduler=clock)
        for _ in range(100):
            wrapped()
            clock.advance(1)
        assert clock.now() == 100
        assert spy.count <= 2

    def test_trailing_uses_latest_arguments(
        self, clock: ub.ManualScheduler, spy: CallSpy
    ) -> None:
        """Test the trailing run receives the most recent call's arguments."""
        wrapped = ub.throttle(spy, 50, scheduler=clock)
        wrapped(1)
        wrapped(2)
        wrapped(3, flag=True)
        clock.advance(50)
        assert spy.calls == [((1,), {}), ((3,), {"flag": True})]

    def test_suppressed_calls_return_stale_result(
        self, clock: ub.ManualScheduler
    ) -> None:
        """Test suppressed calls return the last computed result until the trailing run."""
        counter = iter(range(100))
        wrapped = ub.throttle(lambda: next(counter), 100, scheduler=clock)
        assert wrapped() == 0
        assert wrapped() == 0
        clock.advance(100)
        assert wrapped() == 1

    def test_new_window_after_wait(self, clock: ub.ManualScheduler, spy: CallSpy) -> None:
        """Test a call after the window has passed runs immediately again."""
        wrapped = ub.throttle(spy, 100, scheduler=clock)
        wrapped()
        clock.advance(101)
        wrapped()
        assert spy.count == 2
        assert clock.pending == []

    def test_trailing_run_restarts_window(
        self, clock: ub.ManualScheduler, spy: CallSpy
    ) -> None:
        """Test the window restarts from the trailing run, not the first call."""
        wrapped = ub.throttle(spy, 100, scheduler=clock)
        wrapped()
        clock.advance(10)
        wrapped()
        clock.advance(90)
        assert spy.count == 2
        clock.advance(50)
        wrapped()
        assert spy.count == 2
        assert [timer.due for timer in clock.pending] == [200]

    def test_wrappers_do_not_share_state(self, clock: ub.ManualScheduler) -> None:
        """Test two throttled wrappers keep independent windows."""
        spy = CallSpy()
        first = ub.throttle(spy, 100, scheduler=clock)
        second = ub.throttle(spy, 100, scheduler=clock)
        first()
        second()
        assert spy.count == 2

    def test_contract(self, clock: ub.ManualScheduler) -> None:
        """Test bad arguments fail when wrapping."""
        with pytest.raises(ub.ContractError):
            ub.throttle(None, 10, scheduler=clock)  # type: ignore[arg-type]
        with pytest.raises(ub.ContractError):
            ub.throttle(print, -5, scheduler=clock)
