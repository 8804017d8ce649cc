from flowengine.core.clock import GameClock
from flowengine.core.scheduler import TickScheduler


def test_call_runs_on_next_tick():
    scheduler = TickScheduler()
    calls = []

    scheduler.call_next_tick(calls.append, "a")
    assert calls == []

    scheduler.tick()
    assert calls == ["a"]

    scheduler.tick()
    assert calls == ["a"]


def test_cancelled_call_never_runs():
    scheduler = TickScheduler()
    calls = []

    call = scheduler.call_next_tick(calls.append, "a")
    call.cancel()
    scheduler.tick()

    assert calls == []
    assert call.cancelled
    assert not call.pending


def test_call_scheduled_during_tick_waits_for_next_tick():
    scheduler = TickScheduler()
    calls = []

    def first():
        calls.append("first")
        scheduler.call_next_tick(calls.append, "second")

    scheduler.call_next_tick(first)
    scheduler.tick()
    assert calls == ["first"]
    assert scheduler.pending == 1

    scheduler.tick()
    assert calls == ["first", "second"]


def test_failing_call_is_logged(caplog):
    scheduler = TickScheduler()
    calls = []

    def broken():
        raise RuntimeError("boom")

    scheduler.call_next_tick(broken)
    scheduler.call_next_tick(calls.append, "after")
    scheduler.tick()

    assert calls == ["after"]
    assert "Error in scheduled call" in caplog.text


def test_clear_cancels_pending():
    scheduler = TickScheduler()
    call = scheduler.call_next_tick(lambda: None)

    scheduler.clear()

    assert call.cancelled
    assert scheduler.pending == 0


def test_clock_pause_and_resume():
    clock = GameClock(time_scale=0.5)

    assert clock.advance(1.0) == 0.5

    clock.pause()
    assert clock.paused
    assert clock.advance(1.0) == 0.0

    clock.resume()
    assert not clock.paused
    assert clock.time_scale == 0.5
    assert clock.frame == 2
    assert clock.real_elapsed == 2.0
    assert clock.elapsed == 0.5


def test_context_tick_runs_scheduler_while_paused(context):
    calls = []
    context.clock.pause()
    context.scheduler.call_next_tick(calls.append, "focus")

    dt = context.tick(0.016)

    assert dt == 0.0
    assert calls == ["focus"]
