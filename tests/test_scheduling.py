"""Tests for tick schedulers."""

import pytest
from gravity_sim.physics.body import Body
from gravity_sim.physics.simulation import Simulation
from gravity_sim.scheduling.base import ScheduledTask
from gravity_sim.scheduling.manual import ManualScheduler
from gravity_sim.scheduling.realtime import RealTimeScheduler


class FakeClock:
    """Clock whose sleep advances time instantly."""

    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds


def test_task_requires_positive_period():
    """Periods must be positive."""
    with pytest.raises(ValueError):
        ScheduledTask(lambda: None, 0.0)


def test_cancelled_task_does_not_run():
    """run() is a no-op after cancel()."""
    calls = []
    task = ScheduledTask(lambda: calls.append(1), 0.1)
    assert task.run()
    task.cancel()
    assert not task.run()
    assert calls == [1]
    assert task.run_count == 1


def test_manual_scheduler_advance():
    """advance(n) fires every pending task n times."""
    scheduler = ManualScheduler()
    a, b = [], []
    scheduler.schedule_interval(lambda: a.append(1), 0.1)
    scheduler.schedule_interval(lambda: b.append(1), 0.2)
    assert scheduler.advance(3) == 6
    assert len(a) == 3 and len(b) == 3


def test_manual_scheduler_self_cancel():
    """A task that cancels itself stops being invoked."""
    scheduler = ManualScheduler()
    calls = []

    def callback():
        calls.append(1)
        if len(calls) == 2:
            task.cancel()

    task = scheduler.schedule_interval(callback, 0.1)
    assert scheduler.advance(10) == 2
    assert scheduler.pending == []


def test_realtime_scheduler_respects_period():
    """Invocations are spaced one period apart on the clock."""
    clock = FakeClock()
    scheduler = RealTimeScheduler(clock=clock, sleep=clock.sleep)
    calls = []
    scheduler.schedule_interval(lambda: calls.append(clock()), 0.5)

    assert scheduler.run(max_ticks=4) == 4
    assert calls == pytest.approx([0.5, 1.0, 1.5, 2.0])


def test_realtime_scheduler_returns_when_cancelled():
    """run() returns once no task is pending."""
    clock = FakeClock()
    scheduler = RealTimeScheduler(clock=clock, sleep=clock.sleep)
    calls = []

    def callback():
        calls.append(1)
        if len(calls) == 3:
            task.cancel()

    task = scheduler.schedule_interval(callback, 0.1)
    assert scheduler.run() == 3


def test_realtime_scheduler_drives_simulation_to_collision():
    """The wall-clock loop ends when the simulation halts on collision."""
    clock = FakeClock()
    scheduler = RealTimeScheduler(clock=clock, sleep=clock.sleep)
    sim = Simulation(scheduler=scheduler)
    sim.add_body(Body(0.0, 0.0, 1.0, "red", (0.0, 0.0)))
    sim.add_body(Body(2.0, 0.0, 1.0, "green", (0.0, 0.0)))
    sim.start()

    invocations = scheduler.run(max_ticks=10000)

    assert not sim.running
    assert invocations == sim.tick_count
    assert clock.now == pytest.approx(sim.tick_count / 60.0)


def test_realtime_scheduler_drops_missed_periods():
    """After a slow callback the cadence resumes instead of bursting."""
    clock = FakeClock()
    scheduler = RealTimeScheduler(clock=clock, sleep=clock.sleep)
    calls = []

    def callback():
        calls.append(clock())
        if len(calls) == 1:
            clock.now += 1.0

    scheduler.schedule_interval(callback, 0.1)
    assert scheduler.run(max_ticks=8) == 8

    gaps = [b - a for a, b in zip(calls, calls[1:])]
    assert gaps[0] == pytest.approx(1.1)
    assert gaps[1:] == pytest.approx([0.1] * 6)


def test_pending_does_not_mutate_tasks():
    """Reading pending leaves the task list alone; prune() drops cancelled tasks."""
    scheduler = ManualScheduler()
    task = scheduler.schedule_interval(lambda: None, 0.1)
    scheduler.schedule_interval(lambda: None, 0.1)
    task.cancel()

    assert len(scheduler.pending) == 1
    assert len(scheduler.tasks) == 2
    scheduler.prune()
    assert scheduler.tasks == scheduler.pending


def test_realtime_scheduler_tracks_due_time_on_task():
    """Each task carries its own next due time; cancelled tasks are dropped."""
    clock = FakeClock()
    scheduler = RealTimeScheduler(clock=clock, sleep=clock.sleep)
    calls = []

    def callback():
        calls.append(1)
        if len(calls) == 2:
            task.cancel()

    task = scheduler.schedule_interval(callback, 0.25)
    assert scheduler.run() == 2
    assert task.next_due == pytest.approx(0.75)
    assert scheduler.tasks == []
