"""Wall-clock scheduler running tasks in a single blocking loop."""

import time
from typing import Callable, Optional
from gravity_sim.scheduling.base import Scheduler


class RealTimeScheduler(Scheduler):
    """Single-threaded timer loop.

    Callbacks run one after another on the calling thread, so they never
    overlap. A slow callback delays the next one instead of stacking up:
    periods missed while it ran are dropped, not replayed.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep
    ):
        """Initialize scheduler.

        Args:
            clock: Monotonic time source in seconds
            sleep: Blocking sleep function
        """
        super().__init__()
        self.clock = clock
        self.sleep = sleep

    @property
    def name(self) -> str:
        return "realtime"

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Run until every task is cancelled or ``max_ticks`` invocations happened.

        Args:
            max_ticks: Optional cap on the total number of invocations

        Returns:
            Number of callback invocations performed
        """
        invocations = 0

        while True:
            self.prune()
            if not self.tasks:
                break
            if max_ticks is not None and invocations >= max_ticks:
                break

            now = self.clock()
            for task in self.tasks:
                if task.next_due is None:
                    task.next_due = now + task.period

            next_task = min(self.tasks, key=lambda t: t.next_due)
            wait = next_task.next_due - now
            if wait > 0:
                self.sleep(wait)

            if next_task.run():
                invocations += 1

            next_task.next_due += next_task.period
            finished = self.clock()
            if next_task.next_due < finished:
                # Overran: re-anchor one period after the late callback returned
                next_task.next_due = finished + next_task.period

        return invocations
