"""Base scheduler interface for periodic tick callbacks."""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional


class ScheduledTask:
    """A periodic callback registration that can be cancelled.

    Cancellation is cooperative: an invocation already in progress always
    completes, only later invocations are skipped.
    """

    def __init__(self, callback: Callable[[], object], period: float):
        if period <= 0:
            raise ValueError(f"Task period must be positive, got {period}")
        self.callback = callback
        self.period = period
        self.cancelled = False
        self.run_count = 0
        # Clock time of the next invocation, owned by wall-clock schedulers
        self.next_due: Optional[float] = None

    def cancel(self):
        """Stop future invocations."""
        self.cancelled = True

    def run(self) -> bool:
        """Invoke the callback once unless cancelled.

        Returns:
            True if the callback was invoked
        """
        if self.cancelled:
            return False
        self.run_count += 1
        self.callback()
        return True


class Scheduler(ABC):
    """Abstract source of recurring callbacks."""

    def __init__(self):
        self.tasks: List[ScheduledTask] = []

    def schedule_interval(self, callback: Callable[[], object], period: float) -> ScheduledTask:
        """Register ``callback`` to run every ``period`` seconds.

        Args:
            callback: Zero-argument callable
            period: Interval in seconds

        Returns:
            Task handle used for cancellation
        """
        task = ScheduledTask(callback, period)
        self.tasks.append(task)
        return task

    @property
    def pending(self) -> List[ScheduledTask]:
        """Tasks that have not been cancelled."""
        return [task for task in self.tasks if not task.cancelled]

    def prune(self):
        """Forget cancelled tasks."""
        self.tasks = self.pending

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this scheduler."""
        pass
