"""Deterministic scheduler driven explicitly by the caller."""

from gravity_sim.scheduling.base import Scheduler


class ManualScheduler(Scheduler):
    """Fires scheduled tasks only when :meth:`advance` is called.

    No wall clock is involved, which makes tick sequences reproducible in
    tests and headless runs.
    """

    @property
    def name(self) -> str:
        return "manual"

    def advance(self, n: int = 1) -> int:
        """Fire every pending task ``n`` times.

        Tasks cancelled by a callback are not invoked again, even within the
        same round.

        Args:
            n: Number of periods to advance

        Returns:
            Number of callback invocations performed
        """
        invocations = 0
        for _ in range(n):
            self.prune()
            if not self.tasks:
                break
            for task in list(self.tasks):
                if task.run():
                    invocations += 1
        return invocations
