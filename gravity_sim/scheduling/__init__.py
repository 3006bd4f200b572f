"""Schedulers driving periodic simulation ticks."""

from gravity_sim.scheduling.base import Scheduler, ScheduledTask
from gravity_sim.scheduling.manual import ManualScheduler
from gravity_sim.scheduling.realtime import RealTimeScheduler

__all__ = ["Scheduler", "ScheduledTask", "ManualScheduler", "RealTimeScheduler"]
