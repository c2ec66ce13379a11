"""Deferred-callback scheduling."""

from underbar.scheduling.protocol import Scheduler
from underbar.scheduling.schedulers import (
    AsyncioScheduler,
    TimerScheduler,
    default_scheduler,
)

__all__ = [
    "Scheduler",
    "AsyncioScheduler",
    "TimerScheduler",
    "default_scheduler",
]
