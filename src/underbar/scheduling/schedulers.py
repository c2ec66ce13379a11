"""Concrete schedulers backed by asyncio and by threading timers."""

import asyncio
import logging
import threading
from typing import Any, Callable, Optional

from underbar.scheduling.protocol import Scheduler

__all__ = ["AsyncioScheduler", "TimerScheduler", "default_scheduler"]

logger = logging.getLogger(__name__)


def _guarded(callback: Callable[..., Any], *args: Any) -> Callable[[], None]:
    """Wrap a deferred callback so a failure is reported through the package logger.

    There is no caller left to propagate to, so the error is logged once here
    rather than handed on to the thread or event-loop exception hook as well.
    """

    def run() -> None:
        try:
            callback(*args)
        except Exception as e:
            logger.error(f"Deferred call to {callback!r} failed: {e}", exc_info=True)

    return run


class AsyncioScheduler(Scheduler):
    """Schedules callbacks on an asyncio event loop.

    The callback is queued with ``loop.call_later`` and therefore only runs
    once the synchronous work currently executing on the loop has finished.

    Args:
        loop: Event loop to use. Defaults to the loop running in the calling thread.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.loop = loop

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> None:
        loop = self.loop or asyncio.get_running_loop()
        loop.call_later(delay, _guarded(callback, *args))


class TimerScheduler(Scheduler):
    """Schedules callbacks on daemon ``threading.Timer`` threads."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> None:
        timer = threading.Timer(delay, _guarded(callback, *args))
        timer.daemon = True
        timer.start()


def default_scheduler() -> Scheduler:
    """Asyncio scheduler when an event loop is running, threading timer otherwise."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        return TimerScheduler()
    return AsyncioScheduler(loop)
