"""Deferred-callback protocol consumed by :func:`underbar.functional.decorators.delay`."""

from abc import ABC, abstractmethod
from typing import Any, Callable


class Scheduler(ABC):
    """Abstract base class definition for deferred-callback facilities."""

    @abstractmethod
    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> None:
        """Run ``callback(*args)`` once, no sooner than ``delay`` seconds from now.

        Args:
            delay: Lower bound on the wait, in seconds.
            callback: Function to call.
            *args: Positional arguments for ``callback``.
        """
        pass
