"""Stateful function decorators.

Each decorator returns a small wrapper object that owns its state outright:
two applications of the same decorator never share anything. Wrappers keep
the wrapped function's name and docstring.

    - :func:`once`: run the function on the first call only
    - :func:`memoize`: run the function once per distinct argument list
    - :func:`delay`: run the function later, without blocking
    - :func:`throttle`: run the function at most once per time window
"""

import functools
import json
import logging
import threading
import time
import typing as tp

from underbar.core.enums import CallState
from underbar.core.types import ABSENT
from underbar.scheduling.protocol import Scheduler
from underbar.scheduling.schedulers import default_scheduler

__all__ = [
    "Once",
    "Memoize",
    "Throttle",
    "once",
    "memoize",
    "delay",
    "throttle",
]

logger = logging.getLogger(__name__)


def _name(fn: tp.Callable[..., tp.Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


class Once:
    """Call-once wrapper.

    Attributes:
        state: NOT_CALLED until the wrapped function has returned once.
        result: Cached return value of that first call.
    """

    def __init__(self, fn: tp.Callable[..., tp.Any]):
        functools.update_wrapper(self, fn)
        self.fn = fn
        self.state = CallState.NOT_CALLED
        self.result: tp.Any = ABSENT
        self._lock = threading.RLock()

    def __call__(self, *args, **kwargs):
        with self._lock:
            # A raising call leaves the wrapper NOT_CALLED
            if self.state is CallState.NOT_CALLED:
                self.result = self.fn(*args, **kwargs)
                self.state = CallState.CALLED
        return self.result


def canonical_key(args: tp.Tuple, kwargs: tp.Dict[str, tp.Any]) -> str:
    """Deterministic serialization of an argument list.

    Keyword arguments are ordered by name. ``1``, ``1.0`` and ``True`` map to
    different keys.

    Raises:
        TypeError: If an argument is not JSON-serializable.
    """
    return json.dumps(
        [list(args), kwargs], sort_keys=True, separators=(",", ":"), allow_nan=True
    )


class Memoize:
    """Argument-keyed result cache. The table is never evicted.

    Attributes:
        cache: Mapping from serialized argument list to result.
    """

    def __init__(self, fn: tp.Callable[..., tp.Any]):
        functools.update_wrapper(self, fn)
        self.fn = fn
        self.cache: tp.Dict[str, tp.Any] = {}
        self._lock = threading.RLock()

    @property
    def cache_size(self) -> int:
        return len(self.cache)

    def __call__(self, *args, **kwargs):
        key = canonical_key(args, kwargs)
        with self._lock:
            if key not in self.cache:
                logger.debug(f"memoize: computing {_name(self.fn)} for {key}")
                self.cache[key] = self.fn(*args, **kwargs)
            return self.cache[key]


class Throttle:
    """Rate limiter that drops calls made too soon after the last allowed one.

    Attributes:
        window: Window length in seconds.
        window_start: Clock reading of the last allowed call, ``ABSENT`` before
            the first one.

    No window is opened when the wrapper is created: the very first call
    always runs, even one made immediately after wrapping, and it anchors the
    first window.
    """

    def __init__(
        self,
        fn: tp.Callable[..., tp.Any],
        window_ms: float,
        clock: tp.Callable[[], float] = time.monotonic,
    ):
        if window_ms < 0:
            raise ValueError(f"Throttle window must be non-negative, got {window_ms}.")

        functools.update_wrapper(self, fn)
        self.fn = fn
        self.window = window_ms / 1000.0
        self.clock = clock
        self.window_start: tp.Any = ABSENT
        self._lock = threading.RLock()

    def __call__(self, *args, **kwargs):
        with self._lock:
            now = self.clock()
            if self.window_start is not ABSENT and now - self.window_start <= self.window:
                logger.debug(f"throttle: dropped call to {_name(self.fn)}")
                return ABSENT
            self.window_start = now
        return self.fn(*args, **kwargs)


def once(fn: tp.Callable[..., tp.Any]) -> Once:
    """Wrap ``fn`` so that it runs on the first call only.

    Later calls return the first call's result without invoking ``fn``.

    Examples:
        >>> counter = []
        >>> init = once(lambda: counter.append(1) or len(counter))
        >>> init(), init(), init()
        (1, 1, 1)
    """
    return Once(fn)


def memoize(fn: tp.Callable[..., tp.Any]) -> Memoize:
    """Cache ``fn`` results per distinct argument list.

    Arguments must be JSON primitives (numbers, strings, booleans, None and
    lists/dicts of those); equal inputs must serialize identically.
    """
    return Memoize(fn)


def delay(
    fn: tp.Callable[..., tp.Any],
    wait_ms: float,
    *args: tp.Any,
    scheduler: tp.Optional[Scheduler] = None,
) -> None:
    """Call ``fn(*args)`` once, after at least ``wait_ms`` milliseconds.

    Returns immediately. The wait is a lower bound and the call cannot be
    cancelled.

    Args:
        fn: Function to call.
        wait_ms: Minimum delay in milliseconds.
        *args: Positional arguments forwarded to ``fn``.
        scheduler: Facility that runs the callback. Defaults to the running
            asyncio loop, or a timer thread when no loop is running.
    """
    if wait_ms < 0:
        raise ValueError(f"Delay must be non-negative, got {wait_ms}.")

    scheduler = scheduler or default_scheduler()
    logger.debug(f"delay: scheduling {fn!r} in {wait_ms}ms on {type(scheduler).__name__}")
    scheduler.call_later(wait_ms / 1000.0, fn, *args)


def throttle(
    fn: tp.Callable[..., tp.Any],
    window_ms: float,
    clock: tp.Callable[[], float] = time.monotonic,
) -> Throttle:
    """Wrap ``fn`` so that it runs at most once per ``window_ms`` milliseconds.

    The first call always runs. A later call runs only if strictly more than
    ``window_ms`` has passed since the last call that ran, and that call opens
    the next window. Calls inside a window are dropped (not queued) and
    return ``ABSENT``.

    Args:
        fn: Function to throttle.
        window_ms: Window length in milliseconds.
        clock: Monotonic clock in seconds. Injectable for tests.
    """
    return Throttle(fn, window_ms, clock=clock)
