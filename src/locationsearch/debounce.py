"""
Debounce helper for the asyncio event loop.

Each call restarts the countdown; the callback runs once, with the arguments
of the most recent call, after ``delay_ms`` without further calls.
"""
from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)


class Debouncer:
    """Coalesce bursts of calls into a single delayed callback."""

    def __init__(self, callback: Callable[..., Any], delay_ms: int,
                 loop: Optional[asyncio.AbstractEventLoop] = None):
        self._callback = callback
        self._delay = max(delay_ms, 0) / 1000.0
        self._loop = loop
        self._handle: Optional[asyncio.TimerHandle] = None
        self._tasks: set = set()

    def __call__(self, *args: Any, **kwargs: Any) -> None:
        if self._handle is not None:
            self._handle.cancel()
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(self._delay, self._fire, args, kwargs)

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def cancel(self) -> None:
        """Drop a scheduled fire, if any."""
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, args, kwargs) -> None:
        self._handle = None
        result = self._callback(*args, **kwargs)
        if inspect.isawaitable(result):
            # Keep a reference until done so the task is not collected mid-flight
            task = asyncio.ensure_future(result)
            self._tasks.add(task)
            task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Future) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error("Debounced callback failed: %s", exc, exc_info=exc)


def debounce(callback: Callable[..., Any], delay_ms: int = 250) -> Debouncer:
    """Return a trigger that forwards to ``callback`` once input goes quiet."""
    return Debouncer(callback, delay_ms)
