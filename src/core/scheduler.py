"""Fixed-interval step scheduling on asyncio.

Each step runs synchronously to completion before the next sleep, so two
steps never overlap. Only one loop exists per scheduler; starting again
cancels the old one first.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Callable, Optional

from core.errors import InvalidConfiguration

logger = logging.getLogger(__name__)


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class Clock:
    """Sleeps whatever is left of the frame budget since the last tick."""

    def __init__(self, time_func: Callable[[], float] = _monotonic_ms) -> None:
        self.time_func = time_func
        self.last_tick = time_func() or 0

    async def tick(self, fps: float = 0) -> None:
        if fps <= 0:
            return

        end_time = (1.0 / fps) * 1000
        current = self.time_func()
        time_diff = current - self.last_tick
        delay = max(0, (end_time - time_diff) / 1000)

        await asyncio.sleep(delay)
        # Next frame budget starts from the wake-up time
        self.last_tick = self.time_func()


class TickScheduler:
    def __init__(self, step: Callable[[], None], interval_ms: float) -> None:
        if interval_ms <= 0:
            raise InvalidConfiguration(
                f"tick interval must be positive, got {interval_ms!r}"
            )
        self.step = step
        self.interval_ms = interval_ms
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Begin stepping on the running event loop, replacing any prior loop."""
        self.cancel()
        self._task = asyncio.get_running_loop().create_task(
            self._run(), name="tick_scheduler"
        )

    def cancel(self) -> None:
        if self._task is not None:
            self._task.cancel()
            self._task = None

    async def stop(self) -> None:
        task = self._task
        self._task = None
        if task is None:
            return
        if task.done():
            # A failed step already logged its error in _run
            if not task.cancelled():
                task.exception()
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    async def _run(self) -> None:
        clock = Clock()
        fps = 1000.0 / self.interval_ms
        while True:
            await clock.tick(fps)
            try:
                self.step()
            except Exception:
                logger.exception("Tick step failed; stopping scheduler")
                raise


class TrailingThrottle:
    """Collapse bursts of calls into one call after `wait_ms`.

    The first call arms a timer; later calls inside the window only replace
    the arguments. When the timer fires the callback runs once with the
    latest arguments.
    """

    def __init__(self, callback: Callable[..., None], wait_ms: float) -> None:
        self.callback = callback
        self.wait_ms = wait_ms
        self._handle: Optional[asyncio.TimerHandle] = None
        self._args: tuple = ()

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def __call__(self, *args) -> None:
        self._args = args
        if self._handle is None:
            self._handle = asyncio.get_running_loop().call_later(
                self.wait_ms / 1000.0, self._fire
            )

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self) -> None:
        self._handle = None
        self.callback(*self._args)


__all__ = ["Clock", "TickScheduler", "TrailingThrottle"]
