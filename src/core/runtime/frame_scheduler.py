"""
frame_scheduler.py
------------------
Per-frame callback scheduling driven by the host loop.

Plays the role of a paint signal: callbacks requested now run once on the
next frame and must re-request themselves to keep animating. Callbacks
requested while a frame is running are deferred to the following frame.
"""

import time
from typing import Callable, Dict, Optional

from src.core.debug.debug_logger import DebugLogger


FrameCallback = Callable[[float], None]


def _perf_clock_ms() -> float:
    return time.perf_counter() * 1000.0


class FrameScheduler:
    """One-shot frame callbacks with cancellable integer handles."""

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        """
        Args:
            clock: Millisecond clock. Defaults to time.perf_counter().
        """
        self._clock = clock or _perf_clock_ms
        self._callbacks: Dict[int, FrameCallback] = {}
        self._next_handle = 1

    # ===========================================================
    # Scheduling
    # ===========================================================

    def now_ms(self) -> float:
        """Current time on the scheduler clock."""
        return self._clock()

    def request_frame(self, callback: FrameCallback) -> int:
        """
        Schedule callback for the next frame.

        Returns:
            Handle usable with cancel_frame()
        """
        handle = self._next_handle
        self._next_handle += 1
        self._callbacks[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> bool:
        """Cancel a pending callback. Returns False if it already ran."""
        return self._callbacks.pop(handle, None) is not None

    @property
    def pending_count(self) -> int:
        return len(self._callbacks)

    # ===========================================================
    # Frame Pump
    # ===========================================================

    def run_frame(self, now: Optional[float] = None) -> int:
        """
        Run every callback that was pending when the frame started.

        A callback cancelled by an earlier callback in the same frame is
        skipped.

        Args:
            now: Frame timestamp in ms (defaults to the scheduler clock)

        Returns:
            Number of callbacks executed
        """
        if not self._callbacks:
            return 0

        timestamp = self.now_ms() if now is None else now
        due = list(self._callbacks.keys())
        ran = 0

        for handle in due:
            callback = self._callbacks.pop(handle, None)
            if callback is None:
                continue
            callback(timestamp)
            ran += 1

        DebugLogger.trace(f"Ran {ran} frame callback(s) at {timestamp:.1f}ms", category="timing")
        return ran

    def clear(self):
        """Drop all pending callbacks."""
        self._callbacks.clear()
