"""
Deadline timer used to bound waits while talking to the serial port.
"""

import time
from typing import Optional


class SerialTimer:
    """One-shot restartable countdown.

    A new timer is idle and not timed out. ``start()`` clears the timed out
    flag and begins a countdown; once the duration passes without another
    ``start()``, ``timedout`` stays True until the next ``start()``.
    """

    def __init__(self, clock=time.monotonic):
        self._clock = clock
        self._deadline: Optional[float] = None

    def start(self, timeout_ms: float) -> None:
        """Reset the timer and start a countdown of ``timeout_ms`` milliseconds."""
        self._deadline = self._clock() + max(timeout_ms, 0) / 1000.0

    @property
    def timedout(self) -> bool:
        if self._deadline is None:
            return False
        return self._clock() >= self._deadline

    def elapsed(self) -> bool:
        """Non-blocking query: True once the current countdown has run down."""
        return self.timedout

    def remaining(self) -> float:
        """Seconds left on the countdown (0 when idle or timed out)."""
        if self._deadline is None:
            return 0.0
        return max(self._deadline - self._clock(), 0.0)
