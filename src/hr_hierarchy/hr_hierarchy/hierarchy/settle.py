from __future__ import annotations

import threading
from typing import Callable, Optional

from ..core.constants import SETTLE_DELAY_SECONDS


class SettleTimer:
    """Single-slot delayed task.

    Scheduling replaces whatever is still pending, so only the last
    request inside a settle window runs.
    """

    def __init__(self, delay: float = SETTLE_DELAY_SECONDS):
        self._delay = delay
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._timer is not None

    def schedule(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            timer = threading.Timer(self._delay, self._fire, args=(callback,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def _fire(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if self._timer is not threading.current_thread():
                return
            self._timer = None
        callback()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
