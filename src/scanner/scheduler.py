"""Interval schedulers driving the simulator's tick callback"""

import logging
import threading
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)


class Scheduler(Protocol):
    @property
    def is_running(self) -> bool: ...

    def start(self, callback: Callable[[], None]) -> None: ...

    def stop(self) -> None: ...


class IntervalScheduler:
    """Calls back from a daemon thread every `interval` seconds of wall-clock time"""

    def __init__(self, interval: float = 2.0):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self._callback: Optional[Callable[[], None]] = None
        self._thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, callback: Callable[[], None]) -> None:
        if self.is_running:
            logger.warning("Scheduler already running")
            return

        self._callback = callback
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name="scanner-scheduler", daemon=True
        )
        self._thread.start()
        logger.info("Scheduler started (interval %.2fs)", self.interval)

    def stop(self) -> None:
        if self._thread is None:
            return

        self._stop_event.set()
        # A callback may stop its own scheduler
        if self._thread is not threading.current_thread():
            self._thread.join(timeout=max(5.0, self.interval * 2))
        self._thread = None
        logger.info("Scheduler stopped")

    def _run(self) -> None:
        while not self._stop_event.wait(self.interval):
            try:
                self._callback()
            except Exception:
                logger.exception("Scheduled callback failed, scheduler stopping")
                raise


class ManualScheduler:
    """Scheduler whose intervals elapse only when elapse() is called"""

    def __init__(self):
        self._callback: Optional[Callable[[], None]] = None
        self.elapsed = 0

    @property
    def is_running(self) -> bool:
        return self._callback is not None

    def start(self, callback: Callable[[], None]) -> None:
        self._callback = callback

    def stop(self) -> None:
        self._callback = None

    def elapse(self, n: int = 1) -> None:
        for _ in range(n):
            self.elapsed += 1
            if self._callback is not None:
                self._callback()
