"""
passgauge.debounce

Live analysis while the user types: each submitted password replaces the one
waiting, and only runs once no newer input has arrived for ``delay`` seconds.
A replaced request is dropped, never analyzed.
"""

import logging
import threading
from typing import Callable, Optional, Set

from .evaluator import PasswordAnalysis, analyze_password

logger = logging.getLogger(__name__)

DEFAULT_DELAY = 0.05


class AnalysisDebouncer:
    def __init__(
        self,
        on_result: Callable[[PasswordAnalysis], None],
        delay: float = DEFAULT_DELAY,
        analyze: Callable[[str], PasswordAnalysis] = analyze_password,
    ):
        if delay < 0:
            raise ValueError("delay must be >= 0")
        self.on_result = on_result
        self.delay = delay
        self.analyze = analyze
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._timer: Optional[threading.Timer] = None
        self._generation = 0
        self._pending: Optional[str] = None
        # timer threads currently analyzing/delivering
        self._delivering: Set[int] = set()
        self._last: Optional[PasswordAnalysis] = None

    @property
    def pending(self) -> Optional[str]:
        with self._lock:
            return self._pending

    def submit(self, password: str) -> None:
        with self._lock:
            self._drop_pending()
            self._generation += 1
            self._pending = password
            self._timer = threading.Timer(self.delay, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def cancel(self) -> None:
        with self._lock:
            self._drop_pending()

    def flush(self) -> Optional[PasswordAnalysis]:
        """
        Run the waiting request now and return its analysis. If a timer is
        already delivering, wait for it and return that analysis instead.
        Returns None when nothing is waiting or in flight.
        """
        with self._lock:
            if self._pending is not None:
                password = self._pending
                self._drop_pending()
            else:
                if not self._delivering:
                    return None
                if threading.get_ident() in self._delivering:
                    # called from on_result; waiting would deadlock
                    return None
                self._idle.wait_for(lambda: not self._delivering)
                return self._last
        return self._deliver(password)

    def _drop_pending(self) -> None:
        # caller holds the lock
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._pending is not None:
            logger.debug("dropping superseded analysis request")
        self._pending = None
        self._generation += 1

    def _fire(self, generation: int) -> None:
        me = threading.get_ident()
        with self._lock:
            if generation != self._generation or self._pending is None:
                return
            password = self._pending
            self._pending = None
            self._timer = None
            self._delivering.add(me)
        analysis = None
        try:
            analysis = self._deliver(password)
        finally:
            with self._lock:
                self._delivering.discard(me)
                self._last = analysis
                self._idle.notify_all()

    def _deliver(self, password: str) -> PasswordAnalysis:
        analysis = self.analyze(password)
        self.on_result(analysis)
        return analysis
