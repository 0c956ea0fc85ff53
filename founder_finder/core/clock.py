"""
Cancellable delays for backoff and request pacing.

All waits in the pipeline go through a Sleeper so tests can replace the
passage of time and so a shutdown request can abort an in-flight wait.
"""

from __future__ import annotations

import threading

from ..errors import Interrupted


class Sleeper:
    """Blocking delay that can be cancelled from another thread or a signal handler.

    Once cancelled, every current and future sleep raises Interrupted. A
    single Sleeper is shared by everything in one batch run, so cancelling
    it is a batch-wide shutdown request.
    """

    def __init__(self):
        self._stop = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self._stop.is_set()

    def cancel(self) -> None:
        self._stop.set()

    def sleep(self, seconds: float) -> None:
        """Wait for the given number of seconds.

        Raises:
            Interrupted: If the sleeper is or becomes cancelled
        """
        if self._stop.is_set():
            raise Interrupted("Sleeper was cancelled")
        if seconds <= 0:
            return
        if self._stop.wait(seconds):
            raise Interrupted(f"Wait of {seconds:.3f}s was cancelled")
