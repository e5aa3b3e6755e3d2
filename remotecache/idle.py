"""Detect a period without requests and report it once."""

from __future__ import annotations

import threading
import time
from typing import Callable

_TICK_SECONDS = 1.0


class IdleTimer:
    """Calls ``on_idle`` once no reset has happened for ``timeout`` seconds.

    Activity is checked once per second after ``start``.
    """

    def __init__(self, timeout: float, on_idle: Callable[[], object]) -> None:
        self._timeout = timeout
        self._on_idle = on_idle
        self._lock = threading.Lock()
        self._last_request = time.monotonic()
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        """Begin watching for idleness in a background thread."""
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        while not self._stopped.wait(_TICK_SECONDS):
            with self._lock:
                elapsed = time.monotonic() - self._last_request
            if elapsed > self._timeout:
                self._on_idle()
                return

    def reset(self) -> None:
        """Restart the countdown; call at the start of every request."""
        now = time.monotonic()
        with self._lock:
            self._last_request = now

    def stop(self) -> None:
        """Stop watching without notifying."""
        self._stopped.set()