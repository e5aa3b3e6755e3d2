"""Create uniquely named, in-progress cache files."""

from __future__ import annotations

import os
import stat
import threading
import time
from typing import BinaryIO

# Permissions of cache files once they are complete.
FINAL_MODE = 0o664

# Files still being written carry the setgid bit, cleared when finished.
_WIP_MODE = FINAL_MODE | stat.S_ISGID

_FLAGS = os.O_RDWR | os.O_CREAT | os.O_EXCL

_MAX_ATTEMPTS = 10000


class TempFileCreator:
    """Creates temp files named ``<base>-<random>`` using a fast LCG."""

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns()
        self._lock = threading.Lock()
        self._state = seed & 0xFFFFFFFF

    def _next_random(self) -> str:
        with self._lock:
            self._state = (self._state * 1664525 + 1013904223) & 0xFFFFFFFF
            value = self._state
        return f"{value % 1_000_000_000:09d}"

    def create(self, base: str, legacy: bool = False) -> tuple[BinaryIO, str]:
        """Create a new file and return it with its random name component.

        The name is ``<base>-<random>``, with a ``.v1`` suffix when
        ``legacy`` is true. The file is created with the setgid bit set to
        mark it incomplete; chmod it to ``FINAL_MODE`` once written.
        """
        for _ in range(_MAX_ATTEMPTS):
            random = self._next_random()
            name = f"{base}-{random}.v1" if legacy else f"{base}-{random}"
            try:
                fd = os.open(name, _FLAGS, _WIP_MODE)
            except FileExistsError:
                continue
            except OSError as err:
                raise OSError(f"Unexpected error opening temp file: {err}") from err
            return os.fdopen(fd, "w+b"), random

        raise FileExistsError("Failed to create a temp file")