"""A writer that checks the size and SHA-256 of what passes through it."""

from __future__ import annotations

import hashlib
from typing import Protocol


class _Sink(Protocol):
    def write(self, data: bytes) -> object: ...

    def close(self) -> object: ...


class Sha256Verifier:
    """Forward writes to ``sink`` while hashing them.

    ``close`` raises ``ValueError`` when the byte count or hash differs
    from what was expected; the sink is only closed when both match.
    """

    def __init__(self, expected_hash: str, expected_size: int, sink: _Sink) -> None:
        self._expected_hash = expected_hash
        self._expected_size = expected_size
        self._sink = sink
        self._hasher = hashlib.sha256()
        self._actual_size = 0

    def write(self, data: bytes) -> int:
        """Write ``data`` to the sink and the hash; return the byte count."""
        self._hasher.update(data)
        self._sink.write(data)
        self._actual_size += len(data)
        return len(data)

    def close(self) -> None:
        """Verify the size and hash, then close the sink."""
        if self._actual_size != self._expected_size:
            raise ValueError(
                f"Error: expected {self._expected_size} bytes, got {self._actual_size}"
            )
        actual_hash = self._hasher.hexdigest()
        if actual_hash != self._expected_hash:
            raise ValueError(
                f"Error: expected hash {self._expected_hash}, got {actual_hash}"
            )
        self._sink.close()

    def __enter__(self) -> Sha256Verifier:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()
        else:
            self._sink.close()