"""Helpers for building random cache content in tests."""

from __future__ import annotations

import hashlib
import logging
import os

from remotecache.validate import Digest


def random_data_and_hash(size: int) -> tuple[bytes, str]:
    """Return ``size`` random bytes and their hex SHA-256 hash."""
    data = os.urandom(size)
    return data, hashlib.sha256(data).hexdigest()


def random_data_and_digest(size: int) -> tuple[bytes, Digest]:
    """Return ``size`` random bytes and their ``Digest``."""
    data, hash = random_data_and_hash(size)
    return data, Digest(hash=hash, size_bytes=size)


def silent_logger() -> logging.Logger:
    """Return a logger that discards everything it is given."""
    logger = logging.Logger("remotecache.silent")
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger