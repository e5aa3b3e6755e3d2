import hashlib

import pytest

from remotecache.testutils import (
    random_data_and_digest,
    random_data_and_hash,
    silent_logger,
)
from remotecache.validate import is_valid_hash

EMPTY_SHA256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


@pytest.mark.parametrize("size", [0, 1, 1024])
def test_random_data_has_requested_size_and_matching_hash(size):
    data, hash = random_data_and_hash(size)
    assert len(data) == size
    assert hash == hashlib.sha256(data).hexdigest()
    assert is_valid_hash(hash)


def test_empty_data_hash():
    data, hash = random_data_and_hash(0)
    assert data == b""
    assert hash == EMPTY_SHA256


def test_random_data_differs_between_calls():
    first, _ = random_data_and_hash(64)
    second, _ = random_data_and_hash(64)
    assert first != second


def test_random_data_and_digest():
    data, digest = random_data_and_digest(100)
    assert digest.size_bytes == 100 == len(data)
    assert digest.hash == hashlib.sha256(data).hexdigest()


def test_silent_logger_prints_nothing(capsys):
    logger = silent_logger()
    logger.error("should not appear")
    logger.warning("nor this")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""
    assert logger.propagate is False