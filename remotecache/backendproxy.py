"""Background workers that upload cache entries to a proxy backend."""

from __future__ import annotations

import queue
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, BinaryIO


@dataclass
class UploadRequest:
    """One cache entry waiting to be uploaded."""

    hash: str
    logical_size: int
    size_on_disk: int
    kind: Any
    reader: BinaryIO | None = None


class Uploader(ABC):
    """Something that can upload a single cache entry."""

    @abstractmethod
    def upload_file(self, item: UploadRequest) -> None:
        """Upload ``item`` to the backend."""


def _worker(uploader: Uploader, upload_queue: queue.Queue) -> None:
    while True:
        item = upload_queue.get()
        try:
            uploader.upload_file(item)
        finally:
            upload_queue.task_done()


def start_uploaders(
    uploader: Uploader, num_uploaders: int, max_queued_uploads: int
) -> queue.Queue | None:
    """Start ``num_uploaders`` worker threads and return their queue.

    The queue holds at most ``max_queued_uploads`` items. Returns ``None``
    when either number is not positive.
    """
    if max_queued_uploads <= 0 or num_uploaders <= 0:
        return None

    upload_queue: queue.Queue = queue.Queue(maxsize=max_queued_uploads)
    for _ in range(num_uploaders):
        threading.Thread(target=_worker, args=(uploader, upload_queue), daemon=True).start()
    return upload_queue