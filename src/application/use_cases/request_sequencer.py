"""Monotonic request ids used to drop stale responses."""

import threading


class RequestSequencer:
    """Issue increasing request ids and tell whether one is still current.

    A response is only published when its request id is the last one
    issued, so a slow response can never overwrite a newer one.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._latest = 0

    def next_id(self) -> int:
        with self._lock:
            self._latest += 1
            return self._latest

    def is_latest(self, request_id: int) -> bool:
        with self._lock:
            return request_id == self._latest

    @property
    def latest_id(self) -> int:
        return self._latest


__all__ = ["RequestSequencer"]
