"""
In-memory cache of download clients keyed by id.

Entries live until replaced or popped. Readers share the lock; set and
pop are exclusive. No critical section awaits, so the cache is safe from
any number of threads and event-loop tasks.
"""
import threading
from contextlib import contextmanager
from typing import Dict, Optional

from clientstore.schemas import DownloadClient


class ReadWriteLock:
    """Readers/writer lock: many readers or one writer."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self):
        with self._cond:
            # Waiting writers go first so a stream of readers cannot starve them
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self):
        with self._cond:
            self._writers_waiting += 1
            while self._writer or self._readers:
                self._cond.wait()
            self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class ClientCache:
    """Last-known download client per id."""

    def __init__(self):
        self._lock = ReadWriteLock()
        self._clients: Dict[int, DownloadClient] = {}

    def set(self, client_id: int, client: DownloadClient) -> None:
        with self._lock.write():
            self._clients[client_id] = client

    def get(self, client_id: int) -> Optional[DownloadClient]:
        """Cached client, or None on a miss."""
        with self._lock.read():
            return self._clients.get(client_id)

    def pop(self, client_id: int) -> None:
        with self._lock.write():
            self._clients.pop(client_id, None)

    def __contains__(self, client_id: int) -> bool:
        with self._lock.read():
            return client_id in self._clients

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._clients)
