import logging
import threading
from typing import Callable, Dict


logger = logging.getLogger(__name__)


class BroadcastSequencer:
    """Publishes menu revisions per room in increasing order.

    Each room has its own lock, separate from the store's read-write lock,
    so a slow send only delays later sends for the same room. A revision
    that arrives after a newer one has gone out is dropped.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._room_locks: Dict[str, threading.Lock] = {}
        self._last_sent: Dict[str, int] = {}

    def _room_lock(self, room: str) -> threading.Lock:
        with self._lock:
            lock = self._room_locks.get(room)
            if lock is None:
                lock = self._room_locks[room] = threading.Lock()
            return lock

    def publish(self, room: str, revision: int, send: Callable[[], None]) -> bool:
        """Call ``send`` unless a newer revision was already sent; returns whether it ran."""
        with self._room_lock(room):
            if revision <= self._last_sent.get(room, 0):
                logger.debug("[broadcast-stale] room=%s revision=%s", room, revision)
                return False
            send()
            self._last_sent[room] = revision
            return True

    def last_sent(self, room: str) -> int:
        with self._lock:
            return self._last_sent.get(room, 0)
