# backend/utils/locks.py
import threading
from contextlib import contextmanager


class KeyedLock:
    """One mutex per key, so unrelated read-modify-write sections never wait on each other.

    Entries live only while someone holds or waits on them; the last holder
    removes the key, so the map stays as small as the current contention.
    """

    def __init__(self):
        self._guard = threading.Lock()
        # key -> [lock, holders and waiters]
        self._locks = {}

    @contextmanager
    def hold(self, *key):
        with self._guard:
            entry = self._locks.get(key)
            if entry is None:
                entry = self._locks[key] = [threading.Lock(), 0]
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[key]


# Shared by every store instance; SqlStore objects are created per request
key_locks = KeyedLock()
