# sim/ids.py
import threading


class RideIdIssuer:
    """
    Single authority for ride ids.
    Ids start at `start` and grow by exactly one per issued ride.
    Safe to share between threads; each factory owns one issuer.
    """

    def __init__(self, start: int = 1):
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            rid = self._next
            self._next += 1
            return rid

    def peek(self) -> int:
        with self._lock:
            return self._next
