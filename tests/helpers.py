"""Shared fakes for the seat monitor tests."""
import threading
import time


def wait_for(predicate, timeout=2.0, interval=0.005):
    """Poll ``predicate`` until it is truthy or ``timeout`` elapses."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return bool(predicate())


class FakeChecker:
    """Returns queued results in order, then ``default``. Exceptions are raised."""

    def __init__(self, results=None, default=0):
        self.results = list(results or [])
        self.default = default
        self.calls = []
        self._lock = threading.Lock()

    def check(self, target):
        with self._lock:
            self.calls.append(target)
            result = self.results.pop(0) if self.results else self.default
        if isinstance(result, Exception):
            raise result
        return result

    @property
    def call_count(self):
        with self._lock:
            return len(self.calls)


class FakeNotifier:
    def __init__(self, error=None):
        self.error = error
        self.sends = []
        self._lock = threading.Lock()

    def send(self, recipient, target, seats):
        with self._lock:
            self.sends.append((recipient, target, seats))
        if self.error is not None:
            raise self.error
