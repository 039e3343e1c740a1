"""Registry of active course checks, one per subscriber."""
import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime

from .models import StartResult, StopResult, WatchStatus, WatchTarget
from .watcher import CancellationHandle, Watcher

logger = logging.getLogger(__name__)


@dataclass
class Subscription:
    """An active watch and the handle that stops it."""

    key: str
    target: WatchTarget
    handle: CancellationHandle
    thread: threading.Thread
    started_at: datetime = field(default_factory=datetime.now)


class SubscriptionRegistry:
    """Starts, tracks and cancels one watcher thread per subscriber key.

    All reads and writes of the key map happen under a single lock, and only
    for O(1) dict operations. Network calls run on the watcher threads.
    """

    def __init__(self, checker, notifier):
        """Initialize the registry with the collaborators handed to watchers."""
        self.checker = checker
        self.notifier = notifier
        self._subscriptions = {}
        self._lock = threading.Lock()

    def start(self, key, target):
        """Start watching ``target`` for ``key`` unless a watch already exists."""
        if not key:
            raise ValueError("Subscriber key must not be empty")

        with self._lock:
            if key in self._subscriptions:
                logger.warning("A check is already running for %s", key)
                return StartResult.ALREADY_ACTIVE

            handle = CancellationHandle()
            watcher = Watcher(key, target, handle, self.checker, self.notifier,
                              on_exit=self._deregister)
            thread = threading.Thread(
                target=watcher.run, name=f"course-check-{key}", daemon=True)
            self._subscriptions[key] = Subscription(key, target, handle, thread)

        try:
            thread.start()
        except RuntimeError:
            with self._lock:
                subscription = self._subscriptions.get(key)
                if subscription is not None and subscription.handle is handle:
                    del self._subscriptions[key]
            logger.error("Could not start course check thread for %s", key)
            raise

        logger.info("Course availability check started for %s (CRN %s)", key, target.crn)
        return StartResult.STARTED

    def stop(self, key):
        """Cancel the watch for ``key``."""
        if not key:
            raise ValueError("Subscriber key must not be empty")

        with self._lock:
            subscription = self._subscriptions.pop(key, None)

        if subscription is None:
            logger.info("No active check found for %s", key)
            return StopResult.NOT_FOUND

        # The entry is gone, so nobody else can reach this handle again
        subscription.handle.signal()
        logger.info("Course check stopped for %s", key)
        return StopResult.STOPPED

    def status(self, key):
        """Report whether a watch is registered for ``key``."""
        with self._lock:
            if key in self._subscriptions:
                return WatchStatus.RUNNING
        return WatchStatus.NOT_FOUND

    def active_keys(self):
        with self._lock:
            return list(self._subscriptions)

    def drain(self, timeout=None):
        """Cancel every active watch and return how many were cancelled.

        When ``timeout`` is given, wait up to that many seconds for each
        watcher thread to finish.
        """
        with self._lock:
            subscriptions = list(self._subscriptions.values())
            self._subscriptions.clear()

        for subscription in subscriptions:
            subscription.handle.signal()

        if timeout is not None:
            for subscription in subscriptions:
                if subscription.thread.is_alive():
                    subscription.thread.join(timeout)

        if subscriptions:
            logger.info("Cancelled %d active course checks", len(subscriptions))
        return len(subscriptions)

    def _deregister(self, key, handle):
        """Remove ``key`` if it still belongs to the watcher owning ``handle``."""
        with self._lock:
            subscription = self._subscriptions.get(key)
            if subscription is None or subscription.handle is not handle:
                return
            del self._subscriptions[key]
        logger.info("Removed terminated course check for %s", key)
