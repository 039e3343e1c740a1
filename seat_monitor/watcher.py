"""Per-subscription polling loop."""
import logging
import threading
import traceback

logger = logging.getLogger(__name__)


class CancellationHandle:
    """One-shot stop signal shared by the registry and a single watcher."""

    def __init__(self):
        self._event = threading.Event()
        self._lock = threading.Lock()

    def signal(self):
        """Trigger the handle. Returns False if it was already triggered."""
        with self._lock:
            if self._event.is_set():
                return False
            self._event.set()
            return True

    @property
    def cancelled(self):
        return self._event.is_set()

    def wait(self, timeout=None):
        """Block until signalled or the timeout elapses; True if signalled."""
        return self._event.wait(timeout)


class Watcher:
    """Polls seat availability for one subscriber until cancelled or broken.

    Every ``target.interval`` seconds the checker is asked for the seat count;
    a positive count triggers a notification. A checker failure ends the
    watch, a notifier failure is logged and polling continues. ``on_exit`` is
    called with ``(key, handle)`` once the loop is done, however it ended.
    """

    def __init__(self, key, target, handle, checker, notifier, on_exit=None):
        self.key = key
        self.target = target
        self.handle = handle
        self.checker = checker
        self.notifier = notifier
        self.on_exit = on_exit

    def run(self):
        logger.info("Starting course check for %s (CRN %s, every %ss)",
                    self.key, self.target.crn, self.target.interval)
        reason = "cancelled"
        try:
            # Cancellation wins when the signal and the interval race
            while not self.handle.wait(self.target.interval):
                try:
                    seats = self.checker.check(self.target)
                except Exception as e:
                    logger.error("Error checking CRN %s for %s: %s",
                                 self.target.crn, self.key, e)
                    logger.debug(traceback.format_exc())
                    reason = "checker error"
                    break

                if seats > 0 and not self.handle.cancelled:
                    self._notify(seats)
        finally:
            logger.info("Stopping course check for %s (%s)", self.key, reason)
            if self.on_exit is not None:
                self.on_exit(self.key, self.handle)

    def _notify(self, seats):
        try:
            self.notifier.send(self.key, self.target, seats)
        except Exception as e:
            logger.error("Failed to notify %s about CRN %s: %s",
                         self.key, self.target.crn, e)
            logger.debug(traceback.format_exc())
