"""Tests for the Watcher loop and CancellationHandle."""
from unittest.mock import MagicMock

from seat_monitor.exceptions import AvailabilityCheckError
from seat_monitor.models import WatchTarget
from seat_monitor.watcher import CancellationHandle, Watcher
from tests.helpers import FakeChecker, FakeNotifier

EMAIL = "student@example.edu"
TARGET = WatchTarget(crn="12345", term="202430", interval=0.001)


def test_handle_signals_only_once():
    handle = CancellationHandle()
    assert not handle.cancelled
    assert handle.signal() is True
    assert handle.signal() is False
    assert handle.cancelled
    assert handle.wait(0) is True


def test_handle_wait_times_out_when_not_signalled():
    assert CancellationHandle().wait(0.01) is False


def test_cancelled_watcher_exits_without_polling():
    handle = CancellationHandle()
    handle.signal()
    checker = FakeChecker()
    on_exit = MagicMock()

    Watcher(EMAIL, TARGET, handle, checker, FakeNotifier(), on_exit=on_exit).run()

    assert checker.call_count == 0
    on_exit.assert_called_once_with(EMAIL, handle)


def test_checker_error_terminates_and_calls_on_exit():
    handle = CancellationHandle()
    checker = FakeChecker(results=[0, AvailabilityCheckError("bad html")])
    notifier = FakeNotifier()
    on_exit = MagicMock()

    Watcher(EMAIL, TARGET, handle, checker, notifier, on_exit=on_exit).run()

    assert checker.call_count == 2
    assert notifier.sends == []
    on_exit.assert_called_once_with(EMAIL, handle)
    # Self-termination leaves the handle untouched
    assert not handle.cancelled


def test_unexpected_checker_exception_also_terminates():
    handle = CancellationHandle()
    checker = FakeChecker(results=[KeyError("seats")])

    Watcher(EMAIL, TARGET, handle, checker, FakeNotifier()).run()

    assert checker.call_count == 1


def test_notifier_error_does_not_stop_polling():
    handle = CancellationHandle()
    checker = FakeChecker(results=[2, 2, 2, AvailabilityCheckError("done")])
    notifier = FakeNotifier(error=RuntimeError("smtp down"))

    Watcher(EMAIL, TARGET, handle, checker, notifier).run()

    assert checker.call_count == 4
    assert [seats for _, _, seats in notifier.sends] == [2, 2, 2]


def test_no_notification_when_cancelled_during_check():
    handle = CancellationHandle()
    notifier = FakeNotifier()

    class CancellingChecker:
        def check(self, target):
            handle.signal()
            return 7

    Watcher(EMAIL, TARGET, handle, CancellingChecker(), notifier).run()

    assert notifier.sends == []
