"""Exceptions raised by the seat monitor collaborators."""


class SeatMonitorError(Exception):
    """Base class for seat monitor errors."""


class AvailabilityCheckError(SeatMonitorError):
    """The enrollment endpoint could not be queried or its response parsed."""


class NotificationError(SeatMonitorError):
    """No notification channel managed to deliver the alert."""
