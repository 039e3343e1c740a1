"""
A service that watches course sections for open seats
and emails subscribers when one frees up.
"""

from . import config
from .monitor import SeatMonitor
from .registry import SubscriptionRegistry
from .notifier import NotificationService
from .checker import BannerAvailabilityChecker
