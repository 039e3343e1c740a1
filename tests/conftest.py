from types import SimpleNamespace

import pytest

from seat_monitor.registry import SubscriptionRegistry
from tests.helpers import FakeChecker, FakeNotifier


@pytest.fixture
def config(tmp_path):
    return SimpleNamespace(
        BANNER_URL="https://banner.example.edu/searchResults/getEnrollmentInfo",
        BANNER_TERM="202430",
        POLLING_INTERVAL=60,
        REQUEST_TIMEOUT=5,
        SMTP_HOST="smtp.example.com",
        SMTP_PORT=587,
        SMTP_USERNAME="alerts@example.com",
        SMTP_PASSWORD="app-password",
        EMAIL_FROM="alerts@example.com",
        NTFY_ENABLED=False,
        NTFY_URL="https://ntfy.example.com",
        NTFY_TOPIC="seats",
        NTFY_PRIORITY=4,
        NTFY_TAGS="mortar_board",
        NTFY_USERNAME=None,
        NTFY_PASSWORD=None,
        API_HOST="127.0.0.1",
        API_PORT=8080,
        LOG_DIR=str(tmp_path / "logs"),
        DEBUG=False,
    )


@pytest.fixture
def checker():
    return FakeChecker()


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def registry(checker, notifier):
    registry = SubscriptionRegistry(checker, notifier)
    yield registry
    registry.drain(timeout=1)
