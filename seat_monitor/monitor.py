"""Seat monitor service wiring."""
import time
import logging
import signal

from .checker import BannerAvailabilityChecker
from .notifier import NotificationService
from .registry import SubscriptionRegistry
from .api import ApiServer

logger = logging.getLogger(__name__)

SHUTDOWN_TIMEOUT = 5


class SeatMonitor:
    """Owns the subscription registry and the HTTP API in front of it."""

    def __init__(self, config, checker=None, notifier=None):
        """Initialize the monitor with configuration."""
        self.config = config
        self.running = False

        # Validate required configuration
        self._validate_config()

        # Initialize services
        self.checker = checker or BannerAvailabilityChecker(config)
        self.notifier = notifier or NotificationService(config)
        self.registry = SubscriptionRegistry(self.checker, self.notifier)
        self.api_server = ApiServer(config, self.registry)

    def _validate_config(self):
        """Validate that all required configuration is present."""
        missing_vars = []

        if not self.config.BANNER_URL:
            missing_vars.append("BANNER_URL")
        if not self.config.SMTP_USERNAME:
            missing_vars.append("SMTP_USERNAME")
        if not self.config.SMTP_PASSWORD:
            missing_vars.append("SMTP_PASSWORD")

        if self.config.POLLING_INTERVAL <= 0:
            raise ValueError("POLLING_INTERVAL must be positive")

        if missing_vars:
            error_msg = f"Missing required configuration variables: {', '.join(missing_vars)}"
            logger.error(error_msg)
            raise ValueError(error_msg)

    def setup_signal_handlers(self):
        """Set up signal handlers for graceful shutdown."""
        # pylint: disable=unused-argument
        def signal_handler(sig, frame):
            logger.info("Received signal %s, shutting down gracefully...", sig)
            self.running = False

        signal.signal(signal.SIGINT, signal_handler)
        signal.signal(signal.SIGTERM, signal_handler)

    def run(self):
        """Serve the API until a shutdown signal arrives."""
        logger.info("Starting seat monitor for term %s, polling every %ss",
                    self.config.BANNER_TERM, self.config.POLLING_INTERVAL)
        self.setup_signal_handlers()
        self.running = True
        self.api_server.start()

        while self.running:
            try:
                time.sleep(1)
            except KeyboardInterrupt:
                logger.info("Received keyboard interrupt, shutting down...")
                self.running = False

        self.shutdown()

    def shutdown(self):
        """Cancel all active course checks."""
        self.running = False
        cancelled = self.registry.drain(timeout=SHUTDOWN_TIMEOUT)
        logger.info("Seat monitor stopped (%d checks cancelled)", cancelled)
