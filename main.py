"""Application entry point."""
import logging
import os
from seat_monitor import config
from seat_monitor.monitor import SeatMonitor


def setup_logging():
    """Set up logging configuration."""
    log_level = logging.DEBUG if config.DEBUG else logging.INFO

    log_dir = config.LOG_DIR
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),  # Log to console
            logging.FileHandler(f'{log_dir}/seat_monitor.log')  # Log to file
        ]
    )


def main():
    """Main entry point for the application."""
    setup_logging()
    logger = logging.getLogger(__name__)

    logger.info("Initializing Seat Monitor")

    try:
        monitor = SeatMonitor(config)
        monitor.run()
    except Exception as e:
        logger.error("Failed to start monitor: %s", e)
        raise


if __name__ == "__main__":
    main()
