"""Configuration settings module."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file if present
load_dotenv()

# Registrar enrollment endpoint
BANNER_URL = os.environ.get(
    "BANNER_URL",
    "https://nubanner.neu.edu/StudentRegistrationSsb/ssb/searchResults/getEnrollmentInfo")
BANNER_TERM = os.environ.get("BANNER_TERM", "202430")
# Polling interval in seconds
POLLING_INTERVAL = float(os.environ.get("POLLING_INTERVAL", "60"))
REQUEST_TIMEOUT = float(os.environ.get("REQUEST_TIMEOUT", "10"))

# Primary notification (email)
SMTP_HOST = os.environ.get("SMTP_HOST", "smtp.gmail.com")
SMTP_PORT = int(os.environ.get("SMTP_PORT", "587"))
SMTP_USERNAME = os.environ.get("SMTP_USERNAME")
SMTP_PASSWORD = os.environ.get("SMTP_PASSWORD")
EMAIL_FROM = os.environ.get("EMAIL_FROM") or SMTP_USERNAME

# Backup notification (ntfy.sh)
NTFY_ENABLED = os.environ.get("NTFY_ENABLED", "false").lower() == "true"
NTFY_URL = os.environ.get("NTFY_URL", "https://ntfy.sh")
NTFY_TOPIC = os.environ.get("NTFY_TOPIC", "seat-monitor")
NTFY_PRIORITY = int(os.environ.get("NTFY_PRIORITY", "4"))
NTFY_TAGS = os.environ.get("NTFY_TAGS", "mortar_board")
NTFY_USERNAME = os.environ.get("NTFY_USERNAME")
NTFY_PASSWORD = os.environ.get("NTFY_PASSWORD")

# HTTP API
API_HOST = os.environ.get("API_HOST", "0.0.0.0")  # Listen on all interfaces by default
API_PORT = int(os.environ.get("API_PORT", "8080"))

# Logging
LOG_DIR = os.environ.get("LOG_DIR", "/app/logs")

# Debugging
DEBUG = os.environ.get("DEBUG", "false").lower() == "true"
