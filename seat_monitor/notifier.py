"""Notification service for sending seat availability alerts."""
import logging
import base64
import smtplib
from email.message import EmailMessage
import requests

from .exceptions import NotificationError

logger = logging.getLogger(__name__)

SUBJECT = "Course Slot Available"


class NotificationService:
    """Handles sending notifications through email and an optional ntfy backup."""

    def __init__(self, config):
        """Initialize the notification service with configuration."""
        self.config = config

    def send(self, recipient, target, seats):
        """Send the alert by email, falling back to ntfy if it fails.

        Raises NotificationError when no channel delivered the message.
        """
        message = (
            f"A slot is available. There are {seats} seats available "
            f"for your subscribed course: {target.crn}")

        if self._send_email_notification(recipient, message):
            return

        # If email fails and ntfy is enabled, push through ntfy as backup
        if self.config.NTFY_ENABLED and self._send_ntfy_notification(recipient, message):
            return

        raise NotificationError(
            f"Failed to notify {recipient} about CRN {target.crn}")

    def _send_email_notification(self, recipient, message):
        """Send the alert to the subscriber over SMTP."""
        email = EmailMessage()
        email["Subject"] = SUBJECT
        email["From"] = self.config.EMAIL_FROM
        email["To"] = recipient
        email.set_content(message)

        try:
            with smtplib.SMTP(self.config.SMTP_HOST, self.config.SMTP_PORT,
                              timeout=self.config.REQUEST_TIMEOUT) as smtp:
                smtp.starttls()
                smtp.login(self.config.SMTP_USERNAME, self.config.SMTP_PASSWORD)
                smtp.send_message(email)
            logger.info("Sent notification to %s successfully", recipient)
            return True
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Error sending email to %s: %s", recipient, e)
            return False

    def _send_ntfy_notification(self, recipient, message):
        """Send notification through ntfy.sh."""
        ntfy_url = f"{self.config.NTFY_URL}/{self.config.NTFY_TOPIC}"

        headers = {
            "Title": f"{SUBJECT} ({recipient})",
            "Priority": str(self.config.NTFY_PRIORITY),
            "Tags": self.config.NTFY_TAGS,
        }

        # Add authentication if credentials are provided
        if self.config.NTFY_USERNAME and self.config.NTFY_PASSWORD:
            auth_str = f"{self.config.NTFY_USERNAME}:{self.config.NTFY_PASSWORD}"
            encoded_auth = base64.b64encode(auth_str.encode()).decode()
            headers["Authorization"] = f"Basic {encoded_auth}"
            logger.debug("Added Basic authentication to ntfy request")

        try:
            response = requests.post(
                ntfy_url, data=message.encode("utf-8"), headers=headers,
                timeout=self.config.REQUEST_TIMEOUT)
            if response.status_code == 200:
                logger.info("Successfully sent ntfy notification for %s", recipient)
                return True
            logger.error(
                "Failed to send ntfy notification. Status code: %s, Response: %s",
                response.status_code, response.text)
            return False
        except requests.RequestException as e:
            logger.error("Error sending ntfy notification: %s", e)
            return False
