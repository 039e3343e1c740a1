"""Availability checker for the registrar's enrollment endpoint."""
import logging
import re
import requests

from .exceptions import AvailabilityCheckError

logger = logging.getLogger(__name__)

SEATS_PATTERN = re.compile(
    r'Enrollment Seats Available:</span> <span dir="ltr"> (-?\d+) </span>')


def parse_available_seats(html):
    """Extract the available seat count from an enrollment info page."""
    match = SEATS_PATTERN.search(html)
    if not match:
        raise AvailabilityCheckError("Could not find available seats in HTML")
    return int(match.group(1))


class BannerAvailabilityChecker:
    """Queries Banner for the number of open seats in a course section."""

    def __init__(self, config, session=None):
        """Initialize the checker with configuration.

        Each check is an independent request so watcher threads share no
        connection or cookie state. ``session`` replaces the transport.
        """
        self.config = config
        self.session = session

    def check(self, target):
        """Return the current seat count for the target section."""
        form = {
            "term": target.term,
            "courseReferenceNumber": target.crn,
        }

        try:
            response = (self.session or requests).post(
                self.config.BANNER_URL, data=form, timeout=self.config.REQUEST_TIMEOUT)
        except requests.RequestException as e:
            raise AvailabilityCheckError(
                f"Error making request for CRN {target.crn}: {e}") from e

        if not response.ok:
            raise AvailabilityCheckError(
                f"Enrollment request for CRN {target.crn} failed. "
                f"Status code: {response.status_code}")

        seats = parse_available_seats(response.text)
        logger.debug("CRN %s has %s seats available", target.crn, seats)
        return seats
