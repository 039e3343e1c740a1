"""Value types shared by the registry, the watchers and the API."""
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class WatchTarget:
    """A course section to poll and the parameters to poll it with."""

    crn: str
    term: str
    interval: float = 60.0


class StartResult(Enum):
    STARTED = "started"
    ALREADY_ACTIVE = "already_active"


class StopResult(Enum):
    STOPPED = "stopped"
    NOT_FOUND = "not_found"


class WatchStatus(Enum):
    RUNNING = "running"
    NOT_FOUND = "not_found"
