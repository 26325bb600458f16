"""
View state for the lookup page.

    idle ──start──▶ loading ──succeed──▶ success
      ▲                │                    │
      │               fail                  │
      │                ▼                    │
      └────edit──── error ◀─────────────────┘ (edit / start again)

Editing the input resets to idle and forgets the last result. Nothing can
happen while a lookup is in flight: there is no cancel.
"""
from enum import Enum

from flightlens.client.query import normalize_flight_number
from flightlens.client.report import FlightReport

ATTEMPT_HINT = (
    "The AI may not be able to generate plausible data for all flight numbers, "
    "or there might be an issue with the AI response."
)


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class InvalidTransition(Exception):
    pass


class LookupState:
    def __init__(self):
        self.status = Status.IDLE
        self.flight_number = ""
        self.report: FlightReport | None = None
        self.error = ""
        self.attempted = False

    def _require(self, *allowed: Status, action: str):
        if self.status not in allowed:
            raise InvalidTransition(f"cannot {action} while {self.status.value}")

    @property
    def can_submit(self) -> bool:
        return self.status != Status.LOADING and bool(self.flight_number)

    @property
    def hint(self) -> str:
        """Extra banner line, only after a query was actually attempted."""
        if self.status == Status.ERROR and self.attempted:
            return ATTEMPT_HINT
        return ""

    def edit(self, raw: str):
        self._require(Status.IDLE, Status.SUCCESS, Status.ERROR, action="edit")
        self.status = Status.IDLE
        self.flight_number = normalize_flight_number(raw)
        self.report = None
        self.error = ""
        self.attempted = False

    def start(self):
        self._require(Status.IDLE, Status.SUCCESS, Status.ERROR, action="start")
        if not self.flight_number:
            raise InvalidTransition("cannot start without a flight number")
        self.status = Status.LOADING
        self.report = None
        self.error = ""
        self.attempted = True

    def succeed(self, report: FlightReport):
        self._require(Status.LOADING, action="succeed")
        self.status = Status.SUCCESS
        self.report = report

    def fail(self, message: str):
        self._require(Status.LOADING, action="fail")
        self.status = Status.ERROR
        self.report = None
        self.error = message
