"""
Validation of AI output before it reaches the page.

The model is untrusted: its text must decode to a JSON object, fit the
FlightReport shape, and echo back the flight number that was asked for.
Anything else is "no plausible data", reported with a user-facing message
rather than a parser error.
"""
import json
import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger("flightlens-client.report")

PARSE_ERROR = "Could not parse AI-generated flight data. Please try again."


class ReportError(Exception):
    """Lookup failed; the message is shown to the user as-is."""


def no_data_message(flight_number: str) -> str:
    return f"AI could not generate plausible data for flight number: {flight_number}."


class FlightReport(BaseModel):
    # Only flightNumber is checked; the rest is shown as-is, so "age": 6 is fine
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    flight_number: str = Field(alias="flightNumber")
    make: str | None = None
    model: str | None = None
    age: str | None = None
    registration: str | None = None
    icao24: str | None = None
    status: str | None = None
    origin: str | None = None
    destination: str | None = None
    scheduled_departure: str | None = Field(default=None, alias="scheduledDeparture")
    scheduled_arrival: str | None = Field(default=None, alias="scheduledArrival")
    maintenance_history_summary: str | None = Field(default=None, alias="maintenanceHistorySummary")
    estimated_reliability_score: float | None = Field(default=None, alias="estimatedReliabilityScore")

    @field_validator("estimated_reliability_score", mode="before")
    @classmethod
    def _score_or_none(cls, value):
        # A score that isn't a number renders as N/A instead of sinking the report
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return value


def parse_report(data: str, flight_number: str) -> FlightReport:
    """Decode and validate the `data` string relayed by the proxy."""
    try:
        decoded = json.loads(data)
    except (TypeError, ValueError) as e:
        logger.error("Failed to parse JSON from lookup API: %s. Raw response: %r", e, data)
        raise ReportError(PARSE_ERROR) from e

    if not isinstance(decoded, dict) or decoded.get("flightNumber") != flight_number:
        raise ReportError(no_data_message(flight_number))

    try:
        return FlightReport.model_validate(decoded)
    except ValidationError as e:
        logger.warning("AI output for %s did not fit FlightReport: %s", flight_number, e)
        raise ReportError(no_data_message(flight_number)) from e


def reliability_band(score) -> str:
    """Excellent ≥ 90, Good ≥ 70, otherwise Needs Attention. Empty for no score."""
    if not isinstance(score, (int, float)) or isinstance(score, bool):
        return ""
    if score >= 90:
        return "Excellent"
    if score >= 70:
        return "Good"
    return "Needs Attention"


_BAND_COLORS = {
    "Excellent": "green",
    "Good": "yellow",
    "Needs Attention": "red",
    "": "gray",
}


def reliability_color(score) -> str:
    return _BAND_COLORS[reliability_band(score)]
