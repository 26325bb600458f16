"""
Prompt and output-schema builders for flight lookups.

Both the page and the proxy use these, so the field list lives in one place:
FLIGHT_REPORT_FIELDS drives the prompt text AND the JSON schema. Adding a field
here is enough to have the model asked for it and the schema require it.

Nothing here validates the flight number; any non-empty string is sent.
The model is told to answer with an empty object (or an ERROR line in
free-text mode) when it can't come up with something plausible.
"""
from enum import Enum
from typing import NamedTuple


class LookupType(str, Enum):
    FLIGHT_INFO = "flightInfo"        # JSON object matching the schema
    FLIGHT_SUMMARY = "flightSummary"  # free-form markdown text


class ReportField(NamedTuple):
    name: str
    type: str  # "string", "number" or "array" (of strings)
    hint: str


FLIGHT_REPORT_FIELDS: tuple[ReportField, ...] = (
    ReportField("flightNumber", "string", "same as input"),
    ReportField("make", "string", "e.g., Boeing, Airbus, Embraer"),
    ReportField("model", "string", "e.g., 737-800, A320neo, E190"),
    ReportField("age", "string", 'e.g., "5 years", "10 years"'),
    ReportField("registration", "string", 'e.g., "N123AA", "G-XXXX"'),
    ReportField("icao24", "string", 'e.g., "A1B2C3", "400D5E"'),
    ReportField("status", "string", 'e.g., "On-time", "Delayed by 45 minutes", "Landed", "Cancelled"'),
    ReportField("origin", "string", 'e.g., "London Heathrow (LHR)"'),
    ReportField("destination", "string", 'e.g., "New York JFK (JFK)"'),
    ReportField("scheduledDeparture", "string", 'e.g., "2025-06-12 10:00 AM UTC"'),
    ReportField("scheduledArrival", "string", 'e.g., "2025-06-12 01:00 PM UTC"'),
    ReportField("maintenanceHistorySummary", "string", "a brief, plausible summary of recent maintenance"),
    ReportField("estimatedReliabilityScore", "number", "1-100, where higher is better"),
)

SUMMARY_ERROR_PREFIX = "ERROR:"


def _field_lines() -> str:
    return "\n".join(f"- {f.name} ({f.type}, {f.hint})" for f in FLIGHT_REPORT_FIELDS)


def build_flight_prompt(flight_number: str) -> str:
    """Instruction for the JSON lookup, enumerating every report field."""
    return (
        "Generate plausible (but not necessarily real-time or accurate) flight and aircraft "
        f"details for flight number {flight_number} in JSON format. Include:\n"
        f"{_field_lines()}\n"
        f'The flightNumber field must be exactly "{flight_number}".\n'
        "If you cannot plausibly generate data for the given flight number, "
        "return an empty JSON object."
    )


def build_summary_prompt(flight_number: str) -> str:
    """Instruction for the free-text lookup. Same fields, rendered as markdown."""
    return (
        "Write a short, well-formatted markdown report with plausible (but not necessarily "
        f"real-time or accurate) flight and aircraft details for flight number {flight_number}. "
        "Use a heading and one bullet per item, covering:\n"
        f"{_field_lines()}\n"
        "If you cannot plausibly describe the given flight number, reply with a single line "
        f'starting with "{SUMMARY_ERROR_PREFIX}" explaining why, and nothing else.'
    )


def _property(field: ReportField) -> dict:
    if field.type == "array":
        return {"type": "array", "items": {"type": "string"}, "description": field.hint}
    return {"type": field.type, "description": field.hint}


def build_flight_schema() -> dict:
    """JSON schema for the structured lookup. Every field is required."""
    return {
        "title": "FlightReport",
        "description": "Plausible flight and aircraft details for one flight number.",
        "type": "object",
        "properties": {f.name: _property(f) for f in FLIGHT_REPORT_FIELDS},
        "required": [f.name for f in FLIGHT_REPORT_FIELDS],
    }


def build_request(flight_number: str, lookup_type: LookupType = LookupType.FLIGHT_INFO) -> tuple[str, dict | None]:
    """Prompt plus schema (None for free text) for one lookup type."""
    if lookup_type == LookupType.FLIGHT_SUMMARY:
        return build_summary_prompt(flight_number), None
    return build_flight_prompt(flight_number), build_flight_schema()
