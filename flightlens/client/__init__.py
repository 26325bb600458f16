"""
Page-side half of Flight Lens: input normalization, output validation,
view state and the HTTP client for the lookup proxy.
"""
from flightlens.client.query import FlightQuery, normalize_flight_number
from flightlens.client.report import FlightReport, ReportError, parse_report
from flightlens.client.service import FlightLensClient, run_lookup
from flightlens.client.state import LookupState, Status

__all__ = [
    "FlightLensClient",
    "FlightQuery",
    "FlightReport",
    "LookupState",
    "ReportError",
    "Status",
    "normalize_flight_number",
    "parse_report",
    "run_lookup",
]
