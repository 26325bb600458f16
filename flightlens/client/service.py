"""
HTTP client for the lookup proxy, plus the controller that drives LookupState.

The client builds the prompt and schema itself and posts them to the proxy,
then turns whatever comes back into a FlightReport or a ReportError carrying
the message the user will see.
"""
import logging

import httpx

from flightlens.agent.prompts import LookupType, build_request
from flightlens.client.report import FlightReport, ReportError, parse_report
from flightlens.client.state import LookupState

logger = logging.getLogger("flightlens-client")

LOOKUP_PATH = "/api/v1/lookup"
FALLBACK_ERROR = "API did not return valid flight data. Please try again or with a different flight number."


def network_error_message(error: Exception) -> str:
    return f"Failed to retrieve data. Network error or API issue. Detailed error: {error}"


class FlightLensClient:
    def __init__(self, base_url: str = "", http: httpx.Client | None = None):
        # A caller-provided client (e.g. a TestClient) already knows its base URL
        self._http = http or httpx.Client(base_url=base_url, timeout=None)

    def lookup(self, flight_number: str) -> FlightReport:
        prompt, schema = build_request(flight_number)
        payload = {"prompt": prompt, "type": LookupType.FLIGHT_INFO.value, "schema": schema}

        try:
            response = self._http.post(LOOKUP_PATH, json=payload)
            body = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Failed to call lookup API for %s: %s", flight_number, e)
            raise ReportError(network_error_message(e)) from e

        data = body.get("data") if isinstance(body, dict) else None
        if not response.is_success or not data:
            logger.error("Error from lookup API (%s): %s", response.status_code, body)
            error = body.get("error") if isinstance(body, dict) else None
            raise ReportError(error or FALLBACK_ERROR)

        return parse_report(data, flight_number)

    def close(self):
        self._http.close()


def run_lookup(state: LookupState, client: FlightLensClient) -> LookupState:
    """One full lookup cycle: loading, then success or error.

    Never leaves the state in loading: whatever goes wrong ends in error.
    """
    state.start()
    try:
        report = client.lookup(state.flight_number)
    except ReportError as e:
        state.fail(str(e))
    except Exception as e:
        logger.exception("Lookup for %s failed: %s", state.flight_number, e)
        state.fail(network_error_message(e))
    else:
        state.succeed(report)
    return state
