"""
Error raised by the proxy; rendered into the {"error", "details"} envelope by
the handler registered in flightlens.main.
"""


class FlightLensError(Exception):
    def __init__(self, status_code: int, error: str, details: str | None = None):
        super().__init__(error)
        self.status_code = status_code
        self.error = error
        self.details = details
