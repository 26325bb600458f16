"""
User input normalization.
"""
from dataclasses import dataclass


def normalize_flight_number(raw: str) -> str:
    """Uppercase and drop every whitespace character ("lh 456 " → "LH456")."""
    return "".join(raw.split()).upper()


@dataclass(frozen=True)
class FlightQuery:
    flight_number: str

    @classmethod
    def from_input(cls, raw: str) -> "FlightQuery":
        return cls(normalize_flight_number(raw))

    def __bool__(self) -> bool:
        return bool(self.flight_number)
