"""
Pydantic models for the lookup endpoint.

LookupRequest accepts both request shapes the page can send: a pre-built
prompt + schema, or just a flight number (the server builds the prompt).
Fields are optional at this layer so the router can answer a missing prompt
with a 400 envelope instead of a generic validation error. `type` is a free
string; only the flight-number shape looks at it.
"""
from pydantic import BaseModel, ConfigDict, Field

from flightlens.agent.prompts import LookupType


class LookupRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: str | None = None
    type: str = LookupType.FLIGHT_INFO.value
    output_schema: dict | None = Field(default=None, alias="schema")
    flight_number: str | None = Field(default=None, alias="flightNumber")

    @property
    def lookup_type(self) -> LookupType:
        """Known output type, or FLIGHT_INFO for anything else."""
        try:
            return LookupType(self.type)
        except ValueError:
            return LookupType.FLIGHT_INFO


class LookupResponse(BaseModel):
    data: str


class ErrorResponse(BaseModel):
    error: str
    details: str | None = None
