"""
Lookup router — the proxy between the page and the AI provider.

Steps, in order:
1. No API key → 500 before anything else, even before the body is read;
   the provider is never called
2. Body that isn't a lookup request → 400
3. No prompt (and no usable flight number to build one from) → 400
4. One completion call; the raw text goes back as {"data": ...}
5. Anything that blows up in the call → logged, 500 with the message attached

Stateless and single-shot: no retries, no caching, nothing shared between
requests. Settings are read per request.
"""
import logging

from fastapi import APIRouter, Request
from pydantic import ValidationError

from flightlens.config import get_settings
from flightlens.errors import FlightLensError
from flightlens.models.lookup import LookupRequest, LookupResponse
from flightlens.agent.completion import generate_completion
from flightlens.agent.prompts import build_request
from flightlens.client.query import normalize_flight_number

logger = logging.getLogger("flightlens-api.lookup")

router = APIRouter()


async def _read_lookup(request: Request) -> LookupRequest:
    # Parsed here rather than as a body parameter so the key check runs first
    try:
        return LookupRequest.model_validate(await request.json())
    except (ValueError, ValidationError) as e:
        raise FlightLensError(400, "Invalid request body", details=str(e))


@router.post(
    "",
    response_model=LookupResponse,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": LookupRequest.model_json_schema(by_alias=True)}},
        },
    },
)
async def lookup(request: Request):
    """Forward a flight lookup prompt to the model and relay its text."""
    settings = get_settings()
    if not settings.anthropic_api_key:
        raise FlightLensError(500, "API key not configured")

    body = await _read_lookup(request)
    prompt, schema = body.prompt, body.output_schema
    if not prompt and body.flight_number:
        flight_number = normalize_flight_number(body.flight_number)
        if flight_number:
            prompt, schema = build_request(flight_number, body.lookup_type)
    if not prompt:
        raise FlightLensError(400, "Prompt is required")

    try:
        text = await generate_completion(prompt, settings, schema)
    except Exception as e:
        logger.exception("Completion failed: %s", e)
        raise FlightLensError(500, "Internal Server Error", details=str(e))

    return LookupResponse(data=text)
