"""
Tests for the prompt and schema builders.

The page and the proxy both build requests from FLIGHT_REPORT_FIELDS, so these
check that every declared field actually makes it into the prompt and schema.
"""
import pytest

from flightlens.agent.prompts import (
    FLIGHT_REPORT_FIELDS,
    SUMMARY_ERROR_PREFIX,
    LookupType,
    build_flight_prompt,
    build_flight_schema,
    build_request,
    build_summary_prompt,
)


@pytest.mark.parametrize("flight_number", ["LH456", "UA870", "X", "NOT-A-FLIGHT"])
def test_prompt_contains_flight_number_and_every_field(flight_number):
    prompt = build_flight_prompt(flight_number)
    assert flight_number in prompt
    for field in FLIGHT_REPORT_FIELDS:
        assert field.name in prompt


def test_prompt_asks_for_empty_object_fallback():
    assert "empty JSON object" in build_flight_prompt("LH456")


def test_prompt_says_data_is_not_guaranteed_accurate():
    assert "not necessarily real-time or accurate" in build_flight_prompt("LH456")


def test_summary_prompt_asks_for_explicit_error():
    prompt = build_summary_prompt("BA249")
    assert "BA249" in prompt
    assert SUMMARY_ERROR_PREFIX in prompt
    for field in FLIGHT_REPORT_FIELDS:
        assert field.name in prompt


def test_schema_required_fields_are_all_declared():
    schema = build_flight_schema()
    assert schema["type"] == "object"
    assert set(schema["required"]) <= set(schema["properties"])


def test_schema_covers_every_field_with_its_type():
    schema = build_flight_schema()
    assert schema["required"] == [f.name for f in FLIGHT_REPORT_FIELDS]
    assert schema["properties"]["estimatedReliabilityScore"]["type"] == "number"
    assert schema["properties"]["make"]["type"] == "string"


def test_build_request_picks_output_mode():
    prompt, schema = build_request("LH456")
    assert schema == build_flight_schema()
    assert "JSON" in prompt

    prompt, schema = build_request("LH456", LookupType.FLIGHT_SUMMARY)
    assert schema is None
    assert "markdown" in prompt
