"""Shared fixtures: an app client and control over the API key env var."""
import pytest
from fastapi.testclient import TestClient

from flightlens.main import app


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("ANTHROPIC_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def no_api_key(monkeypatch):
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)


@pytest.fixture
def lh456_report():
    return {
        "flightNumber": "LH456",
        "make": "Airbus",
        "model": "A350-900",
        "age": "6 years",
        "registration": "D-AIXP",
        "icao24": "3C4B26",
        "status": "On-time",
        "origin": "Frankfurt (FRA)",
        "destination": "Los Angeles (LAX)",
        "scheduledDeparture": "2025-06-12 10:05 AM UTC",
        "scheduledArrival": "2025-06-12 09:30 PM UTC",
        "maintenanceHistorySummary": "C-check completed in 2024, no open items.",
        "estimatedReliabilityScore": 92,
    }
