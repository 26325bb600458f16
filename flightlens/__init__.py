"""Flight Lens: AI-generated flight and aircraft details for a flight number."""
