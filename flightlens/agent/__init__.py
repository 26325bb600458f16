"""
Prompt building and AI completion for flight lookups.

Usage:
    from flightlens.agent import build_request, generate_completion
    prompt, schema = build_request("LH456")
    text = await generate_completion(prompt, settings, schema)
"""
from flightlens.agent.completion import generate_completion
from flightlens.agent.prompts import LookupType, build_request

__all__ = ["LookupType", "build_request", "generate_completion"]
