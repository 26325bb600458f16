"""
LLM factory — creates a configured Anthropic chat model.

One fixed model per deployment (LLM_MODEL). Extended thinking is switched off:
lookups are fabricated data anyway, so there's nothing to gain from paying for
reasoning tokens and waiting on them.
"""
from langchain_anthropic import ChatAnthropic

from flightlens.config import Settings


def get_llm(settings: Settings) -> ChatAnthropic:
    """Build a ChatAnthropic instance from the request's settings."""
    return ChatAnthropic(
        model=settings.llm_model,
        api_key=settings.anthropic_api_key,
        max_tokens=settings.llm_max_tokens,
        thinking={"type": "disabled"},
    )


def web_search_tool(settings: Settings) -> dict:
    """Server-side web search tool spec used to ground free-text answers."""
    return {
        "type": "web_search_20250305",
        "name": "web_search",
        "max_uses": settings.web_search_max_uses,
    }
