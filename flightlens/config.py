"""
Application settings from environment variables.
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # LLM
    anthropic_api_key: str = ""
    llm_model: str = "claude-sonnet-4-20250514"
    llm_max_tokens: int = 2048

    # Free-text lookups may ground answers with live web search results
    web_grounding: bool = True
    web_search_max_uses: int = 3

    # Where the page sends its lookups
    flightlens_api_url: str = "http://localhost:8000"

    log_level: str = "INFO"


def get_settings() -> Settings:
    """Read settings fresh from the environment.

    Called per request so a credential added or removed after startup is
    picked up without a restart.
    """
    return Settings()
