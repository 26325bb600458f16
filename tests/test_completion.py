"""
Tests for the completion call and the LLM factory. The chat model is mocked,
so these check what gets sent and how the answer is turned into text.
"""
import asyncio
import json
from unittest.mock import patch, MagicMock, AsyncMock

from langchain_core.messages import AIMessage, HumanMessage

from flightlens.config import Settings
from flightlens.agent.completion import generate_completion
from flightlens.agent.llm import get_llm, web_search_tool
from flightlens.agent.prompts import build_flight_schema


def _settings(**overrides) -> Settings:
    return Settings(anthropic_api_key="test-key", **overrides)


def test_get_llm_uses_configured_model_without_thinking():
    llm = get_llm(_settings(llm_model="claude-test-model", llm_max_tokens=512))
    assert llm.model == "claude-test-model"
    assert llm.max_tokens == 512
    assert llm.thinking == {"type": "disabled"}


def test_web_search_tool_spec():
    tool = web_search_tool(_settings(web_search_max_uses=2))
    assert tool["name"] == "web_search"
    assert tool["max_uses"] == 2


def test_structured_completion_serializes_result():
    """JSON mode: single user message, schema passed through, dict returned as a JSON string."""
    schema = build_flight_schema()
    mock_llm = MagicMock()
    structured = mock_llm.with_structured_output.return_value
    structured.ainvoke = AsyncMock(return_value={"flightNumber": "LH456", "make": "Airbus"})

    with patch("flightlens.agent.completion.get_llm", return_value=mock_llm):
        text = asyncio.run(generate_completion("prompt for LH456", _settings(), schema))

    assert json.loads(text) == {"flightNumber": "LH456", "make": "Airbus"}
    mock_llm.with_structured_output.assert_called_once_with(schema)
    (messages,) = structured.ainvoke.await_args.args
    assert len(messages) == 1
    assert isinstance(messages[0], HumanMessage)
    assert messages[0].content == "prompt for LH456"


def test_structured_completion_without_result_is_empty_object():
    mock_llm = MagicMock()
    mock_llm.with_structured_output.return_value.ainvoke = AsyncMock(return_value=None)

    with patch("flightlens.agent.completion.get_llm", return_value=mock_llm):
        text = asyncio.run(generate_completion("prompt", _settings(), build_flight_schema()))

    assert text == "{}"


def test_grounded_completion_binds_web_search_and_keeps_only_text():
    mock_llm = MagicMock()
    bound = mock_llm.bind_tools.return_value
    bound.ainvoke = AsyncMock(return_value=AIMessage(content=[
        {"type": "server_tool_use", "id": "srv_1", "name": "web_search", "input": {"query": "UA870"}},
        {"type": "web_search_tool_result", "tool_use_id": "srv_1", "content": []},
        {"type": "text", "text": "# UA870\n"},
        {"type": "text", "text": "- make: Boeing"},
    ]))

    with patch("flightlens.agent.completion.get_llm", return_value=mock_llm):
        text = asyncio.run(generate_completion("summary prompt", _settings(web_grounding=True)))

    assert text == "# UA870\n- make: Boeing"
    (tools,) = mock_llm.bind_tools.call_args.args
    assert tools[0]["name"] == "web_search"


def test_free_text_completion_without_grounding():
    mock_llm = MagicMock()
    mock_llm.ainvoke = AsyncMock(return_value=AIMessage(content="ERROR: unknown flight"))

    with patch("flightlens.agent.completion.get_llm", return_value=mock_llm):
        text = asyncio.run(generate_completion("summary prompt", _settings(web_grounding=False)))

    assert text == "ERROR: unknown flight"
    mock_llm.bind_tools.assert_not_called()
