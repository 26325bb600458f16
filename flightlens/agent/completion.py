"""
Single-shot completion against the chat model.

Two output modes:
    schema given  → structured output, serialized back to a JSON string
    no schema     → free text, optionally grounded with web search

The result is handed to the client untouched apart from that serialization;
no validation happens here. Errors propagate to the caller.
"""
import json
import logging

from langchain_core.messages import BaseMessage, HumanMessage

from flightlens.config import Settings
from flightlens.agent.llm import get_llm, web_search_tool

logger = logging.getLogger("flightlens-api.completion")


def _message_text(message: BaseMessage) -> str:
    """Join the text blocks of a response.

    Grounded answers come back as a list of content blocks (search calls,
    search results, text); only the text blocks are the answer.
    """
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


async def generate_completion(prompt: str, settings: Settings, schema: dict | None = None) -> str:
    """Send `prompt` as one user message and return the model's text."""
    llm = get_llm(settings)
    messages = [HumanMessage(content=prompt)]

    if schema is not None:
        logger.info("Structured completion (model=%s)", settings.llm_model)
        result = await llm.with_structured_output(schema).ainvoke(messages)
        # No tool call at all means the model declined, same as an empty object
        return json.dumps(result if result is not None else {})

    if settings.web_grounding:
        logger.info("Grounded completion (model=%s)", settings.llm_model)
        response = await llm.bind_tools([web_search_tool(settings)]).ainvoke(messages)
    else:
        logger.info("Free-text completion (model=%s)", settings.llm_model)
        response = await llm.ainvoke(messages)
    return _message_text(response)
