"""
LLM response utilities for handling multi-format model outputs.

Chat models return either a plain string or a list of content blocks
(reasoning models, some providers' streaming chunks). Everything downstream
wants plain text.
"""

from typing import Any

from loguru import logger


def extract_text_from_response(response: Any) -> str:
    """
    Extract text content from an LLM message or message chunk.

    Supports:
    - Simple string: "text here"
    - Structured blocks: [{'type': 'reasoning', ...}, {'type': 'text', 'text': '...'}]
    - LangChain AIMessage / AIMessageChunk with a content attribute

    Reasoning blocks are dropped.
    """
    content = response.content if hasattr(response, "content") else response

    if not content:
        return ""

    if isinstance(content, str):
        return content

    if isinstance(content, list):
        text_parts = []
        for block in content:
            if isinstance(block, str):
                text_parts.append(block)
            elif isinstance(block, dict) and block.get("type") != "reasoning" and "text" in block:
                text_parts.append(block["text"])

        if not text_parts:
            logger.debug(f"No text blocks in structured content: {str(content)[:200]}")
        return "".join(text_parts)

    return str(content)


def has_tool_calls(message: Any) -> bool:
    """
    True when message is an assistant message carrying at least one tool call.

    Calls whose arguments failed to parse (``invalid_tool_calls``) count too:
    each still needs a tool-result message answering it.
    """
    for attr in ("tool_calls", "invalid_tool_calls"):
        calls = getattr(message, attr, None)
        if isinstance(calls, list) and len(calls) > 0:
            return True
    return False
