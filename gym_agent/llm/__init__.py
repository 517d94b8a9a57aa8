"""
LLM layer - Client factory and response utilities
"""

from gym_agent.llm.client import create_llm
from gym_agent.llm.response_utils import extract_text_from_response, has_tool_calls

__all__ = [
    "create_llm",
    "extract_text_from_response",
    "has_tool_calls",
]
