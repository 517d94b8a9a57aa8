"""
Shop agent routing - the only branch in the reasoning/acting loop
"""

from typing import Any, Optional

from loguru import logger

from gym_agent.agents.shop.state import AgentState
from gym_agent.llm.response_utils import has_tool_calls

ROUTE_ACT = "act"
ROUTE_TERMINATE = "terminate"


def route_message(message: Optional[Any]) -> str:
    """
    Decide the next step from the latest message alone.

    "act" when it carries one or more tool calls; "terminate" for anything
    else, including a missing message.
    """
    return ROUTE_ACT if has_tool_calls(message) else ROUTE_TERMINATE


def route_after_reasoning(state: AgentState) -> str:
    """Conditional edge out of the reasoning node."""
    messages = state.get("messages") or []
    last_message = messages[-1] if messages else None
    route = route_message(last_message)

    if route == ROUTE_ACT:
        call_count = len(getattr(last_message, "tool_calls", None) or []) + len(
            getattr(last_message, "invalid_tool_calls", None) or []
        )
        logger.info(f"Router: 🔧 act ({call_count} tool call(s))")
    else:
        logger.info("Router: 🏁 terminate")
    return route
