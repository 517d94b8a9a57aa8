"""
Acting node - executes every tool call of the latest assistant message.

Calls run concurrently but their ToolMessages are returned in request order,
so each result sits in the same position as the call it answers.
"""

import asyncio
from typing import Any, Dict, List

from langchain_core.callbacks.manager import adispatch_custom_event
from langchain_core.messages import ToolMessage
from langchain_core.runnables import RunnableConfig
from loguru import logger

from gym_agent.agents.shop.context import ShopContext
from gym_agent.agents.shop.state import AgentState
from gym_agent.config.constants import TOOL_STARTED_EVENT
from gym_agent.tools.registry import ToolRegistry
from gym_agent.utils.errors import InvalidToolArgument, ToolExecutionFailure


def run_tool_call(registry: ToolRegistry, tool_call: Dict[str, Any]) -> ToolMessage:
    """Execute one tool call; failures become the ToolMessage content."""
    name = tool_call.get("name") or ""
    call_id = tool_call.get("id") or ""

    try:
        content = registry.execute(name, tool_call.get("args"))
        status = "success"
    except InvalidToolArgument as e:
        logger.warning(f"Invalid tool call {name} ({call_id}): {e.detail}")
        content = f"Error: {e}. Correct the arguments and call the tool again."
        status = "error"
    except ToolExecutionFailure as e:
        logger.warning(f"Tool {name} ({call_id}) produced no results: {e.detail}")
        content = f"No results from {name}: {e.detail}."
        status = "error"

    return ToolMessage(content=content, tool_call_id=call_id, name=name, status=status)


def invalid_tool_call_message(invalid_call: Dict[str, Any]) -> ToolMessage:
    """Answer a call whose arguments could not be parsed as JSON."""
    name = invalid_call.get("name") or ""
    call_id = invalid_call.get("id") or ""
    error = InvalidToolArgument(name, invalid_call.get("error") or "arguments are not valid JSON")

    logger.warning(f"Unparsable tool call {name} ({call_id}): {error.detail}")
    return ToolMessage(
        content=f"Error: {error}. Correct the arguments and call the tool again.",
        tool_call_id=call_id,
        name=name,
        status="error",
    )


def _request_order(message: Any) -> List[str]:
    """Call ids in the order the model emitted them, from the raw provider payload."""
    raw_calls = (getattr(message, "additional_kwargs", None) or {}).get("tool_calls") or []
    return [call.get("id") for call in raw_calls if isinstance(call, dict) and call.get("id")]


async def _announce_tool_call(tool_call: Dict[str, Any], config: RunnableConfig):
    try:
        await adispatch_custom_event(
            TOOL_STARTED_EVENT,
            {"tool": tool_call.get("name"), "id": tool_call.get("id")},
            config=config,
        )
    except RuntimeError as e:
        # Raised when the node runs outside a traced run (no parent run id)
        logger.debug(f"Skipped {TOOL_STARTED_EVENT} event: {e}")


async def acting_node(state: AgentState, config: RunnableConfig, ctx: ShopContext) -> dict:
    messages = state.get("messages") or []
    last_message = messages[-1] if messages else None
    tool_calls = list(getattr(last_message, "tool_calls", None) or [])
    invalid_calls = list(getattr(last_message, "invalid_tool_calls", None) or [])
    tool_rounds = (state.get("tool_rounds") or 0) + 1

    logger.info(
        f"Executing {len(tool_calls)} tool call(s), {len(invalid_calls)} unparsable, round {tool_rounds}"
    )

    if ctx.emit_tool_events:
        for tool_call in tool_calls:
            await _announce_tool_call(tool_call, config)

    results = await asyncio.gather(
        *(asyncio.to_thread(run_tool_call, ctx.tools, tool_call) for tool_call in tool_calls)
    )
    results = list(results) + [invalid_tool_call_message(call) for call in invalid_calls]

    # Parsed and unparsable calls live in separate lists; restore the emitted order
    order = _request_order(last_message)
    if invalid_calls and order:
        position = {call_id: index for index, call_id in enumerate(order)}
        results.sort(key=lambda message: position.get(message.tool_call_id, len(order)))

    return {"messages": results, "tool_rounds": tool_rounds}
