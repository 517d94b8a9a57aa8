"""
Reasoning node - one chat model call over the system prompt plus history
"""

from langchain_core.messages import SystemMessage
from langchain_core.runnables import RunnableConfig
from loguru import logger

from gym_agent.agents.shop.context import ShopContext
from gym_agent.agents.shop.state import AgentState
from gym_agent.utils.errors import ModelInvocationFailure


async def reasoning_node(state: AgentState, config: RunnableConfig, ctx: ShopContext) -> dict:
    """Call the model and append its response (text and/or tool calls)."""
    history = ctx.prepare_history(state.get("messages") or [])
    tool_rounds = state.get("tool_rounds") or 0

    model = ctx.llm_with_tools
    if tool_rounds >= ctx.max_tool_rounds:
        logger.warning(
            f"Tool-round cap reached ({tool_rounds}/{ctx.max_tool_rounds}); asking for a text answer without tools"
        )
        model = ctx.llm

    messages_for_llm = [SystemMessage(content=ctx.system_prompt)] + history
    logger.debug(f"Reasoning over {len(history)} history message(s), tool_rounds={tool_rounds}")

    try:
        response = await model.ainvoke(messages_for_llm, config=config)
    except Exception as e:
        logger.error(f"Chat model invocation failed: {e}")
        raise ModelInvocationFailure(f"Chat model invocation failed: {e}") from e

    tool_calls = getattr(response, "tool_calls", None) or []
    if tool_calls:
        logger.info(f"🧠 Model requested tools: {[call['name'] for call in tool_calls]}")
    else:
        logger.info("🧠 Model answered in text")

    return {"messages": [response]}
