"""
Shop Agent - reasoning/acting LangGraph workflow

Workflow: START → agent ⇄ tools → END
"""

from contextlib import nullcontext
from typing import Any, AsyncIterator, Dict, List, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage
from langchain_core.runnables import RunnableConfig
from langgraph.checkpoint.memory import MemorySaver
from langgraph.graph import END, StateGraph
from loguru import logger

from gym_agent.agents.shop.context import ShopContext
from gym_agent.agents.shop.nodes import acting_node, reasoning_node
from gym_agent.agents.shop.prompts import build_system_prompt
from gym_agent.agents.shop.routing import ROUTE_ACT, ROUTE_TERMINATE, route_after_reasoning
from gym_agent.agents.shop.state import AgentState
from gym_agent.catalog import CatalogStore, load_default_catalog
from gym_agent.config.settings import settings
from gym_agent.llm.client import create_llm
from gym_agent.llm.response_utils import extract_text_from_response
from gym_agent.memory.conversation_store import ConversationStore, thread_config
from gym_agent.tools import build_tool_registry


_shared_agent: Optional["ShopAgent"] = None


def get_shop_agent(store: Optional[ConversationStore] = None, **kwargs) -> "ShopAgent":
    """Get shared shop agent instance (singleton)."""
    global _shared_agent
    if _shared_agent is None or _shared_agent.store is not store:
        _shared_agent = ShopAgent(store=store, **kwargs)
    return _shared_agent


class ShopAgent:
    """
    Gym equipment sales assistant.

    Each user message runs one turn of the loop: the agent node calls the chat
    model; if the response requests tools the tools node executes them and
    control returns to the agent node, otherwise the turn ends. Conversation
    state is checkpointed per thread id.
    """

    def __init__(
        self,
        llm: Optional[BaseChatModel] = None,
        catalog: Optional[CatalogStore] = None,
        checkpointer=None,
        store: Optional[ConversationStore] = None,
        system_prompt: Optional[str] = None,
        max_tool_rounds: Optional[int] = None,
        max_history_messages: Optional[int] = None,
        emit_tool_events: Optional[bool] = None,
    ):
        self.store = store
        if checkpointer is None:
            checkpointer = store.checkpointer if store is not None else MemorySaver()
        self.checkpointer = checkpointer

        self.llm = llm or create_llm(max_completion_tokens=settings.max_output_tokens)
        self.catalog = catalog or load_default_catalog()
        self.tools = build_tool_registry(self.catalog)

        self.ctx = ShopContext(
            llm=self.llm,
            llm_with_tools=self.llm.bind_tools(self.tools.as_langchain_tools()),
            tools=self.tools,
            system_prompt=system_prompt or build_system_prompt(),
            max_tool_rounds=max_tool_rounds if max_tool_rounds is not None else settings.max_tool_rounds,
            max_history_messages=(
                max_history_messages if max_history_messages is not None else settings.max_conversation_messages
            ),
            emit_tool_events=emit_tool_events if emit_tool_events is not None else settings.stream_tool_events,
        )

        self.workflow = self._build_workflow()

        logger.info(
            f"Initialized ShopAgent (tools: {', '.join(self.tools.names)}, "
            f"{len(self.catalog)} products, checkpointer: {type(self.checkpointer).__name__})"
        )

    def _build_workflow(self):
        """Build the LangGraph workflow."""
        ctx = self.ctx
        workflow = StateGraph(AgentState)

        async def agent(state: AgentState, config: RunnableConfig):
            return await reasoning_node(state, config, ctx)

        async def tools(state: AgentState, config: RunnableConfig):
            return await acting_node(state, config, ctx)

        workflow.add_node("agent", agent)
        workflow.add_node("tools", tools)

        workflow.set_entry_point("agent")
        workflow.add_conditional_edges(
            "agent",
            route_after_reasoning,
            {ROUTE_ACT: "tools", ROUTE_TERMINATE: END},
        )
        workflow.add_edge("tools", "agent")

        return workflow.compile(checkpointer=self.checkpointer)

    def _run_config(self, thread_id: str) -> Dict[str, Any]:
        config = thread_config(thread_id)
        # Each acting step costs two super-steps; leave room for the forced text answer
        config["recursion_limit"] = 2 * self.ctx.max_tool_rounds + 5
        return config

    @staticmethod
    def _turn_input(message: str) -> AgentState:
        return {"messages": [HumanMessage(content=message)], "tool_rounds": 0}

    def _thread_lock(self, thread_id: str):
        if self.store is None:
            return nullcontext()
        return self.store.thread_lock(thread_id)

    async def ainvoke_turn(self, message: str, thread_id: Optional[str] = None) -> AgentState:
        """Run one full turn and return the final state."""
        thread_id = thread_id or settings.default_thread_id
        logger.info(f"\n{'='*80}\nSHOP QUESTION [{thread_id}]: {message}\n{'='*80}")

        async with self._thread_lock(thread_id):
            return await self.workflow.ainvoke(self._turn_input(message), config=self._run_config(thread_id))

    async def achat(self, message: str, thread_id: Optional[str] = None) -> str:
        """Simple chat - returns the final assistant text."""
        final_state = await self.ainvoke_turn(message, thread_id)
        messages = final_state.get("messages") or []
        answer = extract_text_from_response(messages[-1]) if messages else ""
        logger.info(f"Answer: {answer[:200]}")
        return answer

    async def astream_events(self, message: str, thread_id: Optional[str] = None) -> AsyncIterator[dict]:
        """Stream LangGraph v2 events for one turn."""
        thread_id = thread_id or settings.default_thread_id
        logger.info(f"Streaming turn on thread {thread_id}")

        async with self._thread_lock(thread_id):
            async for event in self.workflow.astream_events(
                self._turn_input(message), config=self._run_config(thread_id), version="v2"
            ):
                yield event

    async def get_history(self, thread_id: Optional[str] = None) -> List[BaseMessage]:
        """Stored messages of a thread (empty for an unknown thread)."""
        thread_id = thread_id or settings.default_thread_id
        if self.store is not None and self.store.checkpointer is self.checkpointer:
            return await self.store.load(thread_id)
        snapshot = await self.workflow.aget_state(thread_config(thread_id))
        return list((snapshot.values or {}).get("messages", []))
