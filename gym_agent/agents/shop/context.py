"""
Shop agent context - dependencies passed to workflow nodes
"""

from dataclasses import dataclass
from typing import List, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_core.runnables import Runnable

from gym_agent.memory.conversation_store import trim_messages_for_context
from gym_agent.tools.registry import ToolRegistry


@dataclass
class ShopContext:
    """Context holding dependencies for shop agent nodes"""

    llm: BaseChatModel  # Plain model, used once the tool-round cap is hit
    llm_with_tools: Runnable  # Model with the registry's tools bound
    tools: ToolRegistry
    system_prompt: str
    max_tool_rounds: int
    max_history_messages: int
    emit_tool_events: bool = True

    def prepare_history(self, messages: Sequence[BaseMessage]) -> List[BaseMessage]:
        """History trimmed for one model call (storage is untouched)."""
        return trim_messages_for_context(messages, self.max_history_messages)
