"""
Shop agent workflow state
"""

from typing import Annotated, Sequence, TypedDict

from langchain_core.messages import BaseMessage
from langgraph.graph.message import add_messages


class AgentState(TypedDict):
    """State for the shop agent workflow"""
    messages: Annotated[Sequence[BaseMessage], add_messages]  # Append-only conversation history
    tool_rounds: int  # Acting steps taken in the current turn (reset by every new user message)
