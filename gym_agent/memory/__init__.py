"""
Memory layer - Conversation checkpointing
"""

from gym_agent.memory.conversation_store import (
    ConversationStore,
    get_conversation_store,
    thread_config,
    trim_messages_for_context,
)

__all__ = [
    "ConversationStore",
    "get_conversation_store",
    "thread_config",
    "trim_messages_for_context",
]
