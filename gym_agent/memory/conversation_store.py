"""
Conversation store - thread-keyed checkpointing for the agent graph.

Provides:
- Checkpointer initialization (in-memory, or SQLite with WAL mode via aiosqlite)
- load(thread_id) for reading a thread's message history
- Per-thread locks so two requests never mutate one thread concurrently
- Context trimming that keeps tool-call/tool-result pairs intact

Saving is done by the compiled LangGraph workflow: every completed super-step
is checkpointed under the thread id passed in the run config.
"""

import asyncio
import weakref
from pathlib import Path
from typing import List, Optional, Sequence

import aiosqlite
from langchain_core.messages import BaseMessage, HumanMessage
from langgraph.checkpoint.base import BaseCheckpointSaver
from langgraph.checkpoint.memory import MemorySaver
from langgraph.checkpoint.sqlite.aio import AsyncSqliteSaver
from loguru import logger

from gym_agent.config.settings import settings


def thread_config(thread_id: str) -> dict:
    """LangGraph run config addressing one conversation thread."""
    return {"configurable": {"thread_id": thread_id}}


def trim_messages_for_context(messages: Sequence[BaseMessage], max_messages: int) -> List[BaseMessage]:
    """
    Keep the most recent messages for the model context.

    The window always starts on a user message, so it never opens with a tool
    result whose tool call was cut off.
    """
    messages = list(messages)
    if len(messages) <= max_messages:
        return messages

    trimmed = messages[-max_messages:]
    while trimmed and not isinstance(trimmed[0], HumanMessage):
        trimmed.pop(0)
    if trimmed:
        return trimmed

    # One turn longer than the window: start from its user message
    for index in range(len(messages) - 1, -1, -1):
        if isinstance(messages[index], HumanMessage):
            return messages[index:]
    return messages


class ConversationStore:
    """Abstraction layer over the LangGraph checkpointer"""

    def __init__(self, backend: Optional[str] = None, db_path: Optional[str] = None):
        """
        Args:
            backend: "memory" or "sqlite" (defaults to settings.checkpoint_backend)
            db_path: SQLite file (defaults to settings.conversation_db_path_resolved)
        """
        self.backend = (backend or settings.checkpoint_backend).lower()
        if self.backend not in ("memory", "sqlite"):
            raise ValueError(f"Unsupported checkpoint backend: {self.backend}. Supported: 'memory', 'sqlite'")

        self.db_path = Path(db_path or getattr(settings, "conversation_db_path_resolved", settings.conversation_db_path))
        self._conn: Optional[aiosqlite.Connection] = None
        self._checkpointer: Optional[BaseCheckpointSaver] = None
        # A lock lives only while some turn holds or awaits it
        self._locks: "weakref.WeakValueDictionary[str, asyncio.Lock]" = weakref.WeakValueDictionary()

        if self.backend == "memory":
            self._checkpointer = MemorySaver()

    async def async_init(self):
        """Open the SQLite connection - call this from lifespan startup"""
        if self._checkpointer is not None:
            return

        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            conn = await aiosqlite.connect(str(self.db_path), timeout=10.0)
            await conn.execute("PRAGMA journal_mode=WAL")
            await conn.execute("PRAGMA synchronous=NORMAL")
            await conn.execute("PRAGMA busy_timeout=5000")
            await conn.commit()
        except Exception as e:
            logger.error(f"Failed to open conversation database at {self.db_path}: {e}")
            raise

        self._conn = conn
        self._checkpointer = AsyncSqliteSaver(conn)
        logger.info(f"Initialized AsyncSqliteSaver checkpointer at {self.db_path}")

    @property
    def checkpointer(self) -> BaseCheckpointSaver:
        if self._checkpointer is None:
            raise RuntimeError("ConversationStore not initialized. Call async_init() first.")
        return self._checkpointer

    async def close(self):
        """Close the aiosqlite connection (no-op for the in-memory backend)"""
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
            self._checkpointer = None
            logger.debug("Closed aiosqlite connection")

    def thread_lock(self, thread_id: str) -> asyncio.Lock:
        """Lock serializing turns on one thread (callers must keep a reference while using it)."""
        lock = self._locks.get(thread_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[thread_id] = lock
        return lock

    async def load(self, thread_id: str) -> List[BaseMessage]:
        """Message history for a thread; empty for a thread never seen."""
        checkpoint_tuple = await self.checkpointer.aget_tuple(thread_config(thread_id))
        if checkpoint_tuple is None:
            return []
        channel_values = checkpoint_tuple.checkpoint.get("channel_values", {})
        return list(channel_values.get("messages", []))


_conversation_store: Optional[ConversationStore] = None


def get_conversation_store() -> ConversationStore:
    """Shared store instance (singleton)."""
    global _conversation_store
    if _conversation_store is None:
        _conversation_store = ConversationStore()
    return _conversation_store
