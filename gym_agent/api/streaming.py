"""
Streaming relay - forwards agent events to an SSE response.

A producer task consumes the LangGraph event stream and pushes StreamEvents
onto an asyncio queue; the response generator drains the queue. The producer
is not tied to the response: if the client goes away the turn still runs to
completion and is checkpointed.

Every relay ends with exactly one done event, after an error event when the
producer failed.
"""

import asyncio
from typing import Any, AsyncIterator, Dict, Optional, Set

from loguru import logger

from gym_agent.api.models import StreamEvent
from gym_agent.config.constants import SSE_DONE_MARKER, STREAM_INTERRUPTED_MESSAGE, TOOL_STARTED_EVENT
from gym_agent.llm.response_utils import extract_text_from_response
from gym_agent.utils.errors import StreamRelayFailure


# Strong references so running producers are not garbage collected
_background_tasks: Set[asyncio.Task] = set()


def format_sse(event: StreamEvent) -> str:
    """Serialize one event as an SSE data record."""
    if event.type == "done":
        return f"data: {SSE_DONE_MARKER}\n\n"
    return f"data: {event.model_dump_json(exclude_none=True)}\n\n"


def translate_event(event: Dict[str, Any], emit_tool_events: bool = True) -> Optional[StreamEvent]:
    """Map a LangGraph v2 event to a StreamEvent, or None when it is not forwarded."""
    event_type = event.get("event")

    if event_type == "on_chat_model_stream":
        data = event.get("data") or {}
        chunk = data.get("chunk")
        if chunk is None:
            return None
        text = extract_text_from_response(chunk)
        if not text:
            # Tool-call chunks carry no text
            return None
        return StreamEvent(type="token", content=text)

    if event_type == "on_custom_event" and event.get("name") == TOOL_STARTED_EVENT:
        if not emit_tool_events:
            return None
        data = event.get("data") or {}
        return StreamEvent(type="tool_started", tool=data.get("tool"))

    return None


class StreamRelay:
    """Queue-backed relay from an agent event stream to stream events"""

    def __init__(self, events: AsyncIterator[Dict[str, Any]], emit_tool_events: bool = True):
        self._events = events
        self._emit_tool_events = emit_tool_events
        self._queue: "asyncio.Queue[StreamEvent]" = asyncio.Queue()
        self._task: Optional[asyncio.Task] = None
        self._done_sent = False
        self.failure: Optional[StreamRelayFailure] = None
        self.tokens_forwarded = 0

    @property
    def task(self) -> Optional[asyncio.Task]:
        return self._task

    def start(self) -> asyncio.Task:
        """Start the producer task (idempotent)."""
        if self._task is None:
            self._task = asyncio.create_task(self._produce())
            _background_tasks.add(self._task)
            self._task.add_done_callback(_background_tasks.discard)
        return self._task

    async def _produce(self):
        try:
            async for event in self._events:
                stream_event = translate_event(event, self._emit_tool_events)
                if stream_event is None:
                    continue
                if stream_event.type == "token":
                    self.tokens_forwarded += 1
                self._queue.put_nowait(stream_event)
        except Exception as e:
            self.failure = StreamRelayFailure(f"Stream relay failed: {e}")
            logger.opt(exception=e).error(f"Stream loop error after {self.tokens_forwarded} token(s)")
            self._queue.put_nowait(StreamEvent(type="error", content=STREAM_INTERRUPTED_MESSAGE))
        finally:
            self._finish()

    def _finish(self):
        if self._done_sent:
            return
        self._done_sent = True
        self._queue.put_nowait(StreamEvent(type="done"))
        logger.info(f"Stream finished ({self.tokens_forwarded} token(s), failed={self.failure is not None})")

    async def events(self) -> AsyncIterator[StreamEvent]:
        """Yield events until (and including) the done terminator."""
        self.start()
        while True:
            event = await self._queue.get()
            yield event
            if event.type == "done":
                return

    async def sse(self) -> AsyncIterator[str]:
        """SSE-formatted records for a StreamingResponse."""
        async for event in self.events():
            yield format_sse(event)
