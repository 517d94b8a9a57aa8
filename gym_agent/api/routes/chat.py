"""
Chat endpoints - SSE streaming, single-shot completion and thread history
"""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, StreamingResponse
from langchain_core.messages import AIMessage, HumanMessage
from loguru import logger

from gym_agent.agents.shop import ShopAgent, get_shop_agent
from gym_agent.api.models import ChatReply, ChatRequest, ErrorResponse, HistoryMessage, HistoryResponse
from gym_agent.api.streaming import StreamRelay
from gym_agent.llm.response_utils import extract_text_from_response
from gym_agent.memory.conversation_store import get_conversation_store


router = APIRouter(prefix="/chat", tags=["chat"])

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}

GENERIC_ERROR = "Internal Server Error"


def get_agent() -> ShopAgent:
    """Shared agent bound to the application's conversation store."""
    return get_shop_agent(store=get_conversation_store())


def _error_response() -> JSONResponse:
    return JSONResponse(status_code=500, content=ErrorResponse(error=GENERIC_ERROR).model_dump())


@router.post("")
async def chat(request: Request):
    """
    Stream one agent turn as Server-Sent Events.

    **Request:**
    ```json
    {"message": "Do you have a treadmill?", "threadId": "thread-123"}
    ```

    **Response:** `text/event-stream`
    ```
    data: {"type":"token","content":"Hajur, "}
    data: {"type":"token","content":"we have the Cardio Pro T90"}
    data: [DONE]
    ```

    A failure before streaming starts returns HTTP 500 with `{"error": ...}`.
    A failure mid-stream emits `{"type":"error","content":"Stream interrupted"}`
    followed by `data: [DONE]`.
    """
    try:
        body = ChatRequest.model_validate(await request.json())
        agent = get_agent()
        logger.info(f"Stream request - thread={body.thread_id}, message={body.message[:100]!r}")

        relay = StreamRelay(
            agent.astream_events(body.message, body.thread_id),
            emit_tool_events=agent.ctx.emit_tool_events,
        )
        relay.start()
    except Exception:
        logger.exception("[CHAT_POST_ERROR]")
        return _error_response()

    return StreamingResponse(relay.sse(), media_type="text/event-stream", headers=SSE_HEADERS)


@router.post("/complete", response_model=ChatReply)
async def chat_complete(request: Request):
    """Run one agent turn and return the final assistant text."""
    try:
        body = ChatRequest.model_validate(await request.json())
        agent = get_agent()
        reply = await agent.achat(body.message, body.thread_id)
    except Exception:
        logger.exception("[CHAT_COMPLETE_ERROR]")
        return _error_response()

    return ChatReply(reply=reply, thread_id=body.thread_id)


@router.get("/{thread_id}/history", response_model=HistoryResponse)
async def chat_history(thread_id: str):
    """User and assistant text messages stored for a thread."""
    try:
        messages = await get_agent().get_history(thread_id)
    except Exception:
        logger.exception("[CHAT_HISTORY_ERROR]")
        return _error_response()

    history = []
    for message in messages:
        if isinstance(message, HumanMessage):
            role = "user"
        elif isinstance(message, AIMessage):
            role = "assistant"
        else:
            continue
        text = extract_text_from_response(message)
        if text:
            history.append(HistoryMessage(role=role, content=text))

    return HistoryResponse(thread_id=thread_id, messages=history)
