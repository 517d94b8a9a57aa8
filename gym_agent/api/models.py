"""
Pydantic models for the chat API contract
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from gym_agent.config.settings import settings


class ChatRequest(BaseModel):
    """Body of POST /chat and POST /chat/complete"""
    message: str = Field(..., description="The user's message")
    thread_id: str = Field(
        default=settings.default_thread_id,
        alias="threadId",
        description="Conversation thread identifier",
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {"message": "Do you have a treadmill?", "threadId": "b6a1f1c2-thread"}
            ]
        },
    )


class StreamEvent(BaseModel):
    """
    One record of the chat event stream

    Event types:
    - token: generated text fragment
    - tool_started: a tool call is about to run
    - error: the stream failed; a done terminator follows
    - done: end of stream (serialized as the literal [DONE] record)
    """
    type: Literal["token", "tool_started", "error", "done"]
    content: Optional[str] = None
    tool: Optional[str] = None


class ChatReply(BaseModel):
    """Response of POST /chat/complete"""
    reply: str
    thread_id: str = Field(..., alias="threadId")

    model_config = ConfigDict(populate_by_name=True)


class HistoryMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class HistoryResponse(BaseModel):
    """Response of GET /chat/{threadId}/history"""
    thread_id: str = Field(..., alias="threadId")
    messages: List[HistoryMessage] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    """Health check response"""
    status: str = Field(..., description="Service health status")
    service: str = Field(..., description="Service name")
    version: str = Field(..., description="API version")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"status": "healthy", "service": "gym-agent-api", "version": "1.0.0"}
            ]
        }
    }
