"""
Main FastAPI application for the Wellness Nepal gym equipment assistant

This module creates and configures the FastAPI application with:
- CORS middleware for the chat frontend
- Chat routes (SSE streaming, completion, history)
- Health check endpoint
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from gym_agent.api.models import HealthResponse
from gym_agent.api.routes import chat
from gym_agent.config.settings import settings
from gym_agent.memory.conversation_store import get_conversation_store
from gym_agent.utils.logger import setup_logger

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Startup: configure logging and open the conversation checkpointer.
    Shutdown: close the checkpointer connection.
    """
    setup_logger()
    logger.info("🚀 FastAPI application starting...")
    logger.info("📚 API docs available at http://localhost:8000/docs")
    logger.info("🔄 Streaming endpoint at http://localhost:8000/chat")

    conversation_store = get_conversation_store()
    await conversation_store.async_init()
    logger.info(f"✅ Conversation store ready (backend: {conversation_store.backend})")

    yield

    logger.info("🛑 FastAPI application shutting down...")
    try:
        await conversation_store.close()
        logger.info("✅ Conversation store closed")
    except Exception as e:
        logger.warning(f"Error closing conversation store: {e}")


app = FastAPI(
    title=f"{settings.system_name} Gym Equipment Assistant API",
    description="""
    Streaming chat API for the gym equipment sales assistant.

    ## Usage

    ```bash
    curl -N -X POST http://localhost:8000/chat \\
         -H "Content-Type: application/json" \\
         -d '{"message": "Do you have a treadmill?", "threadId": "demo"}'
    ```
    """,
    version=API_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chat.router)


@app.get("/", tags=["root"])
async def root():
    """Root endpoint - API information"""
    return {
        "service": f"{settings.system_name} Gym Equipment Assistant API",
        "version": API_VERSION,
        "status": "running",
        "docs": "/docs",
        "endpoints": {
            "health": "/health",
            "chat": "/chat",
            "chat_complete": "/chat/complete",
            "history": "/chat/{threadId}/history",
        },
    }


@app.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check():
    """Health check endpoint"""
    return HealthResponse(status="healthy", service="gym-agent-api", version=API_VERSION)
