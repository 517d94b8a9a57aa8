"""
Configuration management for the application.
Loads settings from environment variables and the project .env file.
"""

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from loguru import logger

# This file is at gym_agent/config/settings.py, so project root is 3 levels up
_project_root = Path(__file__).resolve().parent.parent.parent

# Export for use by the conversation store and logger - ensures consistent data/ paths
PROJECT_ROOT = _project_root

_env_file = _project_root / ".env"
if _env_file.exists():
    load_dotenv(dotenv_path=_env_file, override=True)
    logger.debug(f"Loaded .env from: {_env_file}")
else:
    load_dotenv(override=True)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # LLM Provider Selection
    llm_provider: str = Field(default="openai")  # Options: "openai" | "ollama"

    # API Keys
    openai_api_key: str = Field(default="")

    # OpenAI Configuration
    openai_model: str = Field(default="gpt-4o-mini")
    openai_temperature: float = Field(default=0.0)  # Deterministic tool selection

    # Ollama Configuration
    ollama_base_url: str = Field(default="http://localhost:11434")
    ollama_model: str = Field(default="llama3")

    # Token Limits
    max_output_tokens: int = Field(default=1500)

    # Agent Loop Configuration
    max_tool_rounds: int = Field(default=10)  # Acting steps per turn before tools are unbound
    max_conversation_messages: int = Field(default=40)  # Messages sent to the model per call

    # Conversation Checkpointing
    checkpoint_backend: str = Field(default="memory")  # "memory" | "sqlite"
    conversation_db_path: str = Field(default="data/conversations.db")
    default_thread_id: str = Field(default="default")

    # Streaming
    stream_tool_events: bool = Field(default=True)

    # API
    cors_origins: List[str] = Field(default=[
        "http://localhost:3000",  # Next.js dev server
        "http://127.0.0.1:3000",
    ])

    # Logging
    log_level: str = Field(default="INFO")
    log_to_file: bool = Field(default=False)

    # Branding used in prompts and API metadata
    system_name: str = Field(default="Wellness Nepal")

    class Config:
        env_file = str(_project_root / ".env")
        env_file_encoding = "utf-8"
        extra = "allow"


settings = Settings()

_conversation_db_path = Path(settings.conversation_db_path)
if not _conversation_db_path.is_absolute():
    _conversation_db_path = _project_root / _conversation_db_path

settings.conversation_db_path_resolved = str(_conversation_db_path)
