"""
Utilities - logging setup and error types
"""

from gym_agent.utils.errors import (
    AgentError,
    InvalidToolArgument,
    ToolExecutionFailure,
    ModelInvocationFailure,
    StreamRelayFailure,
)
from gym_agent.utils.logger import setup_logger

__all__ = [
    "AgentError",
    "InvalidToolArgument",
    "ToolExecutionFailure",
    "ModelInvocationFailure",
    "StreamRelayFailure",
    "setup_logger",
]
