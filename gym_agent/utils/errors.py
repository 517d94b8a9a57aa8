"""
Custom error classes for the application
"""


class AgentError(Exception):
    """Base exception for agent errors"""
    pass


class InvalidToolArgument(AgentError):
    """Tool call arguments failed schema validation (or named an unknown tool)"""

    def __init__(self, tool_name: str, detail: str):
        self.tool_name = tool_name
        self.detail = detail
        super().__init__(f"Invalid arguments for tool '{tool_name}': {detail}")


class ToolExecutionFailure(AgentError):
    """Tool ran but produced nothing renderable"""

    def __init__(self, tool_name: str, detail: str = "no results"):
        self.tool_name = tool_name
        self.detail = detail
        super().__init__(f"Tool '{tool_name}' failed: {detail}")


class ModelInvocationFailure(AgentError):
    """Chat model call failed (transport or service error). Fatal to the turn."""
    pass


class StreamRelayFailure(AgentError):
    """Error while forwarding stream events to the client"""
    pass
