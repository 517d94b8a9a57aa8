"""
API routes
"""

from gym_agent.api.routes import chat

__all__ = ["chat"]
