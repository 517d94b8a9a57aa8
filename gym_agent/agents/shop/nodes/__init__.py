"""
Shop agent workflow nodes
"""

from gym_agent.agents.shop.nodes.reason import reasoning_node
from gym_agent.agents.shop.nodes.act import acting_node, invalid_tool_call_message, run_tool_call

__all__ = [
    "reasoning_node",
    "acting_node",
    "run_tool_call",
    "invalid_tool_call_message",
]
