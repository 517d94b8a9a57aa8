"""
Shop agent - reasoning/acting loop over the gym equipment catalog
"""

from gym_agent.agents.shop.agent import ShopAgent, get_shop_agent
from gym_agent.agents.shop.state import AgentState
from gym_agent.agents.shop.routing import ROUTE_ACT, ROUTE_TERMINATE, route_message, route_after_reasoning

__all__ = [
    "ShopAgent",
    "get_shop_agent",
    "AgentState",
    "ROUTE_ACT",
    "ROUTE_TERMINATE",
    "route_message",
    "route_after_reasoning",
]
