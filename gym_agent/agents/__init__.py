"""
Agents layer
"""

from gym_agent.agents.shop import ShopAgent, get_shop_agent

__all__ = ["ShopAgent", "get_shop_agent"]
