"""
Tool layer - schema-validated lookups over the catalog
"""

from gym_agent.tools.registry import ToolDescriptor, ToolRegistry, build_tool_registry
from gym_agent.tools.product_tools import search_product, get_products, parse_product_count
from gym_agent.tools.company_tools import search_company

__all__ = [
    "ToolDescriptor",
    "ToolRegistry",
    "build_tool_registry",
    "search_product",
    "get_products",
    "parse_product_count",
    "search_company",
]
