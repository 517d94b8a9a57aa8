"""
Product tools - catalog search and featured product listing.

Both tools return a single human-readable text block; the reasoning step
turns that into the customer-facing answer.
"""

import re
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from gym_agent.catalog.models import Product
from gym_agent.catalog.store import CatalogStore
from gym_agent.config.constants import (
    DEFAULT_PRODUCT_COUNT,
    MAX_PRODUCT_COUNT,
    RETRY_SEARCH_TERMS,
    SEARCH_RESULT_LIMIT,
)
from gym_agent.tools.registry import ToolDescriptor
from gym_agent.utils.errors import ToolExecutionFailure

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class SearchProductInput(BaseModel):
    query: str = Field(..., description="ANY keyword: 'cardio', 'treadmill', '100kg'")


class GetProductsInput(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    number: Optional[str] = Field(
        default=str(DEFAULT_PRODUCT_COUNT),
        description="Number of products to show (5, 10, 20). Default: 5",
    )


def render_search_block(product: Product) -> str:
    return f"**{product.name}** ({product.category})\n{product.description}"


def render_listing_line(product: Product) -> str:
    return f"**{product.name}** ({product.category}): {product.description}"


def no_match_message(query: str) -> str:
    return f'No products match "{query}". Try: {", ".join(RETRY_SEARCH_TERMS)}'


def search_product(catalog: CatalogStore, query: str) -> str:
    """
    Case-insensitive substring search across every text field of a product.

    Matches keep catalog order and are cut at SEARCH_RESULT_LIMIT; there is
    no relevance ranking.
    """
    needle = query.lower()
    matches = catalog.lookup(lambda p: needle in p.searchable_text.lower())
    logger.info(f"search_product: query='{query}' matched {len(matches)} product(s)")

    if not matches:
        return no_match_message(query)

    return "\n\n".join(render_search_block(p) for p in matches[:SEARCH_RESULT_LIMIT])


def parse_product_count(number: Optional[str]) -> int:
    """
    Leading integer of ``number``, capped at MAX_PRODUCT_COUNT.

    Missing, unparsable, zero or negative input falls back to DEFAULT_PRODUCT_COUNT.
    """
    if number is None:
        return DEFAULT_PRODUCT_COUNT

    match = _LEADING_INT.match(number)
    count = int(match.group(1)) if match else 0
    if count <= 0:
        count = DEFAULT_PRODUCT_COUNT
    return min(count, MAX_PRODUCT_COUNT)


def get_products(catalog: CatalogStore, number: Optional[str] = str(DEFAULT_PRODUCT_COUNT)) -> str:
    """First N catalog products, N from parse_product_count."""
    count = parse_product_count(number)
    products = catalog.all()[:count]
    logger.info(f"get_products: requested={number!r} returning {len(products)} product(s)")

    if not products:
        raise ToolExecutionFailure("get_products", "the catalog is empty")

    return "\n\n".join(render_listing_line(p) for p in products)


def product_tool_descriptors(catalog: CatalogStore) -> List[ToolDescriptor]:
    return [
        ToolDescriptor(
            name="search_product",
            description="Smart search ALL product fields (name, description, category, specs, warranty, shipping) with ONE query",
            args_schema=SearchProductInput,
            handler=lambda args: search_product(catalog, args.query),
        ),
        ToolDescriptor(
            name="get_products",
            description="Get featured products. Use 'number' for custom count (5, 10, 20)",
            args_schema=GetProductsInput,
            handler=lambda args: get_products(catalog, args.number),
        ),
    ]
