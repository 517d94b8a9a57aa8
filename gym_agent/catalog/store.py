"""
Catalog store - read-only, in-memory access to product and company records.

The store is passed to the tool layer at construction; nothing in the
application reaches for a process-wide catalog.
"""

from typing import Callable, Iterable, Optional, Tuple

from loguru import logger

from gym_agent.catalog.models import CompanyProfile, Product


class CatalogStore:
    """Immutable product list (insertion order preserved) plus the company profile"""

    def __init__(self, products: Iterable[Product], company: CompanyProfile):
        self._products: Tuple[Product, ...] = tuple(products)
        self._company = company

    def all(self) -> Tuple[Product, ...]:
        """All products in catalog order."""
        return self._products

    def lookup(self, predicate: Callable[[Product], bool]) -> Tuple[Product, ...]:
        """Products matching predicate, in catalog order. No match is an empty tuple."""
        return tuple(p for p in self._products if predicate(p))

    @property
    def company(self) -> CompanyProfile:
        return self._company

    def __len__(self) -> int:
        return len(self._products)


_default_store: Optional[CatalogStore] = None


def load_default_catalog() -> CatalogStore:
    """Build the store from the bundled catalog data (cached after first load)."""
    global _default_store
    if _default_store is None:
        from gym_agent.catalog.data import COMPANY_DATA, PRODUCTS_DATA

        _default_store = CatalogStore(
            products=[Product.from_dict(item) for item in PRODUCTS_DATA],
            company=CompanyProfile(text=COMPANY_DATA),
        )
        logger.info(f"Loaded catalog: {len(_default_store)} products")
    return _default_store
