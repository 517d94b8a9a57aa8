"""
Catalog layer - static product and company records
"""

from gym_agent.catalog.models import Product, CompanyProfile
from gym_agent.catalog.store import CatalogStore, load_default_catalog

__all__ = ["Product", "CompanyProfile", "CatalogStore", "load_default_catalog"]
