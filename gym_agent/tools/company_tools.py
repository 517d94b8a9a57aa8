"""
Company tool - who we are, where we are, and our commercial policies
"""

from typing import List

from pydantic import BaseModel

from gym_agent.catalog.store import CatalogStore
from gym_agent.tools.registry import ToolDescriptor


class SearchCompanyInput(BaseModel):
    """No arguments"""
    pass


def search_company(catalog: CatalogStore) -> str:
    return catalog.company.text


def company_tool_descriptors(catalog: CatalogStore) -> List[ToolDescriptor]:
    return [
        ToolDescriptor(
            name="search_company",
            description=(
                "Company details when the user asks who or what we are, where we are located, "
                "delivery, payment, VAT or warranty policies"
            ),
            args_schema=SearchCompanyInput,
            handler=lambda args: search_company(catalog),
        ),
    ]
