"""
Configuration layer - Settings and constants
"""

from gym_agent.config.settings import settings, PROJECT_ROOT
from gym_agent.config.constants import (
    SEARCH_RESULT_LIMIT,
    DEFAULT_PRODUCT_COUNT,
    MAX_PRODUCT_COUNT,
    RETRY_SEARCH_TERMS,
    SSE_DONE_MARKER,
)

__all__ = [
    "settings",
    "PROJECT_ROOT",
    "SEARCH_RESULT_LIMIT",
    "DEFAULT_PRODUCT_COUNT",
    "MAX_PRODUCT_COUNT",
    "RETRY_SEARCH_TERMS",
    "SSE_DONE_MARKER",
]
