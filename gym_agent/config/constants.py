"""
Application constants

Centralized constants used by the tool layer and the streaming relay.
"""

from typing import Tuple

# ============================================================================
# Product Tools
# ============================================================================

# search_product never returns more than this many blocks
SEARCH_RESULT_LIMIT = 5

# get_products count rules
DEFAULT_PRODUCT_COUNT = 5
MAX_PRODUCT_COUNT = 20

# Offered to the model when a search comes back empty
RETRY_SEARCH_TERMS: Tuple[str, ...] = ("treadmill", "Multi-Station", "100kg", "Cardio")


# ============================================================================
# Streaming
# ============================================================================

SSE_DONE_MARKER = "[DONE]"
STREAM_INTERRUPTED_MESSAGE = "Stream interrupted"

# Custom callback event dispatched by the acting node for every tool call
TOOL_STARTED_EVENT = "tool_started"
