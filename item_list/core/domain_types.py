"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ConditionKey wraps str — never pass a bare str where a key is meant
    - All derived-state tags and upstream names encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON log fields without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Value Types ─────────────────────────────────────────────────

ConditionKey = NewType("ConditionKey", str)


# ─── Constants ───────────────────────────────────────────────────

CONDITION_KEY_DELIMITER: str = "|"


# ─── Enums ───────────────────────────────────────────────────────

class ListStatus(str, Enum):
    """The three mutually exclusive derived-state variants."""
    NO_SOURCE_ITEMS = "no_source_items"
    EMPTY = "empty"
    RESULTS = "results"


class UpstreamSource(str, Enum):
    """Which collaborator triggered a recomputation."""
    FILTER_CONDITIONS = "filter_conditions"
    SEARCH_QUERY = "search_query"
    SOURCE = "source"
    REFRESH = "refresh"


class SourceStatus(str, Enum):
    """Item source lifecycle tag — only LOADED carries usable items."""
    PENDING = "pending"
    LOADED = "loaded"
    FAILED = "failed"
