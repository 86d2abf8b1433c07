"""Range binary search package."""

from .search import (
    NOT_FOUND,
    InvalidArgumentError,
    RangeBinarySearch,
    RangeSearchResult,
    detect_direction,
    find_key_indexes,
)
from .validate import SearchSpaceValidationError, check_monotonic

__all__ = [
    "NOT_FOUND",
    "InvalidArgumentError",
    "RangeBinarySearch",
    "RangeSearchResult",
    "SearchSpaceValidationError",
    "check_monotonic",
    "detect_direction",
    "find_key_indexes",
]
