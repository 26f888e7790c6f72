from .direction import Direction, Endpoint, High, Low
from .binary_search import (
    between,
    binary_search,
    binary_search_async,
    first_occurrence,
    first_occurrence_async,
)

__all__ = [
    "Direction", "Endpoint", "High", "Low",
    "between", "binary_search", "binary_search_async",
    "first_occurrence", "first_occurrence_async",
]
