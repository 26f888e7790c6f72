from .algorithms import (
    Direction,
    Endpoint,
    High,
    Low,
    between,
    binary_search,
    binary_search_async,
    first_occurrence,
    first_occurrence_async,
)
from .standardizations import time_between

__all__ = [
    "Direction", "Endpoint", "High", "Low",
    "between", "binary_search", "binary_search_async",
    "first_occurrence", "first_occurrence_async",
    "time_between",
]
