from dataclasses import dataclass
from typing import Any, Generic, NamedTuple, TypeVar, Union

A = TypeVar("A")
B = TypeVar("B")


class Endpoint(NamedTuple):
    """One side of the search interval: an index and the witness that confirmed it."""
    index: Any
    witness: Any = None


@dataclass(frozen=True)
class Low(Generic[A]):
    """The probed index is below the transition. `witness` becomes the new low witness."""
    witness: A = None


@dataclass(frozen=True)
class High(Generic[B]):
    """The probed index is at or above the transition. `witness` becomes the new high witness."""
    witness: B = None


# Result of a single classifier probe
Direction = Union[Low[A], High[B]]
