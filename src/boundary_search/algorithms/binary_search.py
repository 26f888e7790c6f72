from numbers import Integral
from pathlib import Path
from typing import Awaitable, Callable, Optional, Tuple, TypeVar

from ..configs import CONFIG
from ..loggers import LoggerManager
from .direction import Direction, Endpoint, High, Low

X = TypeVar("X")
A = TypeVar("A")
B = TypeVar("B")

Between = Callable[[X, X], Optional[X]]

_logger = LoggerManager(Path(CONFIG.LOG_DIR), CONFIG.LOG_LEVEL).get_logger("search.log")


def between(low: int, high: int) -> Optional[int]:
    """
    Returns the integer midway between `low` and `high`, or None if no integer lies strictly between them.

    The midpoint is floored, so on an even gap it leans towards `low`.

    Raises:
        TypeError: If either bound is not an integer (booleans included).
    """
    for bound in (low, high):
        if isinstance(bound, bool) or not isinstance(bound, Integral):
            raise TypeError(f"Unsupported index type: {type(bound)}")

    if high <= low + 1:
        return None

    return low + (high - low) // 2


def _endpoints(low: Tuple[X, A], high: Tuple[X, B], validate: Optional[bool]) -> Tuple[Endpoint, Endpoint]:
    low, high = Endpoint(*low), Endpoint(*high)

    if validate is None:
        validate = CONFIG.VALIDATE_BOUNDS

    if validate and low.index > high.index:
        raise ValueError(f"Invalid range: low ({low.index}) is after high ({high.index}).")

    return low, high


def _narrow(low: Endpoint, high: Endpoint, candidate: X, direction: Direction) -> Tuple[Endpoint, Endpoint]:
    if isinstance(direction, Low):
        _logger.debug(f"⬆️ {candidate} is low")
        return Endpoint(candidate, direction.witness), high

    if isinstance(direction, High):
        _logger.debug(f"⬇️ {candidate} is high")
        return low, Endpoint(candidate, direction.witness)

    raise TypeError(f"Classifier must return Low or High, got {type(direction)}")


def binary_search(
    low: Tuple[X, A],
    high: Tuple[X, B],
    classify: Callable[[X], Direction],
    between: Between = between,
    validate: Optional[bool] = None
) -> Tuple[Endpoint, Endpoint]:
    """
    Finds the largest index classified low and the smallest index classified high.

    `classify` must be monotone over `[low[0], high[0]]`: every index below some threshold is `Low`,
    every index at or above it is `High`. This is assumed, not checked. The bounds themselves are never
    probed, the caller vouches for them.

    Args:
        low (Tuple[X, A]): `(lower_bound, witness)`, an index known to be low and the witness that goes with it.
        high (Tuple[X, B]): `(upper_bound, witness)`, an index known to be high and the witness that goes with it.
        classify (Callable[[X], Direction]): Called with each candidate index, returns `Low(w)` or `High(w)`.
        between (Callable[[X, X], Optional[X]]): Picks the next candidate strictly between two indices,
            or returns None when there is none. Defaults to the integer midpoint.
        validate (Optional[bool]): Reject `low[0] > high[0]` with a ValueError. Defaults to `CONFIG.VALIDATE_BOUNDS`.
            When off, reversed bounds come back unchanged.

    Returns:
        Tuple[Endpoint, Endpoint]: `((largest_low, low_witness), (smallest_high, high_witness))`.
            Each witness is the one from the last `Low`/`High` returned by `classify`, or the input witness
            if that side never moved. Equal or adjacent bounds are returned as given without calling `classify`.

    Raises:
        ValueError: If validation is on and the low bound is above the high bound.
        TypeError: If `classify` returns something other than `Low` or `High`.
    """
    low, high = _endpoints(low, high, validate)
    probes = 0

    while True:
        candidate = between(low.index, high.index)
        if candidate is None:
            break

        low, high = _narrow(low, high, candidate, classify(candidate))
        probes += 1

    _logger.debug(f"🎯 Boundary between {low.index} and {high.index} after {probes} probes")
    return low, high


async def binary_search_async(
    low: Tuple[X, A],
    high: Tuple[X, B],
    classify: Callable[[X], Awaitable[Direction]],
    between: Between = between,
    validate: Optional[bool] = None
) -> Tuple[Endpoint, Endpoint]:
    """
    Asynchronous version of `binary_search`: `classify` is awaited at each candidate.

    Probes happen one at a time, in the same order `binary_search` would make them.
    """
    low, high = _endpoints(low, high, validate)
    probes = 0

    while True:
        candidate = between(low.index, high.index)
        if candidate is None:
            break

        low, high = _narrow(low, high, candidate, await classify(candidate))
        probes += 1

    _logger.debug(f"🎯 Boundary between {low.index} and {high.index} after {probes} probes")
    return low, high


def first_occurrence(condition: Callable[[int], bool], start: int, end: int) -> int:
    """
    Finds the first integer in `[start, end]` where `condition` is True.

    Both ends are probed before searching, so the range does not need to contain the transition.

    Args:
        condition (Callable[[int], bool]): Monotone predicate, False up to some point and True from there on.
        start (int): Lower bound of the search range.
        end (int): Upper bound of the search range.

    Returns:
        int:
            The first index where `condition` is True.
            -1 if the condition is not met even at `end`.

    Raises:
        ValueError: If `start > end`.
    """
    if start > end:
        raise ValueError(f"Invalid range: start ({start}) is after end ({end}).")

    if not condition(end):
        _logger.debug(f"🤷 Condition never met in [{start}, {end}]")
        return -1

    if start == end or condition(start):
        return start

    _, high = binary_search((start, None), (end, None), lambda x: High() if condition(x) else Low())
    return high.index


async def first_occurrence_async(condition: Callable[[int], Awaitable[bool]], start: int, end: int) -> int:
    """
    Asynchronous version of `first_occurrence`: `condition` is awaited.

    Returns:
        int: The first index where `condition` is True, or -1 if it is not met even at `end`.

    Raises:
        ValueError: If `start > end`.
    """
    if start > end:
        raise ValueError(f"Invalid range: start ({start}) is after end ({end}).")

    if not await condition(end):
        _logger.debug(f"🤷 Condition never met in [{start}, {end}]")
        return -1

    if start == end or await condition(start):
        return start

    async def classify(x: int) -> Direction:
        return High() if await condition(x) else Low()

    _, high = await binary_search_async((start, None), (end, None), classify)
    return high.index
