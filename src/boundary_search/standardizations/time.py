from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Union

Timestamp = Union[int, float, str, datetime]


def to_datetime(ts: Timestamp) -> datetime:
    """
    Converts a timestamp into a timezone-aware UTC datetime.

    Args:
        ts (int | float | str | datetime): The input timestamp in various formats:
            - `int` / `float` → Epoch seconds.
            - `str` → ISO 8601 (`YYYY-MM-DD HH:MM:SS` or `YYYY-MM-DD`), UTC unless an offset is given.
            - `datetime` → Naive values are taken as UTC, aware ones are converted to UTC.

    Returns:
        datetime: The same instant in UTC.
    """
    if isinstance(ts, bool):
        raise TypeError(f"Unsupported timestamp type: {type(ts)}")

    if isinstance(ts, (int, float)):
        return datetime.fromtimestamp(ts, tz=timezone.utc)

    if isinstance(ts, str):
        try:
            ts = datetime.fromisoformat(ts)
        except ValueError:
            raise ValueError(f"Invalid timestamp format: {ts}. Expected ISO 8601 format.")

    if isinstance(ts, datetime):
        if ts.tzinfo is None:
            return ts.replace(tzinfo=timezone.utc)
        return ts.astimezone(timezone.utc)

    raise TypeError(f"Unsupported timestamp type: {type(ts)}")


def to_unix_timestamp(ts: Timestamp, to_int: bool = True) -> Union[int, float]:
    """
    Converts a timestamp into a UNIX timestamp.

    Accepts the same inputs as `to_datetime`; naive datetimes and offset-less strings are UTC.
    If `to_int` is True the result is truncated to whole seconds, otherwise sub-second precision is kept.
    """
    if isinstance(ts, (int, float)) and not isinstance(ts, bool):
        return int(ts) if to_int else float(ts)

    seconds = to_datetime(ts).timestamp()
    return int(seconds) if to_int else seconds


def time_between(granularity: Union[int, float, timedelta]) -> Callable[[datetime, datetime], Optional[datetime]]:
    """
    Builds a `between` function that lets `binary_search` run over datetimes.

    Candidates sit on a grid of `granularity` steps anchored at the low bound, so with grid-aligned
    bounds the search ends with the two endpoints exactly one step apart.

    Args:
        granularity (int | float | timedelta): Grid step, in seconds if given as a number.

    Returns:
        Callable[[datetime, datetime], Optional[datetime]]: The midpoint, rounded down to the grid,
            or None once the bounds are less than two steps apart.

    Raises:
        ValueError: If `granularity` is not positive.
    """
    step = granularity if isinstance(granularity, timedelta) else timedelta(seconds=granularity)
    if step <= timedelta(0):
        raise ValueError(f"Granularity must be positive, got {granularity}")

    def between(low: datetime, high: datetime) -> Optional[datetime]:
        steps = (high - low) // step
        if steps <= 1:
            return None
        return low + (steps // 2) * step

    return between
