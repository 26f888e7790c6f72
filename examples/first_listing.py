import asyncio
from datetime import datetime, timezone

from boundary_search import High, Low, binary_search_async, time_between
from boundary_search.standardizations import to_datetime, to_unix_timestamp

LISTED_AT = to_datetime("2021-05-29 14:03:00")

async def fetch_candle(moment: datetime):
    """Stands in for an exchange request: returns a candle once the product is listed."""
    await asyncio.sleep(0.01)
    if moment < LISTED_AT:
        return None
    return [to_unix_timestamp(moment), 1.0, 1.2, 0.9, 1.1, 1500.0]

async def classify(moment: datetime):
    candle = await fetch_candle(moment)
    return Low() if candle is None else High(candle)

async def main():
    start = to_datetime("2021-01-01")
    end = datetime.now(timezone.utc).replace(second=0, microsecond=0) # on the same minute grid as `start`

    first_candle = await fetch_candle(end)
    _, (listed_at, candle) = await binary_search_async((start, None), (end, first_candle), classify, between=time_between(60))
    print(f"First candle at {listed_at} ({to_unix_timestamp(listed_at)}): {candle}")

if __name__ == "__main__":
    asyncio.run(main())
