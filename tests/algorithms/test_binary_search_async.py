import asyncio
import pytest
from boundary_search.algorithms import High, Low, binary_search, binary_search_async


@pytest.mark.asyncio
async def test_binary_search_async_finds_transition():
    async def classify(x):
        await asyncio.sleep(0)
        return Low() if x < 23 else High()

    result = await binary_search_async((1, None), (100, None), classify)
    assert result == ((22, None), (23, None))


@pytest.mark.asyncio
async def test_binary_search_async_matches_sync_calls():
    """Same classifier results, same call order."""
    listed_at = 1_700_000_123
    sync_probes, async_probes = [], []

    def classify(ts):
        sync_probes.append(ts)
        return High({"first_candle": ts}) if ts >= listed_at else Low(ts)

    async def classify_async(ts):
        async_probes.append(ts)
        return High({"first_candle": ts}) if ts >= listed_at else Low(ts)

    expected = binary_search((1_600_000_000, None), (1_800_000_000, None), classify)
    result = await binary_search_async((1_600_000_000, None), (1_800_000_000, None), classify_async)

    assert result == expected
    assert async_probes == sync_probes
    assert result[1] == (listed_at, {"first_candle": listed_at})


@pytest.mark.asyncio
async def test_binary_search_async_adjacent_bounds_untouched():
    calls = []

    async def classify(x):
        calls.append(x)
        return High()

    assert await binary_search_async((3, "a"), (4, "b"), classify) == ((3, "a"), (4, "b"))
    assert calls == []


@pytest.mark.asyncio
async def test_binary_search_async_reversed_bounds_rejected():
    async def classify(x):
        return High()

    with pytest.raises(ValueError):
        await binary_search_async((4, None), (3, None), classify, validate=True)


@pytest.mark.asyncio
async def test_binary_search_async_rejects_bad_classification():
    async def classify(x):
        return "low"

    with pytest.raises(TypeError):
        await binary_search_async((0, None), (10, None), classify)
