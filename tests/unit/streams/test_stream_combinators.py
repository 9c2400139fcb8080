# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for the stream combinators."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

import pytest

from dav_sdk.errors import StreamAlreadyConsumedError
from dav_sdk.streams import (
    TopicStream,
    flat_map_merge,
    from_awaitable,
    map_stream,
    merge_all,
)

TOPIC = "home-topic"


class ListStream(TopicStream[object]):
    """Stream over fixed items; an Exception item is raised instead of yielded."""

    def __init__(self, items: list[object], topic: str = TOPIC, delay: float = 0) -> None:
        super().__init__(topic)
        self._items = items
        self._delay = delay
        self.closed = False

    async def _iterate(self) -> AsyncIterator[object]:
        for item in self._items:
            if self.closed:
                return
            if self._delay:
                await asyncio.sleep(self._delay)
            if isinstance(item, Exception):
                raise item
            yield item

    async def close(self) -> None:
        self.closed = True


async def _collect(stream: TopicStream[object]) -> list[object]:
    return [item async for item in stream]


class TestMapStream:
    @pytest.mark.asyncio
    async def test_maps_and_keeps_topic(self) -> None:
        mapped = map_stream(ListStream([1, 2, 3]), lambda x: x * 10)

        assert mapped.topic == TOPIC
        assert await _collect(mapped) == [10, 20, 30]

    @pytest.mark.asyncio
    async def test_error_passes_through(self) -> None:
        mapped = map_stream(ListStream([1, ValueError("bad")]), str)
        received = []

        with pytest.raises(ValueError, match="bad"):
            async for item in mapped:
                received.append(item)

        assert received == ["1"]

    @pytest.mark.asyncio
    async def test_close_closes_source(self) -> None:
        source = ListStream([1])
        await map_stream(source, str).close()
        assert source.closed


class TestFromAwaitable:
    @pytest.mark.asyncio
    async def test_single_element(self) -> None:
        async def compute() -> str:
            return "done"

        stream = from_awaitable(compute(), TOPIC)

        assert stream.topic == TOPIC
        assert await _collect(stream) == ["done"]

    @pytest.mark.asyncio
    async def test_failure_is_stream_error(self) -> None:
        async def explode() -> str:
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await _collect(from_awaitable(explode(), TOPIC))

    @pytest.mark.asyncio
    async def test_close_before_iteration_discards_coroutine(self) -> None:
        async def compute() -> str:
            return "unused"

        stream = from_awaitable(compute(), TOPIC)
        await stream.close()


class TestMergeAll:
    @pytest.mark.asyncio
    async def test_merges_every_inner_element(self) -> None:
        outer = ListStream([ListStream([1, 2]), ListStream([3]), ListStream([])])

        merged = merge_all(outer)

        assert merged.topic == TOPIC
        assert sorted(await _collect(merged)) == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_inner_streams_run_concurrently(self) -> None:
        slow = ListStream(["slow"], delay=0.2)
        fast = ListStream(["fast"], delay=0.01)

        assert await _collect(merge_all(ListStream([slow, fast]))) == ["fast", "slow"]

    @pytest.mark.asyncio
    async def test_inner_error_terminates_and_closes(self) -> None:
        source = ListStream([ListStream([RuntimeError("inner")])])

        with pytest.raises(RuntimeError, match="inner"):
            await _collect(merge_all(source))

        assert source.closed

    @pytest.mark.asyncio
    async def test_outer_error_terminates(self) -> None:
        source = ListStream([ListStream([1]), LookupError("outer")])

        with pytest.raises(LookupError):
            await _collect(merge_all(source))


class TestFlatMapMerge:
    @pytest.mark.asyncio
    async def test_emits_in_completion_order(self) -> None:
        delays = {"a": 0.2, "b": 0.01}

        async def derive(item: str) -> str:
            await asyncio.sleep(delays[item])
            return item.upper()

        stream = flat_map_merge(ListStream(["a", "b"]), derive)

        assert stream.topic == TOPIC
        assert await _collect(stream) == ["B", "A"]

    @pytest.mark.asyncio
    async def test_step_failure_terminates(self) -> None:
        async def derive(item: int) -> int:
            if item == 2:
                raise ValueError("step failed")
            return item

        with pytest.raises(ValueError, match="step failed"):
            await _collect(flat_map_merge(ListStream([1, 2]), derive))

    @pytest.mark.asyncio
    async def test_single_iteration(self) -> None:
        async def derive(item: int) -> int:
            return item

        stream = flat_map_merge(ListStream([1]), derive)
        await _collect(stream)

        with pytest.raises(StreamAlreadyConsumedError):
            await _collect(stream)
