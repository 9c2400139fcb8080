# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for InMemoryBrokerSession.

Covers topic creation, FIFO delivery, consumer-group splitting, channel
stop semantics and the debugging history.
"""

from __future__ import annotations

import asyncio

import pytest

from dav_sdk.broker import InMemoryBrokerSession, InMemoryChannel
from dav_sdk.errors import BrokerConnectionError, InvalidTopicNameError, SendFailedError
from dav_sdk.models.drone_delivery import DroneDeliveryMessageParams
from dav_sdk.protocols import ProtocolBrokerSession, ProtocolRawChannel


def _message(text: str) -> DroneDeliveryMessageParams:
    return DroneDeliveryMessageParams(text=text)


async def _take(channel: InMemoryChannel, count: int) -> list[bytes]:
    values: list[bytes] = []
    async for record in channel:
        values.append(record.value)
        if len(values) == count:
            break
    return values


class TestInMemoryBrokerSessionTopics:
    """Topic lifecycle."""

    @pytest.mark.asyncio
    async def test_satisfies_protocols(
        self, inmemory_session: InMemoryBrokerSession
    ) -> None:
        await inmemory_session.create_topic("t1")
        channel = await inmemory_session.open_consumer("t1")

        assert isinstance(inmemory_session, ProtocolBrokerSession)
        assert isinstance(channel, ProtocolRawChannel)

    @pytest.mark.asyncio
    async def test_create_topic_is_idempotent(
        self, inmemory_session: InMemoryBrokerSession
    ) -> None:
        await inmemory_session.create_topic("t1")
        await inmemory_session.send("t1", _message("kept"))
        await inmemory_session.create_topic("t1")

        channel = await inmemory_session.open_consumer("t1")
        assert await _take(channel, 1) == [_message("kept").to_json()]
        assert await inmemory_session.get_topics() == ["t1"]

    @pytest.mark.asyncio
    async def test_send_to_unknown_topic_fails(
        self, inmemory_session: InMemoryBrokerSession
    ) -> None:
        with pytest.raises(SendFailedError):
            await inmemory_session.send("missing", _message("lost"))

    @pytest.mark.asyncio
    async def test_consume_unknown_topic_fails(
        self, inmemory_session: InMemoryBrokerSession
    ) -> None:
        with pytest.raises(BrokerConnectionError):
            await inmemory_session.open_consumer("missing")

    @pytest.mark.asyncio
    async def test_invalid_topic_name(
        self, inmemory_session: InMemoryBrokerSession
    ) -> None:
        with pytest.raises(InvalidTopicNameError):
            await inmemory_session.create_topic("..")


class TestInMemoryBrokerSessionDelivery:
    """Record delivery."""

    @pytest.mark.asyncio
    async def test_fifo_order_and_earliest_offset(
        self, inmemory_session: InMemoryBrokerSession
    ) -> None:
        await inmemory_session.create_topic("t1")
        for text in ("a", "b", "c"):
            await inmemory_session.send("t1", _message(text))

        channel = await inmemory_session.open_consumer("t1")
        values = await _take(channel, 3)

        assert values == [_message(t).to_json() for t in ("a", "b", "c")]

    @pytest.mark.asyncio
    async def test_two_channels_split_traffic(
        self, inmemory_session: InMemoryBrokerSession
    ) -> None:
        await inmemory_session.create_topic("shared")
        first = await inmemory_session.open_consumer("shared")
        second = await inmemory_session.open_consumer("shared")

        got_first: list[bytes] = []
        got_second: list[bytes] = []

        async def drain(channel: InMemoryChannel, sink: list[bytes]) -> None:
            async for record in channel:
                sink.append(record.value)

        tasks = [
            asyncio.create_task(drain(first, got_first)),
            asyncio.create_task(drain(second, got_second)),
        ]
        for text in ("a", "b", "c", "d"):
            await inmemory_session.send("shared", _message(text))

        for _ in range(100):
            if len(got_first) + len(got_second) == 4:
                break
            await asyncio.sleep(0.01)
        await first.stop()
        await second.stop()
        await asyncio.wait_for(asyncio.gather(*tasks), timeout=1.0)

        assert sorted(got_first + got_second) == sorted(
            _message(t).to_json() for t in ("a", "b", "c", "d")
        )
        assert set(got_first).isdisjoint(got_second)

    @pytest.mark.asyncio
    async def test_stop_ends_pending_iteration(
        self, inmemory_session: InMemoryBrokerSession
    ) -> None:
        await inmemory_session.create_topic("idle")
        channel = await inmemory_session.open_consumer("idle")

        async def drain() -> list[bytes]:
            return [record.value async for record in channel]

        task = asyncio.create_task(drain())
        await asyncio.sleep(0.01)
        await channel.stop()

        assert await asyncio.wait_for(task, timeout=1.0) == []
        assert channel.is_stopped

    @pytest.mark.asyncio
    async def test_close_stops_channels(self) -> None:
        session = InMemoryBrokerSession()
        await session.create_topic("t1")
        channel = await session.open_consumer("t1")

        await session.close()

        assert channel.is_stopped
        assert await session.get_topics() == []
        assert await session.get_channel_count() == 0

    @pytest.mark.asyncio
    async def test_stopped_channels_are_released(
        self, inmemory_session: InMemoryBrokerSession
    ) -> None:
        await inmemory_session.create_topic("t1")
        await inmemory_session.create_topic("t2")
        for _ in range(50):
            channel = await inmemory_session.open_consumer("t1")
            await channel.stop()
        kept = await inmemory_session.open_consumer("t2")

        assert await inmemory_session.get_channel_count(topic="t1") == 0
        assert await inmemory_session.get_channel_count() == 1

        await kept.stop()
        await kept.stop()
        assert await inmemory_session.get_channel_count() == 0


class TestInMemoryBrokerSessionHistory:
    """Debugging history."""

    @pytest.mark.asyncio
    async def test_history_is_bounded_and_filterable(self) -> None:
        session = InMemoryBrokerSession(max_history=3)
        await session.create_topic("t1")
        await session.create_topic("t2")
        for text in ("a", "b", "c"):
            await session.send("t1", _message(text))
        await session.send("t2", _message("d"))

        history = await session.get_history()
        assert len(history) == 3
        assert [r.offset for r in await session.get_history(topic="t1")] == [1, 2]
        assert [r.topic for r in await session.get_history(topic="t2")] == ["t2"]
        await session.close()
