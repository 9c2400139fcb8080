# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""In-Memory broker session for local development and testing.

Implements ProtocolBrokerSession using one asyncio.Queue per topic.
This implementation is designed for local development and testing scenarios
where a full message broker (Kafka) is not needed.

Features:
    - Topic-based message routing with FIFO ordering
    - Consumer-group semantics: every channel opened on a topic reads from
      the same queue, so records are split between them, never duplicated
    - Records produced before a channel opens are retained (earliest offset)
    - Record history tracking for debugging and testing
    - No external dependencies required

Usage:
    ```python
    from dav_sdk.broker.inmemory_broker_session import InMemoryBrokerSession

    session = InMemoryBrokerSession()
    await session.create_topic("needs")

    channel = await session.open_consumer("needs")
    await session.send("needs", params)

    async for record in channel:
        print(record.value)

    await session.close()
    ```
"""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from collections.abc import AsyncIterator, Callable
from dataclasses import dataclass
from typing import Optional
from uuid import UUID, uuid4

from dav_sdk.broker.util_topic import validate_topic_name
from dav_sdk.enums import EnumTransportType
from dav_sdk.errors import BrokerConnectionError, ModelErrorContext, SendFailedError
from dav_sdk.models.model_basic_params import BasicParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InMemoryRecord:
    """A record held by the in-memory broker."""

    topic: str
    value: bytes
    offset: int
    partition: int = 0
    key: Optional[bytes] = None


class InMemoryChannel:
    """Raw channel over an in-memory topic queue.

    Iteration waits on the topic queue until a record arrives or ``stop()``
    is called; stopping ends iteration normally and calls ``on_stop`` once.
    """

    def __init__(
        self,
        topic: str,
        queue: asyncio.Queue[InMemoryRecord],
        on_stop: Optional[Callable[[InMemoryChannel], None]] = None,
    ) -> None:
        self._topic = topic
        self._queue = queue
        self._on_stop = on_stop
        self._stopped = asyncio.Event()

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def is_stopped(self) -> bool:
        return self._stopped.is_set()

    def __aiter__(self) -> AsyncIterator[InMemoryRecord]:
        return self._records()

    async def _records(self) -> AsyncIterator[InMemoryRecord]:
        while not self._stopped.is_set():
            get_task = asyncio.ensure_future(self._queue.get())
            stop_task = asyncio.ensure_future(self._stopped.wait())
            try:
                await asyncio.wait(
                    {get_task, stop_task}, return_when=asyncio.FIRST_COMPLETED
                )
            finally:
                stop_task.cancel()
                if not get_task.done():
                    get_task.cancel()

            if get_task.done() and not get_task.cancelled():
                record = get_task.result()
                if self._stopped.is_set():
                    # Hand the record back to the group.
                    self._queue.put_nowait(record)
                    return
                yield record

    async def stop(self) -> None:
        if self._stopped.is_set():
            return
        self._stopped.set()
        if self._on_stop is not None:
            self._on_stop(self)


class InMemoryBrokerSession:
    """In-memory broker session for local development and testing.

    Attributes:
        max_history: Maximum number of records kept for get_history()
    """

    def __init__(self, max_history: int = 1000) -> None:
        self._max_history = max_history

        # Topic -> queue shared by every channel (consumer group = topic id)
        self._queues: dict[str, asyncio.Queue[InMemoryRecord]] = {}
        self._channels: dict[str, list[InMemoryChannel]] = defaultdict(list)

        # Topic -> offset counter for record ordering
        self._topic_offsets: dict[str, int] = defaultdict(int)

        self._history: list[InMemoryRecord] = []
        self._lock = asyncio.Lock()

    async def create_topic(self, topic_id: str) -> None:
        """Create ``topic_id``; creating an existing topic is a no-op."""
        correlation_id = uuid4()
        validate_topic_name(topic_id, correlation_id)
        async with self._lock:
            if topic_id in self._queues:
                logger.debug("Topic already exists: %s", topic_id)
                return
            self._queues[topic_id] = asyncio.Queue()
        logger.info(
            "Created topic: %s",
            topic_id,
            extra={"correlation_id": str(correlation_id)},
        )

    async def send(self, topic_id: str, params: BasicParams) -> None:
        """Serialize ``params`` and enqueue it on ``topic_id``.

        Raises:
            SendFailedError: If the topic does not exist
        """
        correlation_id = uuid4()
        validate_topic_name(topic_id, correlation_id)
        value = params.to_json()

        async with self._lock:
            queue = self._queues.get(topic_id)
            if queue is None:
                raise SendFailedError(
                    f"Failed to publish to topic {topic_id}: unknown topic",
                    context=self._context("send", topic_id, correlation_id),
                    topic=topic_id,
                )
            offset = self._topic_offsets[topic_id]
            self._topic_offsets[topic_id] = offset + 1

            record = InMemoryRecord(topic=topic_id, value=value, offset=offset)

            # Add to history (circular buffer)
            self._history.append(record)
            if len(self._history) > self._max_history:
                self._history.pop(0)

            queue.put_nowait(record)

        logger.debug(
            f"Published to topic {topic_id}",
            extra={
                "offset": offset,
                "params_type": f"{params.protocol}:{params.type}",
                "correlation_id": str(correlation_id),
            },
        )

    async def open_consumer(self, topic_id: str) -> InMemoryChannel:
        """Open a channel on ``topic_id``.

        Raises:
            BrokerConnectionError: If the topic does not exist
        """
        correlation_id = uuid4()
        validate_topic_name(topic_id, correlation_id)
        async with self._lock:
            queue = self._queues.get(topic_id)
            if queue is None:
                raise BrokerConnectionError(
                    f"Cannot consume unknown topic {topic_id}",
                    context=self._context("open_consumer", topic_id, correlation_id),
                    topic=topic_id,
                )
            channel = InMemoryChannel(topic_id, queue, on_stop=self._forget_channel)
            self._channels[topic_id].append(channel)
        logger.debug(
            "Channel opened",
            extra={"topic": topic_id, "group_id": topic_id},
        )
        return channel

    async def close(self) -> None:
        """Stop every open channel and drop all topics."""
        async with self._lock:
            channels = [ch for chs in self._channels.values() for ch in chs]
            self._channels.clear()
            self._queues.clear()
        for channel in channels:
            await channel.stop()
        logger.info("InMemoryBrokerSession closed")

    # =========================================================================
    # Debugging/Observability Methods
    # =========================================================================

    async def get_history(
        self,
        limit: int = 100,
        topic: Optional[str] = None,
    ) -> list[InMemoryRecord]:
        """Get recently produced records, most recent last.

        Args:
            limit: Maximum number of records to return
            topic: Optional topic filter
        """
        async with self._lock:
            history = self._history[-limit:]
            if topic:
                history = [record for record in history if record.topic == topic]
            return list(history)

    async def get_topics(self) -> list[str]:
        """Get list of created topics."""
        async with self._lock:
            return list(self._queues)

    async def get_channel_count(self, topic: Optional[str] = None) -> int:
        """Count channels that are open and not yet stopped."""
        async with self._lock:
            if topic is not None:
                return len(self._channels.get(topic, ()))
            return sum(len(channels) for channels in self._channels.values())

    def _forget_channel(self, channel: InMemoryChannel) -> None:
        channels = self._channels.get(channel.topic)
        if channels is None or channel not in channels:
            return
        channels.remove(channel)
        if not channels:
            del self._channels[channel.topic]

    @staticmethod
    def _context(
        operation: str, topic_id: str, correlation_id: UUID
    ) -> ModelErrorContext:
        return ModelErrorContext(
            transport_type=EnumTransportType.INMEMORY,
            operation=operation,
            target_name=f"inmemory.{topic_id}",
            correlation_id=correlation_id,
        )


__all__ = ["InMemoryBrokerSession", "InMemoryChannel", "InMemoryRecord"]
