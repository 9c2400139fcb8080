# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Protocol definition for broker sessions.

Implementations:
    - KafkaBrokerSession: aiokafka-backed, one connection per operation
    - InMemoryBrokerSession: in-process queues for local development and tests

Every method is a suspension point and must be bounded by a timeout in
implementations that talk to a remote broker.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from dav_sdk.models.model_basic_params import BasicParams
from dav_sdk.protocols.protocol_raw_channel import ProtocolRawChannel


@runtime_checkable
class ProtocolBrokerSession(Protocol):
    """Topic-level operations the SDK needs from a broker."""

    async def create_topic(self, topic_id: str) -> None:
        """Create ``topic_id``; an already existing topic is not a failure.

        Raises:
            TopicCreationTimeoutError: If the request timed out
            TopicCreationFailedError: If the broker reported a failure
        """
        ...

    async def send(self, topic_id: str, params: BasicParams) -> None:
        """Serialize ``params`` and produce it to ``topic_id``.

        Raises:
            SendTimeoutError: If the produce was not acknowledged in time
            SendFailedError: If the broker rejected the produce
        """
        ...

    async def open_consumer(self, topic_id: str) -> ProtocolRawChannel:
        """Open a channel on ``topic_id`` in consumer group ``topic_id``.

        Raises:
            ConnectionTimeoutError: If the consumer did not join in time
            BrokerConnectionError: If the consumer failed to connect
        """
        ...


__all__ = ["ProtocolBrokerSession"]
