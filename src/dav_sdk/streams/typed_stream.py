# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Typed stream over a raw broker channel.

Each record pulled from the channel is decoded synchronously through the
codec. A successful decode yields one element. A decode error terminates the
stream: the channel is stopped and the error is raised to the consumer, so
nothing after the bad record is processed.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from dav_sdk.codec import ParamsCodec
from dav_sdk.errors import ParamsDecodeError
from dav_sdk.models.model_basic_params import BasicParams
from dav_sdk.protocols import ProtocolBrokerSession, ProtocolRawChannel
from dav_sdk.streams.topic_stream import TopicStream

logger = logging.getLogger(__name__)


class TypedStream(TopicStream[BasicParams]):
    """Lazy stream of decoded params for one topic.

    Args:
        topic: Topic id the channel consumes.
        channel: Raw channel returned by ``open_consumer``.
        codec: Codec used to decode record values.
    """

    def __init__(
        self,
        topic: str,
        channel: ProtocolRawChannel,
        codec: ParamsCodec,
    ) -> None:
        super().__init__(topic)
        self._channel = channel
        self._codec = codec
        self._closed = False

    @classmethod
    async def open(
        cls,
        session: ProtocolBrokerSession,
        topic: str,
        codec: ParamsCodec,
    ) -> TypedStream:
        """Open a consumer on ``topic`` and wrap it.

        Raises:
            ConnectionTimeoutError: If the consumer did not join in time
            BrokerConnectionError: If the consumer failed to connect
        """
        channel = await session.open_consumer(topic)
        return cls(topic, channel, codec)

    async def _iterate(self) -> AsyncIterator[BasicParams]:
        try:
            async for record in self._channel:
                result = self._codec.decode(record.value, self._topic)
                if isinstance(result, ParamsDecodeError):
                    logger.warning(
                        f"Terminating stream on topic {self._topic}: {result}",
                        extra={
                            "topic": self._topic,
                            "error_type": type(result).__name__,
                        },
                    )
                    raise result
                yield result
        finally:
            await self.close()

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            await self._channel.stop()
        except Exception as e:
            logger.debug(
                f"Error stopping channel on topic {self._topic}: {e}",
                extra={"topic": self._topic},
            )
        logger.debug("Stream closed", extra={"topic": self._topic})


__all__ = ["TypedStream"]
