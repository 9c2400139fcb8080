# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Kafka broker session.

Implements ProtocolBrokerSession using Apache Kafka via aiokafka.

Every operation opens its own connection and releases it when done:
    - connect():       AIOKafkaProducer, returned started to the caller
    - create_topic():  AIOKafkaAdminClient, closed before returning
    - send():          AIOKafkaProducer, stopped before returning
    - open_consumer(): AIOKafkaConsumer, stopped when its stream is closed

Operations are low frequency per topic (one topic creation, one long-lived
consumer, intermittent sends), so there is no pooling.

Timeouts:
    The transport gives no upper bound on when a broker answers, so each
    round trip races ``asyncio.wait_for`` against its timeout:

    - connection bring-up (producer/admin/consumer ``start()``):
      ``config.connection_timeout_seconds`` (default 4.5 s)
    - topic creation and produce: ``config.request_timeout_seconds``
      (default 4.5 s)

    There is no retry at this layer. A timed-out operation fails once and the
    caller decides whether to retry.

Usage:
    ```python
    session = KafkaBrokerSession(ModelDavConfig.default())

    topic_id = generate_topic_id()
    await session.create_topic(topic_id)
    await session.send(topic_id, params)

    consumer = await session.open_consumer(topic_id)
    async for record in consumer:
        ...
    ```
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Optional
from uuid import UUID, uuid4

from aiokafka import AIOKafkaConsumer, AIOKafkaProducer
from aiokafka.admin import AIOKafkaAdminClient, NewTopic
from aiokafka.errors import (
    KafkaError,
    KafkaTimeoutError,
    RequestTimedOutError,
    TopicAlreadyExistsError,
    for_code,
)

from dav_sdk.broker.util_topic import sanitize_bootstrap_servers, validate_topic_name
from dav_sdk.enums import EnumTransportType
from dav_sdk.errors import (
    BrokerConnectionError,
    ConnectionTimeoutError,
    ModelErrorContext,
    SendFailedError,
    SendTimeoutError,
    TopicCreationFailedError,
    TopicCreationTimeoutError,
)
from dav_sdk.models.model_basic_params import BasicParams
from dav_sdk.models.model_dav_config import ModelDavConfig

logger = logging.getLogger(__name__)

_NO_ERROR = 0

# asyncio.wait_for expiring, or the client's own request_timeout_ms firing first
_TIMEOUT_ERRORS = (TimeoutError, KafkaTimeoutError, RequestTimedOutError)


class KafkaBrokerSession:
    """Kafka-backed broker session.

    Attributes:
        config: The SDK configuration; only the first Kafka seed URL is used.
    """

    def __init__(self, config: ModelDavConfig) -> None:
        self._config = config
        self._bootstrap_servers = config.kafka_seed_url
        self._connection_timeout = config.connection_timeout_seconds
        self._request_timeout = config.request_timeout_seconds

    @property
    def config(self) -> ModelDavConfig:
        return self._config

    async def connect(self, correlation_id: Optional[UUID] = None) -> AIOKafkaProducer:
        """Open a producer connection to the first broker seed address.

        Start completing (ready), start raising (error) and the connection
        timeout race; whichever comes first decides the outcome.

        Args:
            correlation_id: Id of the calling operation; a new one when omitted.

        Returns:
            A started AIOKafkaProducer. The caller owns it and must stop it.

        Raises:
            ConnectionTimeoutError: If the producer was not ready in time
            BrokerConnectionError: If the producer failed to connect
        """
        correlation_id = correlation_id or uuid4()
        producer = AIOKafkaProducer(
            bootstrap_servers=self._bootstrap_servers,
            request_timeout_ms=int(self._request_timeout * 1000),
        )
        await self._start_client(
            producer, producer.stop, "connect", "kafka.producer", correlation_id
        )
        return producer

    async def create_topic(self, topic_id: str) -> None:
        """Create ``topic_id`` on the broker.

        An already existing topic is treated as success.

        Raises:
            InvalidTopicNameError: If ``topic_id`` violates Kafka naming rules
            ConnectionTimeoutError: If the admin connection was not ready in time
            BrokerConnectionError: If the admin connection failed
            TopicCreationTimeoutError: If creation did not complete in time
            TopicCreationFailedError: If the broker reported a failure
        """
        correlation_id = uuid4()
        validate_topic_name(topic_id, correlation_id)
        context = self._context("create_topic", f"kafka.{topic_id}", correlation_id)

        admin = AIOKafkaAdminClient(
            bootstrap_servers=self._bootstrap_servers,
            request_timeout_ms=int(self._request_timeout * 1000),
        )
        await self._start_client(
            admin, admin.close, "create_topic", f"kafka.{topic_id}", correlation_id
        )

        try:
            new_topic = NewTopic(
                name=topic_id,
                num_partitions=self._config.topic_partitions,
                replication_factor=self._config.topic_replication_factor,
            )
            try:
                response = await asyncio.wait_for(
                    admin.create_topics([new_topic]),
                    timeout=self._request_timeout,
                )
            except TopicAlreadyExistsError:
                logger.debug(
                    "Topic already exists: %s",
                    topic_id,
                    extra={"correlation_id": str(correlation_id)},
                )
                return
            except _TIMEOUT_ERRORS as e:
                logger.warning(
                    f"Timeout creating topic {topic_id} after {self._request_timeout}s",
                    extra={"topic": topic_id, "correlation_id": str(correlation_id)},
                )
                raise TopicCreationTimeoutError(
                    f"Timeout creating topic {topic_id} after {self._request_timeout}s",
                    context=context,
                    topic=topic_id,
                    timeout_seconds=self._request_timeout,
                ) from e
            except KafkaError as e:
                logger.warning(
                    f"Failed to create topic {topic_id}: {e}",
                    extra={
                        "topic": topic_id,
                        "correlation_id": str(correlation_id),
                        "error_type": type(e).__name__,
                    },
                )
                raise TopicCreationFailedError(
                    f"Failed to create topic {topic_id}: {e}",
                    context=context,
                    topic=topic_id,
                ) from e

            self._check_create_topics_response(response, topic_id, context)
            logger.info(
                "Created topic: %s",
                topic_id,
                extra={"correlation_id": str(correlation_id)},
            )
        finally:
            await self._release(admin.close, "admin client", correlation_id)

    async def send(self, topic_id: str, params: BasicParams) -> None:
        """Serialize ``params`` and produce it to ``topic_id``.

        Raises:
            InvalidTopicNameError: If ``topic_id`` violates Kafka naming rules
            ConnectionTimeoutError: If the producer was not ready in time
            BrokerConnectionError: If the producer failed to connect
            SendTimeoutError: If the produce was not acknowledged in time
            SendFailedError: If the broker rejected the produce
        """
        correlation_id = uuid4()
        validate_topic_name(topic_id, correlation_id)
        value = params.to_json()

        producer = await self.connect(correlation_id)
        try:
            try:
                record_metadata = await asyncio.wait_for(
                    producer.send_and_wait(topic_id, value=value),
                    timeout=self._request_timeout,
                )
            except _TIMEOUT_ERRORS as e:
                logger.warning(
                    f"Publish timeout on topic {topic_id} after {self._request_timeout}s",
                    extra={"topic": topic_id, "correlation_id": str(correlation_id)},
                )
                raise SendTimeoutError(
                    f"Timeout publishing to topic {topic_id} after {self._request_timeout}s",
                    context=self._context("send", f"kafka.{topic_id}", correlation_id),
                    topic=topic_id,
                    timeout_seconds=self._request_timeout,
                ) from e
            except KafkaError as e:
                logger.warning(
                    f"Kafka error on publish to topic {topic_id}: {e}",
                    extra={
                        "topic": topic_id,
                        "correlation_id": str(correlation_id),
                        "error_type": type(e).__name__,
                    },
                )
                raise SendFailedError(
                    f"Failed to publish to topic {topic_id}: {e}",
                    context=self._context("send", f"kafka.{topic_id}", correlation_id),
                    topic=topic_id,
                ) from e

            logger.debug(
                f"Published to topic {topic_id}",
                extra={
                    "partition": record_metadata.partition,
                    "offset": record_metadata.offset,
                    "params_type": f"{params.protocol}:{params.type}",
                    "correlation_id": str(correlation_id),
                },
            )
        finally:
            await self._release(producer.stop, "producer", correlation_id)

    async def open_consumer(self, topic_id: str) -> AIOKafkaConsumer:
        """Open a consumer on ``topic_id`` in consumer group ``topic_id``.

        Offsets are auto-committed, so a record handed to the caller is not
        redelivered to this group even if the caller crashes while handling
        it. Opening the same topic twice joins the same group and splits the
        traffic between the two consumers.

        Returns:
            A started AIOKafkaConsumer. Stopping it ends iteration.

        Raises:
            InvalidTopicNameError: If ``topic_id`` violates Kafka naming rules
            ConnectionTimeoutError: If the consumer was not ready in time
            BrokerConnectionError: If the consumer failed to connect
        """
        correlation_id = uuid4()
        validate_topic_name(topic_id, correlation_id)

        consumer = AIOKafkaConsumer(
            topic_id,
            bootstrap_servers=self._bootstrap_servers,
            group_id=topic_id,
            enable_auto_commit=True,
            auto_offset_reset=self._config.auto_offset_reset,
        )
        await self._start_client(
            consumer, consumer.stop, "open_consumer", f"kafka.{topic_id}", correlation_id
        )

        logger.info(
            f"Started consumer for topic {topic_id}",
            extra={
                "topic": topic_id,
                "group_id": topic_id,
                "correlation_id": str(correlation_id),
                "servers": sanitize_bootstrap_servers(self._bootstrap_servers),
            },
        )
        return consumer

    # =========================================================================
    # Helper Methods
    # =========================================================================

    async def _start_client(
        self,
        client: AIOKafkaProducer | AIOKafkaConsumer | AIOKafkaAdminClient,
        release: Callable[[], Awaitable[None]],
        operation: str,
        target_name: str,
        correlation_id: UUID,
    ) -> None:
        """Race ``client.start()`` against the connection timeout.

        The client is released again on failure.
        """
        servers = sanitize_bootstrap_servers(self._bootstrap_servers)

        try:
            await asyncio.wait_for(client.start(), timeout=self._connection_timeout)
        except _TIMEOUT_ERRORS as e:
            await self._release(release, type(client).__name__, correlation_id)
            logger.warning(
                f"Timeout connecting to Kafka after {self._connection_timeout}s",
                extra={
                    "operation": operation,
                    "servers": servers,
                    "correlation_id": str(correlation_id),
                },
            )
            raise ConnectionTimeoutError(
                f"Timeout connecting to Kafka after {self._connection_timeout}s",
                context=self._context(operation, target_name, correlation_id),
                servers=servers,
                timeout_seconds=self._connection_timeout,
            ) from e
        except Exception as e:
            await self._release(release, type(client).__name__, correlation_id)
            logger.warning(
                f"Failed to connect to Kafka: {e}",
                extra={
                    "operation": operation,
                    "servers": servers,
                    "error_type": type(e).__name__,
                    "correlation_id": str(correlation_id),
                },
            )
            raise BrokerConnectionError(
                f"Failed to connect to Kafka: {e}",
                context=self._context(operation, target_name, correlation_id),
                servers=servers,
            ) from e

    async def _release(
        self,
        release: Callable[[], Awaitable[None]],
        what: str,
        correlation_id: UUID,
    ) -> None:
        try:
            await release()
        except Exception as e:
            logger.debug(
                f"Error releasing Kafka {what}: {e}",
                extra={"correlation_id": str(correlation_id)},
            )

    @staticmethod
    def _check_create_topics_response(
        response: object, topic_id: str, context: ModelErrorContext
    ) -> None:
        """Raise for per-topic error codes carried in a CreateTopics response."""
        for topic_error in getattr(response, "topic_errors", None) or ():
            error_code = topic_error[1]
            if error_code in (_NO_ERROR, TopicAlreadyExistsError.errno):
                continue
            if error_code == RequestTimedOutError.errno:
                raise TopicCreationTimeoutError(
                    f"Broker timed out creating topic {topic_id}",
                    context=context,
                    topic=topic_id,
                    error_code=error_code,
                )
            error_cls = for_code(error_code)
            raise TopicCreationFailedError(
                f"Failed to create topic {topic_id}: {error_cls.__name__}",
                context=context,
                topic=topic_id,
                error_code=error_code,
            )

    @staticmethod
    def _context(
        operation: str, target_name: str, correlation_id: UUID
    ) -> ModelErrorContext:
        return ModelErrorContext(
            transport_type=EnumTransportType.KAFKA,
            operation=operation,
            target_name=target_name,
            correlation_id=correlation_id,
        )


__all__ = ["KafkaBrokerSession"]
