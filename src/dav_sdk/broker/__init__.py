# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Broker session implementations.

This module provides broker sessions for topic-level messaging:
- KafkaBrokerSession: Production session backed by aiokafka
- InMemoryBrokerSession: Local development and testing session
"""

from dav_sdk.broker.inmemory_broker_session import (
    InMemoryBrokerSession,
    InMemoryChannel,
    InMemoryRecord,
)
from dav_sdk.broker.kafka_broker_session import KafkaBrokerSession
from dav_sdk.broker.util_topic import (
    MAX_TOPIC_NAME_LENGTH,
    generate_topic_id,
    sanitize_bootstrap_servers,
    validate_topic_name,
)

__all__ = [
    "MAX_TOPIC_NAME_LENGTH",
    "InMemoryBrokerSession",
    "InMemoryChannel",
    "InMemoryRecord",
    "KafkaBrokerSession",
    "generate_topic_id",
    "sanitize_bootstrap_servers",
    "validate_topic_name",
]
