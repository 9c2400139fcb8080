# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topic id helpers shared by broker session implementations."""

from __future__ import annotations

import re
from uuid import UUID, uuid4

from dav_sdk.enums import EnumTransportType
from dav_sdk.errors import InvalidTopicNameError, ModelErrorContext

_TOPIC_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9._-]+$")
MAX_TOPIC_NAME_LENGTH = 249


def generate_topic_id() -> str:
    """Generate a fresh, globally unique topic id (uuid4).

    The id is generated before the topic exists on the broker and doubles as
    the consumer group id and the entity self id.
    """
    return str(uuid4())


def validate_topic_name(topic: str, correlation_id: UUID | None = None) -> None:
    """Validate a topic id against Kafka naming rules.

    Kafka topic names must:
    - Not be empty
    - Be 249 characters or less
    - Contain only: a-z, A-Z, 0-9, period (.), underscore (_), hyphen (-)
    - Not be "." or ".." (reserved)

    Raises:
        InvalidTopicNameError: If the topic name is invalid
    """
    context = ModelErrorContext.with_correlation(
        correlation_id=correlation_id,
        transport_type=EnumTransportType.KAFKA,
        operation="validate_topic",
        target_name="topic_id",
    )

    if not topic:
        raise InvalidTopicNameError(
            "Topic name cannot be empty", context=context, value=topic
        )
    if len(topic) > MAX_TOPIC_NAME_LENGTH:
        raise InvalidTopicNameError(
            f"Topic name '{topic}' exceeds maximum length of "
            f"{MAX_TOPIC_NAME_LENGTH} characters",
            context=context,
            value=topic,
        )
    if topic in (".", ".."):
        raise InvalidTopicNameError(
            f"Topic name '{topic}' is reserved and cannot be used",
            context=context,
            value=topic,
        )
    if not _TOPIC_NAME_PATTERN.match(topic):
        raise InvalidTopicNameError(
            f"Topic name '{topic}' contains invalid characters. "
            "Only alphanumeric characters, periods (.), underscores (_), "
            "and hyphens (-) are allowed",
            context=context,
            value=topic,
        )


def sanitize_bootstrap_servers(servers: str) -> str:
    """Strip ``user:pass@`` prefixes from a bootstrap servers string.

    Example:
        "user:pass@kafka:9092" -> "kafka:9092"
        "kafka:9092,kafka2:9092" -> "kafka:9092,kafka2:9092"
    """
    if not servers:
        return "unknown"

    sanitized = []
    for server in (s.strip() for s in servers.split(",")):
        if "@" in server:
            server = server.split("@", 1)[1]
        sanitized.append(server)
    return ",".join(sanitized)


__all__ = [
    "MAX_TOPIC_NAME_LENGTH",
    "generate_topic_id",
    "sanitize_bootstrap_servers",
    "validate_topic_name",
]
