# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for topic id helpers."""

from __future__ import annotations

from uuid import UUID

import pytest

from dav_sdk.broker import (
    MAX_TOPIC_NAME_LENGTH,
    generate_topic_id,
    sanitize_bootstrap_servers,
    validate_topic_name,
)
from dav_sdk.errors import ConfigurationError, InvalidTopicNameError


class TestGenerateTopicId:
    def test_unique_over_ten_thousand_generations(self) -> None:
        ids = {generate_topic_id() for _ in range(10_000)}
        assert len(ids) == 10_000

    def test_is_uuid4_and_valid_topic_name(self) -> None:
        topic_id = generate_topic_id()
        assert UUID(topic_id).version == 4
        validate_topic_name(topic_id)


class TestValidateTopicName:
    @pytest.mark.parametrize(
        "topic",
        ["a", "needs.drone-delivery", "under_score", "x" * MAX_TOPIC_NAME_LENGTH],
    )
    def test_valid(self, topic: str) -> None:
        validate_topic_name(topic)

    @pytest.mark.parametrize(
        "topic",
        ["", ".", "..", "has space", "slash/topic", "x" * (MAX_TOPIC_NAME_LENGTH + 1)],
    )
    def test_invalid(self, topic: str) -> None:
        with pytest.raises(InvalidTopicNameError) as exc_info:
            validate_topic_name(topic)
        assert isinstance(exc_info.value, ConfigurationError)


class TestSanitizeBootstrapServers:
    def test_strips_credentials(self) -> None:
        assert sanitize_bootstrap_servers("user:secret@kafka:9092") == "kafka:9092"

    def test_keeps_plain_lists(self) -> None:
        assert (
            sanitize_bootstrap_servers("kafka:9092,kafka2:9092")
            == "kafka:9092,kafka2:9092"
        )
