# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Transport Type Enumeration.

Defines the transport types the SDK talks to. Used for error context and
transport identification in log records.
"""

from enum import Enum


class EnumTransportType(str, Enum):
    """Transport types used by dav_sdk components.

    Attributes:
        HTTP: HTTP announcement API transport
        KAFKA: Kafka message broker transport
        INMEMORY: In-process broker used for local development and tests
    """

    HTTP = "http"
    KAFKA = "kafka"
    INMEMORY = "inmemory"


__all__ = ["EnumTransportType"]
