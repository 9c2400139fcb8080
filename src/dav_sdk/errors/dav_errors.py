# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""SDK Error Classes.

Error Hierarchy:
    DavError (base SDK error)
    ├── ConfigurationError
    │   └── InvalidTopicNameError
    ├── BrokerConnectionError
    │   └── ConnectionTimeoutError
    ├── TopicCreationError
    │   ├── TopicCreationTimeoutError
    │   └── TopicCreationFailedError
    ├── SendError
    │   ├── SendTimeoutError
    │   └── SendFailedError
    ├── ParamsDecodeError
    │   ├── MalformedPayloadError
    │   └── UnrecognizedTypeError
    ├── AnnouncementFailedError
    ├── TypeRegistryError
    └── StreamAlreadyConsumedError

All errors:
    - Support error chaining with ``raise ... from e``; the broker or HTTP
      library exception is always the ``__cause__``
    - Accept a ModelErrorContext for the bundled transport fields
    - Keep any additional keyword arguments in ``error.context``

Decode errors are special: the codec returns them as values and the typed
stream raises them, so they double as the terminal event of a stream.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from dav_sdk.errors.model_error_context import ModelErrorContext


class DavError(Exception):
    """Base class for every error raised by dav_sdk.

    Example:
        >>> context = ModelErrorContext.with_correlation(operation="connect")
        >>> raise DavError("Operation failed", context=context, retry_count=0)
    """

    def __init__(
        self,
        message: str,
        context: Optional[ModelErrorContext] = None,
        **extra_context: object,
    ) -> None:
        """Initialize DavError with structured fields.

        Args:
            message: Human-readable error message
            context: Bundled transport context
            **extra_context: Additional context information
        """
        super().__init__(message)
        self.message = message

        structured_context: dict[str, object] = dict(extra_context)
        self.correlation_id: UUID | None = None
        if context is not None:
            if context.transport_type is not None:
                structured_context["transport_type"] = context.transport_type
            if context.operation is not None:
                structured_context["operation"] = context.operation
            if context.target_name is not None:
                structured_context["target_name"] = context.target_name
            self.correlation_id = context.correlation_id
        self.context = structured_context

    def __str__(self) -> str:
        return self.message


class ConfigurationError(DavError):
    """Raised when configuration or call arguments are invalid."""


class InvalidTopicNameError(ConfigurationError):
    """Raised when a topic id violates the broker's topic naming rules."""


class BrokerConnectionError(DavError):
    """Raised when a broker connection could not be established.

    Example:
        >>> raise BrokerConnectionError(
        ...     "Failed to connect to Kafka",
        ...     context=context,
        ...     servers="kafka:9092",
        ... )
    """


class ConnectionTimeoutError(BrokerConnectionError):
    """Raised when the broker never signalled ready within the connection timeout."""


class TopicCreationError(DavError):
    """Base class for topic creation failures."""


class TopicCreationTimeoutError(TopicCreationError):
    """Raised when topic creation did not complete within the request timeout."""


class TopicCreationFailedError(TopicCreationError):
    """Raised when the broker reported a topic creation failure."""


class SendError(DavError):
    """Base class for produce failures."""


class SendTimeoutError(SendError):
    """Raised when a produce was not acknowledged within the request timeout."""


class SendFailedError(SendError):
    """Raised when the broker rejected a produce request."""


class ParamsDecodeError(DavError):
    """Base class for payloads that could not be turned into typed params.

    Attributes:
        topic: Topic the raw message arrived on
        raw_message: The raw bytes, kept for diagnostics
    """

    def __init__(
        self,
        message: str,
        *,
        topic: str | None = None,
        raw_message: bytes | None = None,
        context: Optional[ModelErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(message, context=context, topic=topic, **extra_context)
        self.topic = topic
        self.raw_message = raw_message


class MalformedPayloadError(ParamsDecodeError):
    """Raised (or returned) when the wire envelope cannot be parsed."""


class UnrecognizedTypeError(ParamsDecodeError):
    """Raised (or returned) when no decoder is registered for the wire tag.

    Attributes:
        protocol: The ``protocol`` field found in the envelope
        kind: The ``type`` field found in the envelope
    """

    def __init__(
        self,
        message: str,
        *,
        protocol: str | None = None,
        kind: str | None = None,
        topic: str | None = None,
        raw_message: bytes | None = None,
        context: Optional[ModelErrorContext] = None,
    ) -> None:
        super().__init__(
            message,
            topic=topic,
            raw_message=raw_message,
            context=context,
            protocol=protocol,
            kind=kind,
        )
        self.protocol = protocol
        self.kind = kind


class AnnouncementFailedError(DavError):
    """Raised when the HTTP announcement endpoint could not be reached or
    answered with a non-success status.

    Attributes:
        status_code: HTTP status code, or None when no response was received
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        context: Optional[ModelErrorContext] = None,
        **extra_context: object,
    ) -> None:
        super().__init__(
            message, context=context, status_code=status_code, **extra_context
        )
        self.status_code = status_code


class StreamAlreadyConsumedError(DavError):
    """Raised when a single-iteration stream is iterated a second time."""


__all__ = [
    "AnnouncementFailedError",
    "BrokerConnectionError",
    "ConfigurationError",
    "ConnectionTimeoutError",
    "DavError",
    "InvalidTopicNameError",
    "MalformedPayloadError",
    "ParamsDecodeError",
    "SendError",
    "SendFailedError",
    "SendTimeoutError",
    "StreamAlreadyConsumedError",
    "TopicCreationError",
    "TopicCreationFailedError",
    "TopicCreationTimeoutError",
    "UnrecognizedTypeError",
]
