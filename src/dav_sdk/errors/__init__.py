# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""dav_sdk Errors Module.

Exports:
    ModelErrorContext: Bundled structured context for errors
    DavError: Base SDK error class
    Broker errors: BrokerConnectionError, ConnectionTimeoutError,
        TopicCreationError (+ Timeout/Failed), SendError (+ Timeout/Failed)
    Decode errors: ParamsDecodeError, MalformedPayloadError, UnrecognizedTypeError
    AnnouncementFailedError: HTTP announcement failures
    TypeRegistryError: Params registry misuse
    StreamAlreadyConsumedError: Second iteration of a single-iteration stream

Correlation ID Assignment:
    Every broker and HTTP operation generates a fresh uuid4 correlation ID,
    logs it in ``extra`` and attaches it to any error it raises, so a failure
    can be matched to its log lines.

    Example::

        from dav_sdk.enums import EnumTransportType
        from dav_sdk.errors import ModelErrorContext, SendFailedError

        context = ModelErrorContext.with_correlation(
            transport_type=EnumTransportType.KAFKA,
            operation="send",
            target_name=f"kafka.{topic_id}",
        )
        raise SendFailedError("Broker rejected message", context=context) from e

Error Sanitization Guidelines:
    Never include credentials from bootstrap server strings or API URLs in
    messages or context. Topic ids, operation names, timeouts and HTTP status
    codes are safe.
"""

from dav_sdk.errors.dav_errors import (
    AnnouncementFailedError,
    BrokerConnectionError,
    ConfigurationError,
    ConnectionTimeoutError,
    DavError,
    InvalidTopicNameError,
    MalformedPayloadError,
    ParamsDecodeError,
    SendError,
    SendFailedError,
    SendTimeoutError,
    StreamAlreadyConsumedError,
    TopicCreationError,
    TopicCreationFailedError,
    TopicCreationTimeoutError,
    UnrecognizedTypeError,
)
from dav_sdk.errors.error_type_registry import TypeRegistryError
from dav_sdk.errors.model_error_context import ModelErrorContext

__all__: list[str] = [
    "AnnouncementFailedError",
    "BrokerConnectionError",
    "ConfigurationError",
    "ConnectionTimeoutError",
    "DavError",
    "InvalidTopicNameError",
    "MalformedPayloadError",
    "ModelErrorContext",
    "ParamsDecodeError",
    "SendError",
    "SendFailedError",
    "SendTimeoutError",
    "StreamAlreadyConsumedError",
    "TopicCreationError",
    "TopicCreationFailedError",
    "TopicCreationTimeoutError",
    "TypeRegistryError",
    "UnrecognizedTypeError",
]
