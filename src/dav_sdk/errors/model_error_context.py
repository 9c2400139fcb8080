# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Error Context Configuration Model.

Bundles the structured fields every SDK error carries so error constructors
stay small while keeping strong typing.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from dav_sdk.enums import EnumTransportType


class ModelErrorContext(BaseModel):
    """Structured context attached to a :class:`DavError`.

    Attributes:
        transport_type: Transport the failing operation used (KAFKA, HTTP, ...)
        operation: Operation being performed (connect, create_topic, send, ...)
        target_name: Target resource, usually ``kafka.<topic>`` or an URL
        correlation_id: Per-operation correlation ID for log correlation

    Example:
        >>> context = ModelErrorContext.with_correlation(
        ...     transport_type=EnumTransportType.KAFKA,
        ...     operation="send",
        ...     target_name="kafka.3f2c...",
        ... )
        >>> raise SendFailedError("Broker rejected message", context=context)
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    transport_type: Optional[EnumTransportType] = Field(
        default=None,
        description="Type of transport (HTTP, KAFKA, INMEMORY)",
    )
    operation: Optional[str] = Field(
        default=None,
        description="Operation being performed",
    )
    target_name: Optional[str] = Field(
        default=None,
        description="Target resource or endpoint name",
    )
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="Correlation ID for log correlation",
    )

    @classmethod
    def with_correlation(
        cls,
        correlation_id: UUID | None = None,
        **kwargs: object,
    ) -> ModelErrorContext:
        """Create a context, generating a correlation ID when none is given."""
        return cls(correlation_id=correlation_id or uuid4(), **kwargs)


__all__ = ["ModelErrorContext"]
