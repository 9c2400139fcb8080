# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Type Registry Error.

Provides the TypeRegistryError class for params registry operations.
"""

from __future__ import annotations

__all__ = [
    "TypeRegistryError",
]

from dav_sdk.errors.dav_errors import DavError
from dav_sdk.errors.model_error_context import ModelErrorContext


class TypeRegistryError(DavError):
    """Error raised when params registry operations fail.

    Used for:
    - Registration after freeze
    - Duplicate registration attempts
    - Non-callable decoders
    - Incomplete registries frozen with ``require_complete=True``
    - Queries before freeze

    Example:
        >>> try:
        ...     registry.register(EnumParamsType.DRONE_DELIVERY_NEED, decoder)
        ... except TypeRegistryError as e:
        ...     print(f"Registration rejected: {e}")
    """

    def __init__(
        self,
        message: str,
        *,
        params_type: str | None = None,
        context: ModelErrorContext | None = None,
        **extra_context: object,
    ) -> None:
        """Initialize TypeRegistryError.

        Args:
            message: Human-readable error message
            params_type: The tag that caused the error
            context: Bundled context for correlation_id
            **extra_context: Additional context information
        """
        extra: dict[str, object] = dict(extra_context)
        if params_type is not None:
            extra["params_type"] = params_type
        super().__init__(message, context=context, **extra)
