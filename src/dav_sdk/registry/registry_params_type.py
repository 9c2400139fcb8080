# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
Params type registry.

Maps enumerated ``(protocol, type)`` tags to decoder functions that turn raw
wire bytes into typed params. The registry is built once, frozen, and then
handed to every stream through ``SdkContext``; there is no process-wide
registry.

Design Pattern:
    The registry follows the "freeze after init" pattern:
    1. Registration phase: ``register()`` decoders during startup
    2. Freeze: call ``freeze()`` to lock the registry
    3. Query phase: ``resolve()``/``has()`` are safe for concurrent readers

Example:
    .. code-block:: python

        registry = RegistryParamsType()
        registry.register(
            EnumParamsType.DRONE_DELIVERY_NEED,
            DroneDeliveryNeedParams.from_json,
        )
        registry.freeze()

        decoder = registry.resolve(EnumParamsType.DRONE_DELIVERY_NEED)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType

from dav_sdk.enums import EnumParamsType
from dav_sdk.errors import TypeRegistryError
from dav_sdk.models.model_basic_params import BasicParams

logger = logging.getLogger(__name__)

ParamsDecoder = Callable[[bytes], BasicParams]


class RegistryParamsType:
    """Thread-safe tag → decoder registry with freeze pattern.

    Thread Safety:
        - ``register()`` and ``freeze()`` are protected by a threading.Lock
        - After ``freeze()`` the mapping is a read-only proxy and lookups take
          no lock
    """

    def __init__(self) -> None:
        self._decoders: dict[EnumParamsType, ParamsDecoder] = {}
        self._frozen_view: Mapping[EnumParamsType, ParamsDecoder] | None = None
        self._registration_lock = threading.Lock()

    def register(self, params_type: EnumParamsType, decoder: ParamsDecoder) -> None:
        """Register the decoder for a tag.

        Args:
            params_type: The enumerated wire tag.
            decoder: Callable turning raw bytes into typed params. It may raise
                on invalid input; the codec converts that into
                ``MalformedPayloadError``.

        Raises:
            TypeRegistryError: If the registry is frozen
            TypeRegistryError: If the tag is already registered
            TypeRegistryError: If ``decoder`` is not callable
        """
        if not callable(decoder):
            raise TypeRegistryError(
                f"Decoder for '{params_type.value}' must be callable, "
                f"got {type(decoder).__name__}",
                params_type=params_type.value,
            )

        with self._registration_lock:
            if self._frozen_view is not None:
                raise TypeRegistryError(
                    "Cannot register decoder: RegistryParamsType is frozen. "
                    "Registration is not allowed after freeze() has been called.",
                    params_type=params_type.value,
                )
            if params_type in self._decoders:
                raise TypeRegistryError(
                    f"Decoder for '{params_type.value}' is already registered",
                    params_type=params_type.value,
                )
            self._decoders[params_type] = decoder

        logger.debug("Registered decoder for '%s'", params_type.value)

    def freeze(self, *, require_complete: bool = False) -> None:
        """Freeze the registry to prevent further modifications.

        Idempotent. There is no ``unfreeze()``.

        Args:
            require_complete: When True, every EnumParamsType member must have
                a decoder, otherwise the registry stays unfrozen and
                TypeRegistryError is raised naming the missing tags.

        Raises:
            TypeRegistryError: If ``require_complete`` and tags are missing
        """
        with self._registration_lock:
            if self._frozen_view is not None:
                return
            if require_complete:
                missing = [t.value for t in EnumParamsType if t not in self._decoders]
                if missing:
                    raise TypeRegistryError(
                        f"Registry is missing decoders for: {', '.join(missing)}",
                        missing=missing,
                    )
            self._frozen_view = MappingProxyType(dict(self._decoders))

        logger.debug(
            "RegistryParamsType frozen",
            extra={"entry_count": len(self._decoders)},
        )

    def resolve(self, params_type: EnumParamsType) -> ParamsDecoder | None:
        """Return the decoder for a tag, or None when it is not registered.

        Raises:
            TypeRegistryError: If called before ``freeze()``
        """
        return self._view("resolve").get(params_type)

    def has(self, params_type: EnumParamsType) -> bool:
        """Check whether a tag has a decoder.

        Raises:
            TypeRegistryError: If called before ``freeze()``
        """
        return params_type in self._view("has")

    def list_types(self) -> list[EnumParamsType]:
        """Registered tags sorted by value.

        Raises:
            TypeRegistryError: If called before ``freeze()``
        """
        return sorted(self._view("list_types"), key=lambda t: t.value)

    @property
    def is_frozen(self) -> bool:
        """True once ``freeze()`` has completed."""
        return self._frozen_view is not None

    @property
    def entry_count(self) -> int:
        """Number of registered tags."""
        return len(self._decoders)

    def _view(self, operation: str) -> Mapping[EnumParamsType, ParamsDecoder]:
        view = self._frozen_view
        if view is None:
            raise TypeRegistryError(
                f"{operation}() called before freeze(). "
                "Registration must complete and freeze() must be called before lookup.",
            )
        return view


__all__ = ["ParamsDecoder", "RegistryParamsType"]
