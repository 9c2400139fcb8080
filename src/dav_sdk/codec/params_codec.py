# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Wire codec for typed params.

``decode()`` never raises: every failure is returned as a
:class:`ParamsDecodeError` value so the stream layer decides what a failure
means (it terminates the owning stream). The raw message and topic travel
with the error for diagnostics.
"""

from __future__ import annotations

import json
import logging

from dav_sdk.enums import EnumParamsType
from dav_sdk.errors import (
    MalformedPayloadError,
    ParamsDecodeError,
    TypeRegistryError,
    UnrecognizedTypeError,
)
from dav_sdk.models.model_basic_params import BasicParams
from dav_sdk.registry.registry_params_type import RegistryParamsType

logger = logging.getLogger(__name__)

# Raw messages are truncated to this many bytes in error messages.
_MAX_RAW_PREVIEW = 256


def _preview(raw: bytes) -> str:
    return raw[:_MAX_RAW_PREVIEW].decode("utf-8", errors="replace")


class ParamsCodec:
    """Encode params to wire bytes and decode wire bytes through a registry.

    Args:
        registry: A frozen RegistryParamsType.

    Raises:
        TypeRegistryError: If ``registry`` is not frozen
    """

    def __init__(self, registry: RegistryParamsType) -> None:
        if not registry.is_frozen:
            raise TypeRegistryError(
                "ParamsCodec requires a frozen registry. Call freeze() first."
            )
        self._registry = registry

    @property
    def registry(self) -> RegistryParamsType:
        return self._registry

    def encode(self, params: BasicParams) -> bytes:
        """Serialize params to the JSON wire format."""
        return params.to_json()

    def decode(
        self, raw: bytes | None, topic: str
    ) -> BasicParams | ParamsDecodeError:
        """Decode one raw message.

        Args:
            raw: The record value as received from the broker.
            topic: Topic the record arrived on, for diagnostics.

        Returns:
            The typed params, or a MalformedPayloadError /
            UnrecognizedTypeError value.
        """
        if not raw:
            return MalformedPayloadError(
                f"Empty message on topic {topic}",
                topic=topic,
                raw_message=raw,
            )

        try:
            envelope = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            return MalformedPayloadError(
                f"Error while trying to parse message. topic: {topic} "
                f"error: {e}, message: {_preview(raw)}",
                topic=topic,
                raw_message=raw,
            )

        if not isinstance(envelope, dict):
            return MalformedPayloadError(
                f"Message on topic {topic} is not a JSON object: {_preview(raw)}",
                topic=topic,
                raw_message=raw,
            )

        protocol = envelope.get("protocol")
        kind = envelope.get("type")
        if not isinstance(protocol, str) or not isinstance(kind, str):
            return MalformedPayloadError(
                f"Message on topic {topic} has no string 'protocol'/'type' tag: "
                f"{_preview(raw)}",
                topic=topic,
                raw_message=raw,
            )

        params_type = EnumParamsType.from_tag(protocol, kind)
        decoder = self._registry.resolve(params_type) if params_type else None
        if decoder is None:
            return UnrecognizedTypeError(
                f"Unrecognized message type, topic: {topic}, message: {_preview(raw)}",
                protocol=protocol,
                kind=kind,
                topic=topic,
                raw_message=raw,
            )

        try:
            params = decoder(raw)
        except Exception as e:
            return MalformedPayloadError(
                f"Error while trying to parse message. topic: {topic} "
                f"error: {type(e).__name__}: {e}",
                topic=topic,
                raw_message=raw,
                params_type=params_type.value,
            )

        logger.debug(
            "Decoded message",
            extra={"topic": topic, "params_type": params_type.value},
        )
        return params


__all__ = ["ParamsCodec"]
