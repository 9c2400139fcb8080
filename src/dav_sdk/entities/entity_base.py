# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Common behavior of the Need, Bid, Mission and Message wrappers.

A wrapper pairs the topic id it speaks for (``self_id``) with a typed payload
and the shared SdkContext. It owns no broker resources: every method opens
what it needs on demand, and streams it returns are closed by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic, TypeVar

from dav_sdk.entities.sdk_context import SdkContext
from dav_sdk.models.model_basic_params import BasicParams
from dav_sdk.streams import TopicStream, TypedStream, map_stream

if TYPE_CHECKING:
    from dav_sdk.entities.entity_message import Message

P = TypeVar("P", bound=BasicParams)


@dataclass(frozen=True)
class EntityBase(Generic[P]):
    """Topic id, payload and context of one marketplace entity."""

    self_id: str
    params: P
    context: SdkContext = field(compare=False, repr=False)

    async def _typed_stream(self, topic: str) -> TypedStream:
        return await TypedStream.open(
            self.context.session, topic, self.context.codec
        )

    async def _message_stream(self) -> TopicStream[Message]:
        from dav_sdk.entities.entity_message import Message

        stream = await self._typed_stream(self.self_id)
        return map_stream(
            stream, lambda params: Message(self.self_id, params, self.context)
        )


__all__ = ["EntityBase"]
