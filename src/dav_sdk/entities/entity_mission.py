# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Mission wrapper."""

from __future__ import annotations

from dataclasses import dataclass

from dav_sdk.entities.entity_base import EntityBase
from dav_sdk.entities.entity_message import Message
from dav_sdk.errors import ConfigurationError, ModelErrorContext
from dav_sdk.models.model_message_params import MessageParams
from dav_sdk.models.model_mission_params import MissionParams
from dav_sdk.streams import TopicStream


@dataclass(frozen=True)
class Mission(EntityBase[MissionParams]):
    """An agreed unit of work."""

    async def send_message(self, params: MessageParams) -> None:
        """Send a message to the other party of this mission.

        The peer is ``params.sender_id`` when it is not our own topic,
        otherwise the accepted bid's topic.

        Raises:
            ConfigurationError: If no peer topic is known
            SendError: If the message could not be produced
        """
        sender_id = self.params.sender_id
        peer = sender_id if sender_id and sender_id != self.self_id else self.params.bid_id
        if not peer:
            raise ConfigurationError(
                f"Mission on topic {self.self_id} has no peer to message",
                context=ModelErrorContext.with_correlation(operation="send_message"),
            )
        params.sender_id = self.self_id
        await self.context.session.send(peer, params)

    async def messages(self) -> TopicStream[Message]:
        """Stream messages produced to this wrapper's own topic."""
        return await self._message_stream()


__all__ = ["Mission"]
