# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Bid wrapper."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dav_sdk.broker.util_topic import generate_topic_id
from dav_sdk.entities.entity_base import EntityBase
from dav_sdk.entities.entity_message import Message
from dav_sdk.entities.entity_mission import Mission
from dav_sdk.errors import ConfigurationError, ModelErrorContext
from dav_sdk.models.model_bid_params import BidParams
from dav_sdk.models.model_message_params import MessageParams
from dav_sdk.models.model_mission_params import MissionParams
from dav_sdk.streams import TopicStream

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bid(EntityBase[BidParams]):
    """A service provider's answer to a need.

    Received through ``Need.bids()`` the wrapper speaks for the need topic;
    returned from ``Need.create_bid()`` it speaks for the bid topic.
    """

    @property
    def bid_topic(self) -> str | None:
        return self.params.id or self.params.sender_id

    async def accept(self, params: MissionParams) -> Mission:
        """Accept the bid by producing a mission to the bid topic.

        A fresh mission topic is created and stamped on ``params`` as ``id``
        and ``sender_id``, together with the bid and need ids.

        Raises:
            ConfigurationError: If the bid carries no bid topic
            TopicCreationError: If the mission topic could not be created
            SendError: If the mission could not be produced
        """
        bid_topic = self.bid_topic
        if not bid_topic:
            raise ConfigurationError(
                f"Bid received on topic {self.self_id} has no id to accept",
                context=ModelErrorContext.with_correlation(operation="accept"),
            )
        mission_topic = generate_topic_id()
        await self.context.session.create_topic(mission_topic)
        params.id = mission_topic
        params.bid_id = bid_topic
        params.need_id = self.params.need_id
        params.sender_id = mission_topic
        await self.context.session.send(bid_topic, params)
        logger.info(
            "Bid accepted",
            extra={"topic": mission_topic, "bid_id": bid_topic},
        )
        return Mission(mission_topic, params, self.context)

    async def send_message(self, params: MessageParams) -> None:
        """Send a message to the other party of this bid.

        Raises:
            ConfigurationError: If no peer topic is known
            SendError: If the message could not be produced
        """
        sender_id = self.params.sender_id
        peer = sender_id if sender_id and sender_id != self.self_id else self.params.need_id
        if not peer:
            raise ConfigurationError(
                f"Bid on topic {self.self_id} has no peer to message",
                context=ModelErrorContext.with_correlation(operation="send_message"),
            )
        params.sender_id = self.self_id
        await self.context.session.send(peer, params)

    async def messages(self) -> TopicStream[Message]:
        """Stream messages produced to this wrapper's own topic."""
        return await self._message_stream()


__all__ = ["Bid"]
