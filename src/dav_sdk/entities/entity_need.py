# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Need wrapper.

On the consumer side a Need comes from ``Identity.publish_need`` and its
``self_id`` is the need topic bids arrive on. On the provider side it comes
from ``Identity.needs_for_type`` and ``self_id`` is the provider's home
topic; the need topic is then carried in ``params.id``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dav_sdk.broker.util_topic import generate_topic_id
from dav_sdk.entities.entity_base import EntityBase
from dav_sdk.entities.entity_bid import Bid
from dav_sdk.entities.entity_message import Message
from dav_sdk.models.model_bid_params import BidParams
from dav_sdk.models.model_need_params import NeedParams
from dav_sdk.streams import TopicStream, map_stream

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Need(EntityBase[NeedParams]):
    """A published request for service."""

    @property
    def need_topic(self) -> str:
        """Topic bids for this need are produced to."""
        return self.params.id or self.self_id

    async def bids(self) -> TopicStream[Bid]:
        """Stream bids arriving on the need topic.

        Each bid is wrapped with the need topic as its ``self_id``.
        """
        stream = await self._typed_stream(self.need_topic)
        return map_stream(
            stream, lambda params: Bid(self.need_topic, params, self.context)
        )

    async def create_bid(self, params: BidParams) -> Bid:
        """Answer this need with a bid.

        A fresh bid topic is created and stamped on ``params`` as ``id`` and
        ``sender_id``; the bid is then produced to the need topic. The
        returned Bid speaks for the bid topic.

        Raises:
            TopicCreationError: If the bid topic could not be created
            SendError: If the bid could not be produced
        """
        bid_topic = generate_topic_id()
        await self.context.session.create_topic(bid_topic)
        params.id = bid_topic
        params.need_id = self.need_topic
        params.sender_id = bid_topic
        await self.context.session.send(self.need_topic, params)
        logger.info(
            "Bid created",
            extra={"topic": bid_topic, "need_id": self.need_topic},
        )
        return Bid(bid_topic, params, self.context)

    async def messages(self) -> TopicStream[Message]:
        """Stream messages produced to this wrapper's own topic."""
        return await self._message_stream()


__all__ = ["Need"]
