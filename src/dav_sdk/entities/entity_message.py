# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Message wrapper with request/reply by topic addressing."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from dav_sdk.entities.entity_base import EntityBase
from dav_sdk.errors import ConfigurationError, ModelErrorContext
from dav_sdk.models.model_message_params import MessageParams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Message(EntityBase[MessageParams]):
    """A message received on ``self_id``."""

    async def respond(self, params: MessageParams) -> None:
        """Reply to the party that sent this message.

        ``params.sender_id`` is set to our own topic id and the reply is
        produced to the original sender's topic. No reply topic is allocated.

        Raises:
            ConfigurationError: If the received message has no sender_id
            SendTimeoutError: If the produce was not acknowledged in time
            SendFailedError: If the broker rejected the produce
        """
        reply_to = self.params.sender_id
        if not reply_to:
            raise ConfigurationError(
                f"Message on topic {self.self_id} has no sender_id to reply to",
                context=ModelErrorContext.with_correlation(operation="respond"),
                topic=self.self_id,
            )
        params.sender_id = self.self_id
        await self.context.session.send(reply_to, params)
        logger.debug(
            "Responded to message",
            extra={"topic": reply_to, "sender_id": self.self_id},
        )


__all__ = ["Message"]
