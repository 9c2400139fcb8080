# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Identity orchestrator.

An Identity is one registered DAV participant. It owns at most one lazily
created *home topic*: the first subscription call made without an explicit
``channel_id`` binds it, and every later call reuses it.

Binding:
    Unbound -> Bound happens once per instance (until reset_home_topic()).
    Concurrent first calls share a single in-flight bind guarded by an
    asyncio.Lock, so only one topic is ever created for them. Binding
    generates a topic id, creates the topic and, for needs_for_type only,
    announces the filter before the id is memoized. A failed bind leaves the
    identity Unbound.

    A home topic bound by missions() or messages() is reused by a later
    needs_for_type() without announcing the filter.

Usage:
    ```python
    identity = Identity("0xabc", "0xdav", ModelDavConfig.default())

    needs = await identity.needs_for_type(filter_params)
    async for need in needs:
        bid = await need.create_bid(bid_params)
    ```
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from dav_sdk.announce import AnnouncementClient
from dav_sdk.broker.kafka_broker_session import KafkaBrokerSession
from dav_sdk.broker.util_topic import generate_topic_id
from dav_sdk.codec import ParamsCodec
from dav_sdk.entities import Bid, Message, Mission, Need, SdkContext
from dav_sdk.models.model_basic_params import BasicParams
from dav_sdk.models.model_bid_params import BidParams
from dav_sdk.models.model_dav_config import ModelDavConfig
from dav_sdk.models.model_mission_params import MissionParams
from dav_sdk.models.model_need_params import NeedFilterParams, NeedParams
from dav_sdk.protocols import ProtocolBrokerSession
from dav_sdk.registry import RegistryParamsType, build_default_registry
from dav_sdk.streams import TopicStream, TypedStream, flat_map_merge, map_stream

logger = logging.getLogger(__name__)


class Identity:
    """A registered DAV identity.

    Args:
        id: Identity id.
        dav_id: DAV id of the identity.
        config: SDK configuration.
        session: Broker session; defaults to a KafkaBrokerSession on ``config``.
        announcer: Announcement client; defaults to one on ``config``.
        registry: Frozen params registry; defaults to the built-in protocols.
    """

    def __init__(
        self,
        id: str,
        dav_id: str,
        config: ModelDavConfig,
        *,
        session: Optional[ProtocolBrokerSession] = None,
        announcer: Optional[AnnouncementClient] = None,
        registry: Optional[RegistryParamsType] = None,
    ) -> None:
        self.id = id
        self.dav_id = dav_id
        self._context = SdkContext(
            config=config,
            session=session if session is not None else KafkaBrokerSession(config),
            codec=ParamsCodec(
                registry if registry is not None else build_default_registry()
            ),
            announcer=announcer if announcer is not None else AnnouncementClient(config),
        )
        self._home_topic_id: Optional[str] = None
        self._bind_lock = asyncio.Lock()

    @property
    def context(self) -> SdkContext:
        return self._context

    @property
    def home_topic_id(self) -> Optional[str]:
        """The memoized home topic id, None while Unbound."""
        return self._home_topic_id

    # =========================================================================
    # Publishing
    # =========================================================================

    async def publish_need(self, params: NeedParams) -> Need:
        """Publish a need on a fresh topic and announce it.

        The need topic is never the home topic. ``params.id`` is stamped with
        it before announcing.

        Raises:
            TopicCreationError: If the need topic could not be created
            AnnouncementFailedError: If the announcement was rejected
        """
        topic_id = await self._register_new_topic()
        params.id = topic_id
        await self._context.announcer.publish_need(topic_id, params)
        logger.info(
            "Need published",
            extra={"topic": topic_id, "identity": self.id},
        )
        return Need(topic_id, params, self._context)

    # =========================================================================
    # Subscriptions
    # =========================================================================

    async def needs_for_type(
        self,
        filter_params: NeedFilterParams,
        channel_id: Optional[str] = None,
    ) -> TopicStream[Need]:
        """Subscribe to needs matching ``filter_params``.

        With ``channel_id`` the existing subscription on that topic is
        resumed and nothing is announced. Otherwise the home topic is used,
        binding it (and announcing the filter) on first use.
        """
        topic_id = channel_id or await self._bind_home_topic(filter_params)
        stream = await self._open(topic_id)
        return map_stream(stream, lambda params: Need(topic_id, params, self._context))

    async def missions(self, channel_id: Optional[str] = None) -> TopicStream[Mission]:
        """Subscribe to missions on ``channel_id`` or the home topic.

        Missions are built asynchronously and emitted in completion order.
        """
        topic_id = channel_id or await self._bind_home_topic()
        stream = await self._open(topic_id)

        async def to_mission(params: BasicParams) -> Mission:
            return Mission(topic_id, params, self._context)

        return flat_map_merge(stream, to_mission)

    async def messages(self, channel_id: Optional[str] = None) -> TopicStream[Message]:
        """Subscribe to messages on ``channel_id`` or the home topic."""
        topic_id = channel_id or await self._bind_home_topic()
        stream = await self._open(topic_id)
        return map_stream(
            stream, lambda params: Message(topic_id, params, self._context)
        )

    # =========================================================================
    # Restore constructors
    # =========================================================================

    def need(self, params: NeedParams) -> Need:
        """Restore a need. Uses the home topic when bound, else ``params.id``."""
        self_id = self._home_topic_id or params.id
        return Need(self_id, params, self._context)

    def bid(self, bid_id: str, params: BidParams) -> Bid:
        """Restore a bid speaking for ``bid_id``."""
        return Bid(bid_id, params, self._context)

    def mission(self, mission_id: str, params: MissionParams) -> Mission:
        """Restore a mission speaking for ``mission_id``."""
        return Mission(mission_id, params, self._context)

    def reset_home_topic(self) -> None:
        """Forget the home topic; the next subscription binds a new one."""
        if self._home_topic_id is not None:
            logger.info(
                "Home topic reset",
                extra={"topic": self._home_topic_id, "identity": self.id},
            )
        self._home_topic_id = None

    # =========================================================================
    # Helper Methods
    # =========================================================================

    async def _register_new_topic(self) -> str:
        topic_id = generate_topic_id()
        await self._context.session.create_topic(topic_id)
        return topic_id

    async def _bind_home_topic(
        self, filter_params: Optional[NeedFilterParams] = None
    ) -> str:
        if self._home_topic_id is not None:
            return self._home_topic_id

        async with self._bind_lock:
            # Another caller may have bound while we waited.
            if self._home_topic_id is not None:
                return self._home_topic_id

            topic_id = await self._register_new_topic()
            if filter_params is not None:
                await self._context.announcer.needs_for_type(topic_id, filter_params)
            self._home_topic_id = topic_id

        logger.info(
            "Home topic bound",
            extra={"topic": topic_id, "identity": self.id},
        )
        return topic_id

    async def _open(self, topic_id: str) -> TypedStream:
        return await TypedStream.open(
            self._context.session, topic_id, self._context.codec
        )


__all__ = ["Identity"]
