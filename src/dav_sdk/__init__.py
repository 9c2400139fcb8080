# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""DAV SDK - Kafka-backed client for the DAV marketplace protocol.

Identities publish needs, receive bids, agree on missions and exchange
follow-up messages over per-entity broker topics.

Key Components:
    - Identity: home topic binding and the publish/subscribe entry points
    - Need, Bid, Mission, Message: entity wrappers around a topic id
    - KafkaBrokerSession / InMemoryBrokerSession: topic-level broker access
    - RegistryParamsType + ParamsCodec: typed payload dispatch
    - TopicStream and its combinators: topic-tagged async streams
"""

from dav_sdk.broker import InMemoryBrokerSession, KafkaBrokerSession, generate_topic_id
from dav_sdk.entities import Bid, Message, Mission, Need, SdkContext
from dav_sdk.identity import Identity
from dav_sdk.models import ModelDavConfig

__all__: list[str] = [
    "Bid",
    "Identity",
    "InMemoryBrokerSession",
    "KafkaBrokerSession",
    "Message",
    "Mission",
    "ModelDavConfig",
    "Need",
    "SdkContext",
    "generate_topic_id",
]
