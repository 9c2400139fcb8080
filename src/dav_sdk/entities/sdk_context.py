# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Shared collaborators handed to every entity wrapper."""

from __future__ import annotations

from dataclasses import dataclass

from dav_sdk.announce import AnnouncementClient
from dav_sdk.codec import ParamsCodec
from dav_sdk.models.model_dav_config import ModelDavConfig
from dav_sdk.protocols import ProtocolBrokerSession


@dataclass(frozen=True)
class SdkContext:
    """Configuration plus the session, codec and announcer built from it.

    One context is created per Identity and shared by every wrapper derived
    from it. It holds no open connections itself.
    """

    config: ModelDavConfig
    session: ProtocolBrokerSession
    codec: ParamsCodec
    announcer: AnnouncementClient


__all__ = ["SdkContext"]
