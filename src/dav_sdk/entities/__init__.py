# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Marketplace entity wrappers."""

from dav_sdk.entities.entity_bid import Bid
from dav_sdk.entities.entity_message import Message
from dav_sdk.entities.entity_mission import Mission
from dav_sdk.entities.entity_need import Need
from dav_sdk.entities.sdk_context import SdkContext

__all__ = ["Bid", "Message", "Mission", "Need", "SdkContext"]
