# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Configuration and payload models."""

from dav_sdk.models.model_basic_params import BasicParams
from dav_sdk.models.model_bid_params import BidParams
from dav_sdk.models.model_dav_config import ModelDavConfig
from dav_sdk.models.model_location import ModelLocation
from dav_sdk.models.model_message_params import MessageParams
from dav_sdk.models.model_mission_params import MissionParams
from dav_sdk.models.model_need_params import NeedFilterParams, NeedParams

__all__ = [
    "BasicParams",
    "BidParams",
    "MessageParams",
    "MissionParams",
    "ModelDavConfig",
    "ModelLocation",
    "NeedFilterParams",
    "NeedParams",
]
