# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Payloads of the ``drone-delivery`` protocol."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from dav_sdk.models.model_bid_params import BidParams
from dav_sdk.models.model_location import ModelLocation
from dav_sdk.models.model_message_params import MessageParams
from dav_sdk.models.model_mission_params import MissionParams
from dav_sdk.models.model_need_params import NeedFilterParams, NeedParams

PROTOCOL_DRONE_DELIVERY = "drone-delivery"


class DroneDeliveryNeedParams(NeedParams):
    """Request to carry a package between two points."""

    protocol: Literal["drone-delivery"] = PROTOCOL_DRONE_DELIVERY
    pickup_location: ModelLocation
    dropoff_location: ModelLocation
    start_at: int | None = Field(default=None, description="Epoch millis")
    cargo_type: str | None = None
    weight: float | None = Field(default=None, ge=0, description="Kilograms")


class DroneDeliveryNeedFilterParams(NeedFilterParams):
    """Area a delivery provider serves."""

    protocol: Literal["drone-delivery"] = PROTOCOL_DRONE_DELIVERY
    location: ModelLocation
    radius: float = Field(gt=0, description="Meters")


class DroneDeliveryBidParams(BidParams):
    protocol: Literal["drone-delivery"] = PROTOCOL_DRONE_DELIVERY
    price: str
    eta: int | None = Field(default=None, description="Epoch millis")
    vehicle_id: str | None = None


class DroneDeliveryMissionParams(MissionParams):
    protocol: Literal["drone-delivery"] = PROTOCOL_DRONE_DELIVERY
    price: str | None = None
    vehicle_id: str | None = None


class DroneDeliveryMessageParams(MessageParams):
    protocol: Literal["drone-delivery"] = PROTOCOL_DRONE_DELIVERY
    status: str | None = None
    text: str | None = None


__all__ = [
    "DroneDeliveryBidParams",
    "DroneDeliveryMessageParams",
    "DroneDeliveryMissionParams",
    "DroneDeliveryNeedFilterParams",
    "DroneDeliveryNeedParams",
    "PROTOCOL_DRONE_DELIVERY",
]
