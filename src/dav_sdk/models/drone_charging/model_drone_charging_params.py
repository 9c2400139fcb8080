# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Payloads of the ``drone-charging`` protocol."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from dav_sdk.models.model_bid_params import BidParams
from dav_sdk.models.model_location import ModelLocation
from dav_sdk.models.model_message_params import MessageParams
from dav_sdk.models.model_mission_params import MissionParams
from dav_sdk.models.model_need_params import NeedFilterParams, NeedParams

PROTOCOL_DRONE_CHARGING = "drone-charging"


class DroneChargingNeedParams(NeedParams):
    """Request for a charging slot near a location."""

    protocol: Literal["drone-charging"] = PROTOCOL_DRONE_CHARGING
    location: ModelLocation
    battery_capacity: int | None = Field(default=None, ge=0, description="mAh")
    current_battery_charge: int | None = Field(
        default=None, ge=0, le=100, description="Percent"
    )


class DroneChargingNeedFilterParams(NeedFilterParams):
    protocol: Literal["drone-charging"] = PROTOCOL_DRONE_CHARGING
    location: ModelLocation
    radius: float = Field(gt=0, description="Meters")


class DroneChargingBidParams(BidParams):
    protocol: Literal["drone-charging"] = PROTOCOL_DRONE_CHARGING
    price: str
    location: ModelLocation | None = None
    available_from: int | None = Field(default=None, description="Epoch millis")
    available_until: int | None = Field(default=None, description="Epoch millis")


class DroneChargingMissionParams(MissionParams):
    protocol: Literal["drone-charging"] = PROTOCOL_DRONE_CHARGING
    price: str | None = None
    vehicle_id: str | None = None


class DroneChargingMessageParams(MessageParams):
    protocol: Literal["drone-charging"] = PROTOCOL_DRONE_CHARGING
    status: str | None = None
    text: str | None = None


__all__ = [
    "DroneChargingBidParams",
    "DroneChargingMessageParams",
    "DroneChargingMissionParams",
    "DroneChargingNeedFilterParams",
    "DroneChargingNeedParams",
    "PROTOCOL_DRONE_CHARGING",
]
