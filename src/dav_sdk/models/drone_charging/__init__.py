# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""drone-charging protocol payloads."""

from dav_sdk.models.drone_charging.model_drone_charging_params import (
    PROTOCOL_DRONE_CHARGING,
    DroneChargingBidParams,
    DroneChargingMessageParams,
    DroneChargingMissionParams,
    DroneChargingNeedFilterParams,
    DroneChargingNeedParams,
)

__all__ = [
    "DroneChargingBidParams",
    "DroneChargingMessageParams",
    "DroneChargingMissionParams",
    "DroneChargingNeedFilterParams",
    "DroneChargingNeedParams",
    "PROTOCOL_DRONE_CHARGING",
]
