# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""drone-delivery protocol payloads."""

from dav_sdk.models.drone_delivery.model_drone_delivery_params import (
    PROTOCOL_DRONE_DELIVERY,
    DroneDeliveryBidParams,
    DroneDeliveryMessageParams,
    DroneDeliveryMissionParams,
    DroneDeliveryNeedFilterParams,
    DroneDeliveryNeedParams,
)

__all__ = [
    "DroneDeliveryBidParams",
    "DroneDeliveryMessageParams",
    "DroneDeliveryMissionParams",
    "DroneDeliveryNeedFilterParams",
    "DroneDeliveryNeedParams",
    "PROTOCOL_DRONE_DELIVERY",
]
