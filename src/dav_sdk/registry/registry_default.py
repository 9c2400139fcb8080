# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Registry pre-populated with the protocols shipped in dav_sdk.models."""

from __future__ import annotations

from dav_sdk.enums import EnumParamsType
from dav_sdk.models.drone_charging import (
    DroneChargingBidParams,
    DroneChargingMessageParams,
    DroneChargingMissionParams,
    DroneChargingNeedParams,
)
from dav_sdk.models.drone_delivery import (
    DroneDeliveryBidParams,
    DroneDeliveryMessageParams,
    DroneDeliveryMissionParams,
    DroneDeliveryNeedParams,
)
from dav_sdk.models.model_basic_params import BasicParams
from dav_sdk.registry.registry_params_type import RegistryParamsType

BUILTIN_PARAMS_MODELS: dict[EnumParamsType, type[BasicParams]] = {
    EnumParamsType.DRONE_DELIVERY_NEED: DroneDeliveryNeedParams,
    EnumParamsType.DRONE_DELIVERY_BID: DroneDeliveryBidParams,
    EnumParamsType.DRONE_DELIVERY_MISSION: DroneDeliveryMissionParams,
    EnumParamsType.DRONE_DELIVERY_MESSAGE: DroneDeliveryMessageParams,
    EnumParamsType.DRONE_CHARGING_NEED: DroneChargingNeedParams,
    EnumParamsType.DRONE_CHARGING_BID: DroneChargingBidParams,
    EnumParamsType.DRONE_CHARGING_MISSION: DroneChargingMissionParams,
    EnumParamsType.DRONE_CHARGING_MESSAGE: DroneChargingMessageParams,
}


def build_default_registry() -> RegistryParamsType:
    """Build and freeze a registry covering every EnumParamsType member.

    Raises:
        TypeRegistryError: If a member of EnumParamsType has no model above
    """
    registry = RegistryParamsType()
    for params_type, model_cls in BUILTIN_PARAMS_MODELS.items():
        registry.register(params_type, model_cls.from_json)
    registry.freeze(require_complete=True)
    return registry


__all__ = ["BUILTIN_PARAMS_MODELS", "build_default_registry"]
