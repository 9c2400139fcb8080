# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit tests for RegistryParamsType and the default registry.

Tests follow the freeze-after-init lifecycle:
- Registration before freeze
- Rejection of registration after freeze and of duplicates
- Lookups only after freeze
- Exhaustiveness check with require_complete
"""

from __future__ import annotations

import pytest

from dav_sdk.enums import EnumParamsType
from dav_sdk.errors import TypeRegistryError
from dav_sdk.models.drone_delivery import DroneDeliveryNeedParams
from dav_sdk.registry import (
    BUILTIN_PARAMS_MODELS,
    RegistryParamsType,
    build_default_registry,
)

NEED = EnumParamsType.DRONE_DELIVERY_NEED


class TestRegistryParamsTypeRegistration:
    def test_register_then_resolve(self) -> None:
        registry = RegistryParamsType()
        registry.register(NEED, DroneDeliveryNeedParams.from_json)
        registry.freeze()

        assert registry.resolve(NEED) == DroneDeliveryNeedParams.from_json
        assert registry.has(NEED)
        assert registry.entry_count == 1

    def test_duplicate_registration_rejected(self) -> None:
        registry = RegistryParamsType()
        registry.register(NEED, DroneDeliveryNeedParams.from_json)

        with pytest.raises(TypeRegistryError) as exc_info:
            registry.register(NEED, DroneDeliveryNeedParams.from_json)

        assert exc_info.value.context["params_type"] == NEED.value

    def test_registration_after_freeze_rejected(self) -> None:
        registry = RegistryParamsType()
        registry.freeze()

        with pytest.raises(TypeRegistryError, match="frozen"):
            registry.register(NEED, DroneDeliveryNeedParams.from_json)

    def test_non_callable_decoder_rejected(self) -> None:
        with pytest.raises(TypeRegistryError, match="callable"):
            RegistryParamsType().register(NEED, "not a decoder")  # type: ignore[arg-type]


class TestRegistryParamsTypeFreeze:
    def test_lookup_before_freeze_rejected(self) -> None:
        registry = RegistryParamsType()
        registry.register(NEED, DroneDeliveryNeedParams.from_json)

        with pytest.raises(TypeRegistryError, match="freeze"):
            registry.resolve(NEED)
        with pytest.raises(TypeRegistryError):
            registry.has(NEED)
        with pytest.raises(TypeRegistryError):
            registry.list_types()

    def test_freeze_is_idempotent(self) -> None:
        registry = RegistryParamsType()
        registry.freeze()
        registry.freeze()

        assert registry.is_frozen

    def test_unregistered_lookup_returns_none(self) -> None:
        registry = RegistryParamsType()
        registry.freeze()

        assert registry.resolve(NEED) is None
        assert not registry.has(NEED)

    def test_require_complete_names_missing_tags(self) -> None:
        registry = RegistryParamsType()
        registry.register(NEED, DroneDeliveryNeedParams.from_json)

        with pytest.raises(TypeRegistryError) as exc_info:
            registry.freeze(require_complete=True)

        missing = exc_info.value.context["missing"]
        assert NEED.value not in missing
        assert EnumParamsType.DRONE_CHARGING_MESSAGE.value in missing
        assert not registry.is_frozen


class TestDefaultRegistry:
    def test_covers_every_tag(self) -> None:
        registry = build_default_registry()

        assert registry.is_frozen
        assert set(registry.list_types()) == set(EnumParamsType)
        assert set(BUILTIN_PARAMS_MODELS) == set(EnumParamsType)

    def test_models_carry_their_tag(self) -> None:
        for params_type, model_cls in BUILTIN_PARAMS_MODELS.items():
            fields = model_cls.model_fields
            assert fields["protocol"].default == params_type.protocol
            assert fields["type"].default == params_type.kind

    def test_each_call_builds_a_new_registry(self) -> None:
        assert build_default_registry() is not build_default_registry()
