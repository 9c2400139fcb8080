# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Params type registry."""

from dav_sdk.registry.registry_default import (
    BUILTIN_PARAMS_MODELS,
    build_default_registry,
)
from dav_sdk.registry.registry_params_type import ParamsDecoder, RegistryParamsType

__all__ = [
    "BUILTIN_PARAMS_MODELS",
    "ParamsDecoder",
    "RegistryParamsType",
    "build_default_registry",
]
