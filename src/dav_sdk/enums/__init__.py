# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Enumerations shared across dav_sdk."""

from dav_sdk.enums.enum_params_type import EnumParamsType
from dav_sdk.enums.enum_transport_type import EnumTransportType

__all__ = [
    "EnumParamsType",
    "EnumTransportType",
]
