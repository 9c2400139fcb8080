# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Structural protocols for broker sessions and raw channels."""

from dav_sdk.protocols.protocol_broker_session import ProtocolBrokerSession
from dav_sdk.protocols.protocol_raw_channel import (
    ProtocolRawChannel,
    ProtocolRawRecord,
)

__all__ = [
    "ProtocolBrokerSession",
    "ProtocolRawChannel",
    "ProtocolRawRecord",
]
