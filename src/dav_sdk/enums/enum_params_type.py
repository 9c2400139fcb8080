# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Wire tag enumeration for typed parameter payloads.

Every payload that travels over a topic carries a ``protocol`` and a ``type``
field. Together they form the dispatch tag used by the params registry to
pick a decoder. The enumeration is the closed set of tags this SDK knows
about; tags seen on the wire that are not members are surfaced as
``UnrecognizedTypeError`` by the codec.
"""

from __future__ import annotations

from enum import Enum

TAG_SEPARATOR = ":"


class EnumParamsType(str, Enum):
    """Known ``(protocol, type)`` tags.

    Values are ``"<protocol>:<type>"`` so the enum value is also the
    human-readable tag used in log records.
    """

    DRONE_DELIVERY_NEED = "drone-delivery:need"
    DRONE_DELIVERY_BID = "drone-delivery:bid"
    DRONE_DELIVERY_MISSION = "drone-delivery:mission"
    DRONE_DELIVERY_MESSAGE = "drone-delivery:message"
    DRONE_CHARGING_NEED = "drone-charging:need"
    DRONE_CHARGING_BID = "drone-charging:bid"
    DRONE_CHARGING_MISSION = "drone-charging:mission"
    DRONE_CHARGING_MESSAGE = "drone-charging:message"

    @property
    def protocol(self) -> str:
        """Protocol half of the tag (e.g. ``"drone-delivery"``)."""
        return self.value.split(TAG_SEPARATOR, 1)[0]

    @property
    def kind(self) -> str:
        """Kind half of the tag (e.g. ``"need"``)."""
        return self.value.split(TAG_SEPARATOR, 1)[1]

    @classmethod
    def from_tag(cls, protocol: str, kind: str) -> EnumParamsType | None:
        """Look up the member for a ``(protocol, kind)`` pair.

        Returns:
            The matching member, or None when the pair is not a known tag.
        """
        try:
            return cls(f"{protocol}{TAG_SEPARATOR}{kind}")
        except ValueError:
            return None


__all__ = ["EnumParamsType", "TAG_SEPARATOR"]
