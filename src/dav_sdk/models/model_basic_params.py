# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base model for every payload that travels over a topic.

Wire format:
    A JSON object with camelCase keys. ``protocol`` and ``type`` are always
    present and form the dispatch tag; ``senderId`` names the topic replies
    should be produced to.

    ```json
    {"protocol": "drone-delivery", "type": "message", "senderId": "9b1d...", "status": "en-route"}
    ```
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from dav_sdk.enums import EnumParamsType


class BasicParams(BaseModel):
    """Typed payload tagged with ``(protocol, type)``.

    Subclasses pin ``protocol`` and ``type`` with ``Literal`` defaults so a
    freshly constructed instance always serializes with its own tag.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    protocol: str = Field(description="Protocol half of the dispatch tag")
    type: str = Field(description="Kind half of the dispatch tag")
    sender_id: str | None = Field(
        default=None,
        description="Topic id of the party that produced this payload",
    )

    @property
    def params_type(self) -> EnumParamsType | None:
        """Enumerated tag for this payload, None for tags outside the enum."""
        return EnumParamsType.from_tag(self.protocol, self.type)

    def to_json(self) -> bytes:
        """Serialize to the JSON wire format."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")

    @classmethod
    def from_json(cls, raw: bytes | str) -> Self:
        """Deserialize from the JSON wire format.

        Raises:
            pydantic.ValidationError: If ``raw`` is not valid JSON for this model
        """
        return cls.model_validate_json(raw)


__all__ = ["BasicParams"]
