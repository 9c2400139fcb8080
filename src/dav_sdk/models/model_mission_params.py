# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base payload for missions."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from dav_sdk.models.model_basic_params import BasicParams


class MissionParams(BasicParams):
    """An agreed unit of work derived from a need/bid exchange."""

    type: Literal["mission"] = "mission"
    id: str | None = Field(default=None, description="Mission channel topic id")
    need_id: str | None = Field(default=None, description="Topic id of the need")
    bid_id: str | None = Field(default=None, description="Topic id of the accepted bid")


__all__ = ["MissionParams"]
