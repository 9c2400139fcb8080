# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base payload for bids."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from dav_sdk.models.model_basic_params import BasicParams


class BidParams(BasicParams):
    """A service provider's answer to a need."""

    type: Literal["bid"] = "bid"
    id: str | None = Field(default=None, description="Bid channel topic id")
    need_id: str | None = Field(default=None, description="Topic id of the need")


__all__ = ["BidParams"]
