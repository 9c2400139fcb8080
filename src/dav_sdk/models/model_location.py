# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Geographic location used by need, bid and filter payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ModelLocation(BaseModel):
    """A WGS84 latitude/longitude pair."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    lat: float = Field(ge=-90.0, le=90.0)
    long: float = Field(ge=-180.0, le=180.0)


__all__ = ["ModelLocation"]
