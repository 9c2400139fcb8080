# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base payload for needs and need filters."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from dav_sdk.models.model_basic_params import BasicParams


class NeedParams(BasicParams):
    """A published request for service.

    ``id`` is the topic bids for this need are produced to. It is stamped by
    ``Identity.publish_need`` and is None until then.
    """

    type: Literal["need"] = "need"
    id: str | None = Field(default=None, description="Bid channel topic id")


class NeedFilterParams(BasicParams):
    """Filter a service provider registers to receive matching needs.

    Filters are only sent to the announcement API, never produced to a
    topic, so they have no registered decoder.
    """

    type: Literal["need_filter"] = "need_filter"


__all__ = ["NeedFilterParams", "NeedParams"]
