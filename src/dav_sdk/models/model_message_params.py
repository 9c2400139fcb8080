# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Base payload for free-form follow-up messages."""

from __future__ import annotations

from typing import Literal

from dav_sdk.models.model_basic_params import BasicParams


class MessageParams(BasicParams):
    """Follow-up traffic between two parties that already know each other.

    Replies are addressed purely through ``sender_id``.
    """

    type: Literal["message"] = "message"


__all__ = ["MessageParams"]
