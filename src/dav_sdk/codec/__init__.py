# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Wire codec for typed params."""

from dav_sdk.codec.params_codec import ParamsCodec

__all__ = ["ParamsCodec"]
