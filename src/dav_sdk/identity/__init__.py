# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Identity orchestrator."""

from dav_sdk.identity.identity import Identity

__all__ = ["Identity"]
