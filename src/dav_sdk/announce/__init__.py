# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""HTTP announcement of topics to the DAV API."""

from dav_sdk.announce.announcement_client import AnnouncementClient

__all__ = ["AnnouncementClient"]
