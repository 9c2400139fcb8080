# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topic-tagged async streams and their combinators."""

from dav_sdk.streams.stream_combinators import (
    flat_map_merge,
    from_awaitable,
    map_stream,
    merge_all,
)
from dav_sdk.streams.topic_stream import TopicStream
from dav_sdk.streams.typed_stream import TypedStream

__all__ = [
    "TopicStream",
    "TypedStream",
    "flat_map_merge",
    "from_awaitable",
    "map_stream",
    "merge_all",
]
