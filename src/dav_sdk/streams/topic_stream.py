# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Topic-carrying async stream base class.

A TopicStream is an async iterable that remembers the broker topic id it (or
the stream it was derived from) consumes. Streams are single-iteration:
they are backed by a live consumer and cannot be replayed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from typing import Generic, TypeVar

from dav_sdk.errors import StreamAlreadyConsumedError

T = TypeVar("T")


class TopicStream(ABC, Generic[T]):
    """Single-iteration async stream tagged with a topic id.

    Subclasses implement ``_iterate()`` as an async generator and
    ``close()`` to release whatever backs the stream.

    Example:
        ```python
        stream = await identity.messages()
        print(stream.topic)
        async for message in stream:
            ...
        ```
    """

    def __init__(self, topic: str) -> None:
        self._topic = topic
        self._consumed = False

    @property
    def topic(self) -> str:
        """Topic id the stream consumes from."""
        return self._topic

    @property
    def is_consumed(self) -> bool:
        return self._consumed

    def __aiter__(self) -> AsyncIterator[T]:
        if self._consumed:
            raise StreamAlreadyConsumedError(
                f"Stream on topic {self._topic} can only be iterated once",
                topic=self._topic,
            )
        self._consumed = True
        return self._iterate()

    @abstractmethod
    def _iterate(self) -> AsyncIterator[T]:
        """Produce the stream elements."""

    @abstractmethod
    async def close(self) -> None:
        """Release the stream; a pending iteration ends normally."""

    async def __aenter__(self) -> TopicStream[T]:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(topic={self._topic!r})"


__all__ = ["TopicStream"]
